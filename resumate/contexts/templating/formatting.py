"""
Shared formatting rules used by every template variant.

Dates, contact links, entry labels, and section visibility are derived here once
so the template variants only decide layout and where the accent color goes.
"""

import re
from datetime import date
from typing import List, Optional

from resumate.contexts.templating.defaults import (
    CURRENT_POSITION_LABEL,
    NAME_PLACEHOLDER,
    SECTION_ORDER,
)
from resumate.contexts.templating.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ResumeDocument,
)

# Year, hyphen, 1-or-2-digit month; an optional day (HTML date inputs) is ignored
DATE_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})(?:-\d{1,2})?\s*$")

URL_PREFIX_PATTERN = re.compile(r"^https?://(www\.)?")


def format_date(date_str: Optional[str]) -> str:
    """
    Format a "YYYY-MM" string as abbreviated month and year.

    Uses the process locale's short month names, so under the default C locale
    "2021-03" becomes "Mar 2021".

    Args:
        date_str: Date string, or None

    Returns:
        Display label, or "" for missing or malformed input

    Examples:
        >>> format_date("2021-03")
        'Mar 2021'
        >>> format_date("2021-13")
        ''
    """
    if not date_str:
        return ""

    match = DATE_PATTERN.match(str(date_str))
    if not match:
        return ""

    year, month = int(match.group(1)), int(match.group(2))
    try:
        return date(year, month, 1).strftime("%b %Y")
    except ValueError:
        return ""


def format_date_range(entry: ExperienceEntry) -> str:
    """Format "{start} - {end}", with "Present" for current positions."""
    end = CURRENT_POSITION_LABEL if entry.is_current else format_date(entry.end_date)
    return f"{format_date(entry.start_date)} - {end}"


def format_degree(entry: EducationEntry) -> str:
    """Format "{degree} in {field}", or just the degree when no field is given."""
    degree = entry.degree or ""
    if entry.field:
        return f"{degree} in {entry.field}"
    return degree


def format_gpa(entry: EducationEntry) -> Optional[str]:
    return f"GPA: {entry.gpa}" if entry.gpa else None


def strip_url_prefix(url: str) -> str:
    """
    Strip a leading http(s):// and a following "www." for display.

    Examples:
        >>> strip_url_prefix("https://www.linkedin.com/in/example")
        'linkedin.com/in/example'
    """
    return URL_PREFIX_PATTERN.sub("", url)


def display_name(document: ResumeDocument) -> str:
    return document.full_name or NAME_PLACEHOLDER


def summary_title(document: ResumeDocument) -> Optional[str]:
    """
    Title line for templates that headline the summary.

    Returns the headline, else the first non-empty summary line, else None.
    """
    info = document.personal_info
    if info and info.headline:
        return info.headline
    if document.professional_summary:
        for line in document.professional_summary.splitlines():
            if line.strip():
                return line
    return None


def visible_sections(document: ResumeDocument) -> List[str]:
    """
    Keys of the sections that have content, in canonical order.

    A section is visible only when its data is present and non-empty; the
    header is not a section and is always rendered.
    """
    present = {
        "summary": bool(document.professional_summary),
        "experience": len(document.experience) > 0,
        "project": len(document.project) > 0,
        "education": len(document.education) > 0,
        "skills": len(document.skills) > 0,
    }
    return [key for key in SECTION_ORDER if present[key]]
