"""
Resume Document Structure

Defines the structured representation of a resume as produced by the form-entry
UI or persisted storage. This structure is the only input of the template
variants; every field is optional so absence is handled explicitly.

Field names follow the persisted JSON shape (snake_case, singular "project").
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from omegaconf import OmegaConf

from resumate.contexts.templating.exceptions import InvalidResumeStructureError


def _text(value: Any) -> Optional[str]:
    """Normalize a scalar field: None and blank strings become None."""
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


def _flag(value: Any, key: str) -> bool:
    """Normalize a boolean field; form payloads may send "true"/"false" strings."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false", ""):
        return value.strip().lower() == "true"
    raise InvalidResumeStructureError(f"Field '{key}' must be a boolean, got {value!r}")


def _entries(data: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    """Fetch a sequence of mapping entries, validating its shape."""
    items = data.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise InvalidResumeStructureError(
            f"Field '{key}' must be a list, got {type(items).__name__}"
        )
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise InvalidResumeStructureError(
                f"Entry {index} of '{key}' must be a mapping, got {type(item).__name__}"
            )
    return items


@dataclass(frozen=True)
class PersonalInfo:
    """
    Contact and identity block shown in every template header.

    Attributes:
        full_name: Display name (templates fall back to "Your Name")
        email: Email address, rendered as a mailto link
        phone: Phone number
        location: Free-text location (e.g. "Berlin, DE")
        linkedin: LinkedIn profile URL
        website: Personal website URL
        headline: Short professional title
    """

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None
    headline: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PersonalInfo":
        return cls(**{name: _text(data.get(name)) for name in cls.__dataclass_fields__})


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Single work experience entry.

    Attributes:
        position: Job title
        company: Employer name
        start_date: "YYYY-MM" start month
        end_date: "YYYY-MM" end month (ignored when is_current)
        is_current: Whether the position is ongoing
        description: Free text, line breaks preserved
    """

    position: Optional[str] = None
    company: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: bool = False
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperienceEntry":
        return cls(
            position=_text(data.get("position")),
            company=_text(data.get("company")),
            start_date=_text(data.get("start_date")),
            end_date=_text(data.get("end_date")),
            is_current=_flag(data.get("is_current"), "is_current"),
            description=_text(data.get("description")),
        )


@dataclass(frozen=True)
class EducationEntry:
    """Single education entry (degree, field of study, institution, date, GPA)."""

    degree: Optional[str] = None
    field: Optional[str] = None
    institution: Optional[str] = None
    graduation_date: Optional[str] = None
    gpa: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EducationEntry":
        return cls(**{name: _text(data.get(name)) for name in cls.__dataclass_fields__})


@dataclass(frozen=True)
class ProjectEntry:
    """Single project entry."""

    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectEntry":
        return cls(name=_text(data.get("name")), description=_text(data.get("description")))


@dataclass(frozen=True)
class ResumeDocument:
    """
    Structured representation of a complete resume.

    Constructed entirely by the caller (form state or persisted storage) and
    handed to a template variant. Templates only read from it.

    Attributes:
        personal_info: Identity and contact block (None if never filled in)
        professional_summary: Free-text summary, embedded line breaks preserved
        experience: Work history in document order
        education: Education history in document order
        project: Projects in document order
        skills: Skill names in document order (duplicates kept)
    """

    personal_info: Optional[PersonalInfo] = None
    professional_summary: Optional[str] = None
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    project: List[ProjectEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeDocument":
        """
        Build a ResumeDocument from the persisted JSON/YAML shape.

        Unknown keys are ignored and null values are treated as absent.

        Args:
            data: Mapping with any of the ResumeDocument field names

        Returns:
            ResumeDocument instance

        Raises:
            InvalidResumeStructureError: If the root or a nested field has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise InvalidResumeStructureError(
                f"Resume data must be a mapping, got {type(data).__name__}"
            )

        personal_info = data.get("personal_info")
        if personal_info is not None and not isinstance(personal_info, Mapping):
            raise InvalidResumeStructureError(
                f"Field 'personal_info' must be a mapping, got {type(personal_info).__name__}"
            )

        skills = data.get("skills") or []
        if not isinstance(skills, list):
            raise InvalidResumeStructureError(
                f"Field 'skills' must be a list, got {type(skills).__name__}"
            )

        return cls(
            personal_info=PersonalInfo.from_dict(personal_info) if personal_info else None,
            professional_summary=_text(data.get("professional_summary")),
            experience=[ExperienceEntry.from_dict(e) for e in _entries(data, "experience")],
            education=[EducationEntry.from_dict(e) for e in _entries(data, "education")],
            project=[ProjectEntry.from_dict(p) for p in _entries(data, "project")],
            skills=["" if skill is None else str(skill) for skill in skills],
        )

    @classmethod
    def from_file(cls, path: Path) -> "ResumeDocument":
        """
        Load a resume from a YAML or JSON file.

        Args:
            path: Path to the resume file

        Returns:
            ResumeDocument instance

        Raises:
            FileNotFoundError: If path does not exist
            InvalidResumeStructureError: If the file content has the wrong shape
        """
        if type(path) is str:
            path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Resume file not found: {path}")

        # Free text may contain "${...}"; it is resume content, not interpolation
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Return the persisted shape of this document."""
        return asdict(self)

    @property
    def full_name(self) -> Optional[str]:
        return self.personal_info.full_name if self.personal_info else None
