"""
Base class for template variants.

Each variant decides layout and where the accent color is applied; the content
of every block (contact items, entry labels, badges) comes from the shared
builders here so all variants agree on formatting and visibility.
"""

from abc import ABC, abstractmethod
from typing import List

from resumate.contexts.templating.defaults import CONTACT_FIELDS, CONTACT_ICONS, LINK_FIELDS
from resumate.contexts.templating.formatting import (
    format_date,
    format_date_range,
    format_degree,
    format_gpa,
    strip_url_prefix,
    visible_sections,
)
from resumate.contexts.templating.logger import log_render
from resumate.contexts.templating.rendered_tree import PRESERVE_LINE_BREAKS, Node, RenderedTree
from resumate.contexts.templating.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeDocument,
)


class ResumeTemplate(ABC):
    """Renders a ResumeDocument into a RenderedTree for one named layout."""

    name: str = ""

    def render(self, document: ResumeDocument, accent_color: str) -> RenderedTree:
        """
        Render a resume document with the given accent color.

        Args:
            document: Resume to render (read only)
            accent_color: Any CSS color value

        Returns:
            Freshly built RenderedTree

        Raises:
            ValueError: If document or accent_color is None
        """
        if document is None:
            raise ValueError(f"{self.name} template requires a resume document")
        if accent_color is None:
            raise ValueError(f"{self.name} template requires an accent color")

        root = self.build(document, accent_color, visible_sections(document))
        tree = RenderedTree(template=self.name, accent_color=accent_color, root=root)
        log_render(self.name, tree.section_keys(), accent_color)
        return tree

    @abstractmethod
    def build(self, document: ResumeDocument, accent: str, sections: List[str]) -> Node:
        """Build the root node; `sections` lists the visible section keys in order."""

    # Shared block builders

    @staticmethod
    def contact_items(document: ResumeDocument) -> List[Node]:
        """One node per present contact field, in header order."""
        info = document.personal_info
        if info is None:
            return []

        items = []
        for field_name in CONTACT_FIELDS:
            value = getattr(info, field_name)
            if not value:
                continue

            if field_name == "email":
                content = Node("a", role="contact-link", text=value, attrs={"href": f"mailto:{value}"})
            elif field_name in LINK_FIELDS:
                content = Node(
                    "a",
                    role="contact-link",
                    text=strip_url_prefix(value),
                    attrs={"href": value, "target": "_blank", "rel": "noreferrer"},
                )
            else:
                content = Node("span", role="contact-text", text=value)

            items.append(
                Node(
                    "div",
                    role="contact",
                    attrs={"data-field": field_name, "data-icon": CONTACT_ICONS[field_name]},
                    children=[content],
                )
            )
        return items

    @staticmethod
    def summary_body(document: ResumeDocument) -> Node:
        return Node(
            "p",
            role="summary",
            text=document.professional_summary,
            style=dict(PRESERVE_LINE_BREAKS),
        )

    @staticmethod
    def experience_parts(entry: ExperienceEntry) -> dict:
        """Position, company, date range and optional description nodes of one entry."""
        parts = {
            "position": Node("h3", role="position", text=entry.position or ""),
            "company": Node("p", role="company", text=entry.company or ""),
            "dates": Node("p", role="dates", text=format_date_range(entry)),
            "description": None,
        }
        if entry.description:
            parts["description"] = Node(
                "div", role="description", text=entry.description, style=dict(PRESERVE_LINE_BREAKS)
            )
        return parts

    @staticmethod
    def education_parts(entry: EducationEntry) -> dict:
        """Degree, institution, graduation date and optional GPA nodes of one entry."""
        gpa = format_gpa(entry)
        return {
            "degree": Node("h3", role="degree", text=format_degree(entry)),
            "institution": Node("p", role="institution", text=entry.institution or ""),
            "graduation": Node("span", role="graduation", text=format_date(entry.graduation_date)),
            "gpa": Node("span", role="gpa", text=gpa) if gpa else None,
        }

    @staticmethod
    def project_parts(entry: ProjectEntry) -> dict:
        parts = {"name": Node("h3", role="project-name", text=entry.name or ""), "description": None}
        if entry.description:
            parts["description"] = Node(
                "div", role="description", text=entry.description, style=dict(PRESERVE_LINE_BREAKS)
            )
        return parts

    @staticmethod
    def skill_badges(document: ResumeDocument, style: dict) -> List[Node]:
        """One badge per skill, in input order, duplicates kept."""
        return [Node("span", role="badge", text=skill, style=dict(style)) for skill in document.skills]


def compact(*nodes) -> List[Node]:
    """Drop None placeholders for optional nodes."""
    return [node for node in nodes if node is not None]
