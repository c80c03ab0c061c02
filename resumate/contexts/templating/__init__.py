"""
Templating Context

Responsibilities:
- Manages the resume document model (structured input of every template)
- Applies shared formatting rules (dates, contact links, section visibility)
- Renders documents into section-ordered visual trees per named template
- Resolves template names and accent color presets

Owns: ResumeDocument, formatting rules, template variants, RenderedTree
Never: Writes files or produces markup
"""

from typing import Any, Mapping, Optional, Union

from resumate.contexts.templating.config_resolver import resolve_accent_color
from resumate.contexts.templating.defaults import DEFAULT_TEMPLATE
from resumate.contexts.templating.formatting import format_date
from resumate.contexts.templating.rendered_tree import Node, RenderedTree
from resumate.contexts.templating.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeDocument,
)
from resumate.contexts.templating.template_registry import TemplateKind, TemplateRegistry

_registry = TemplateRegistry()


def render_resume(
    document: Union[ResumeDocument, Mapping[str, Any]],
    accent_color: Optional[str] = None,
    template: Union[str, TemplateKind] = DEFAULT_TEMPLATE,
) -> RenderedTree:
    """
    Render a resume with a named template.

    Args:
        document: ResumeDocument, or a mapping in the persisted shape
        accent_color: CSS color; defaults to the template's preset accent
        template: Template name or TemplateKind

    Returns:
        RenderedTree for the selected template

    Raises:
        ValueError: If document is None or has an invalid structure
        TemplateNotFoundError: If the template name is unknown
    """
    if document is None:
        raise ValueError("render_resume requires a resume document")
    if not isinstance(document, ResumeDocument):
        document = ResumeDocument.from_dict(document)

    renderer = _registry.get_template(template)
    return renderer.render(document, resolve_accent_color(renderer.name, accent_color))


__all__ = [
    # Orchestration
    "render_resume",
    "resolve_accent_color",
    "format_date",
    # Template lookup
    "TemplateKind",
    "TemplateRegistry",
    # Data structure classes
    "ResumeDocument",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "RenderedTree",
    "Node",
]
