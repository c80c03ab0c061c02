from enum import Enum
from typing import Dict, List, Type

from resumate.contexts.templating.exceptions import TemplateNotFoundError
from resumate.contexts.templating.templates import ClassicTemplate, ModernTemplate, ResumeTemplate


class TemplateKind(str, Enum):
    """Named template variants."""

    CLASSIC = "classic"
    MODERN = "modern"


TEMPLATE_CLASSES: Dict[TemplateKind, Type[ResumeTemplate]] = {
    TemplateKind.CLASSIC: ClassicTemplate,
    TemplateKind.MODERN: ModernTemplate,
}


class TemplateRegistry:
    """
    Registry for resolving template names to template variants.

    Names are matched case-insensitively ("Classic", "classic", TemplateKind.CLASSIC).
    Template instances are stateless, so one instance per kind is cached and shared.
    """

    def __init__(self, template_classes: Dict[TemplateKind, Type[ResumeTemplate]] = None):
        """
        Initialize the template registry.

        Args:
            template_classes: Mapping of kinds to template classes. Defaults to
                              the built-in Classic and Modern variants.
        """
        self.template_classes = dict(template_classes or TEMPLATE_CLASSES)
        self._cache: Dict[TemplateKind, ResumeTemplate] = {}

    def resolve_kind(self, name) -> TemplateKind:
        """
        Resolve a template name to its TemplateKind.

        Raises:
            TemplateNotFoundError: If no registered template has that name
        """
        if isinstance(name, TemplateKind):
            kind = name
        else:
            try:
                kind = TemplateKind(str(name).strip().lower())
            except ValueError:
                raise TemplateNotFoundError(str(name), self.available_templates()) from None

        if kind not in self.template_classes:
            raise TemplateNotFoundError(kind.value, self.available_templates())
        return kind

    def get_template(self, name) -> ResumeTemplate:
        """
        Get a template by name, instantiating and caching it if necessary.

        Args:
            name: Template name (e.g., 'modern') or TemplateKind

        Returns:
            ResumeTemplate instance

        Raises:
            TemplateNotFoundError: If the template is not registered
        """
        kind = self.resolve_kind(name)

        if kind in self._cache:
            return self._cache[kind]

        template = self.template_classes[kind]()
        self._cache[kind] = template
        return template

    def available_templates(self) -> List[str]:
        return [kind.value for kind in self.template_classes]

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name) -> bool:
        return self.resolve_kind(name) in self._cache
