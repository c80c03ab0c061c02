"""Template variants: one ResumeTemplate subclass per named layout."""

from resumate.contexts.templating.templates.base import ResumeTemplate
from resumate.contexts.templating.templates.classic import ClassicTemplate
from resumate.contexts.templating.templates.modern import ModernTemplate

__all__ = ["ResumeTemplate", "ClassicTemplate", "ModernTemplate"]
