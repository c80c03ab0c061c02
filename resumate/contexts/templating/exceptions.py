"""Custom exceptions for templating context."""

from typing import Optional


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when a resume payload does not have the expected shape.

    Raised when the root is not a mapping, a sequence field is not a list, or an
    entry inside a sequence is not a mapping. Missing fields are never an error.
    """

    pass


class TemplateNotFoundError(KeyError):
    """
    Exception raised when a template name does not match any registered variant.

    Attributes:
        name: The requested template name
        available: Names of the registered templates
    """

    def __init__(self, name: str, available: list):
        self.name = name
        self.available = list(available)
        super().__init__(f"Template '{name}' not found. Available templates: {self.available}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class TemplateRenderError(Exception):
    """
    Exception raised when serializing a rendered tree fails.

    Attributes:
        message: Error description
        template_name: Name of the template variant being serialized
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"Template: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
