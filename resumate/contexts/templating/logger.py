"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_render(template_name: str, section_keys: list, accent_color: str) -> None:
    """Log a completed render with its visible sections."""
    shown = ", ".join(section_keys) if section_keys else "header only"
    _log_debug(f"Rendered {template_name} template (accent {accent_color}): {shown}")
