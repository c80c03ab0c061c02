"""
Template Preset Resolution

Loads the per-template theme presets and resolves the accent color a render
should use. An explicit accent color always wins over the template preset.

Examples:
    >>> resolve_accent_color("modern")
    '#3B82F6'

    >>> resolve_accent_color("modern", "teal")
    'teal'
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from resumate.contexts.templating.defaults import DEFAULT_ACCENT_COLOR
from resumate.contexts.templating.logger import _log_debug

load_dotenv()
TEMPLATE_PRESETS_PATH = Path(
    os.getenv(
        "RESUME_PRESETS_PATH",
        str(Path(__file__).parent / "config" / "template_presets.yaml"),
    )
)


def load_template_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load template_presets.yaml into a plain dict keyed by template name.

    Args:
        config_path: Optional path to config file (defaults to RESUME_PRESETS_PATH env variable)

    Returns:
        Dict mapping template names to their preset config
        Example: {"modern": {"accent": "#3B82F6", ...}, ...}
    """
    if config_path is None:
        config_path = TEMPLATE_PRESETS_PATH

    presets = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    return {str(name).lower(): config for name, config in (presets or {}).items()}


def resolve_accent_color(
    template_name: str,
    accent_color: Optional[str] = None,
    config_path: Path = None,
) -> str:
    """
    Pick the accent color for a render.

    Args:
        template_name: Template the resume will be rendered with
        accent_color: Caller-selected color, if any
        config_path: Optional path to template_presets.yaml

    Returns:
        The explicit accent color, else the template preset, else DEFAULT_ACCENT_COLOR
    """
    if accent_color:
        return accent_color

    preset = load_template_presets(config_path).get(str(template_name).lower(), {})
    resolved = preset.get("accent") or DEFAULT_ACCENT_COLOR
    _log_debug(f"No accent color given, using {resolved} for {template_name}")
    return resolved
