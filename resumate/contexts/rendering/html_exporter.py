"""
HTML Export Module

Serializes rendered resume trees into standalone HTML documents and writes them
to disk for display, sharing, or a downstream print-to-PDF step.
"""

import json
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, TemplateError

from resumate.contexts.rendering.logger import (
    _log_debug,
    log_export_result,
    log_export_start,
    setup_rendering_logger,
)
from resumate.contexts.templating import render_resume
from resumate.contexts.templating.defaults import DEFAULT_TEMPLATE
from resumate.contexts.templating.exceptions import TemplateRenderError
from resumate.contexts.templating.rendered_tree import RenderedTree
from resumate.contexts.templating.resume_data_structure import ResumeDocument

load_dotenv()
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

TEMPLATE_DIR = Path(__file__).parent / "template"

# Output formats supported by export_resume()
EXPORT_FORMATS = ["html", "json"]


def css_declarations(style: Mapping[str, str]) -> str:
    """Serialize a style dict to an inline CSS declaration list."""
    return "; ".join(f"{prop}: {value}" for prop, value in style.items())


def _create_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["css"] = css_declarations
    return env


_env = _create_environment()


@dataclass
class ExportResult:
    """
    Result of exporting a resume.

    Attributes:
        success: Whether the file was written
        output_path: Path to the written file (None if failed)
        template: Template variant used
        accent_color: Accent color used
        errors: Reasons the export failed
    """

    success: bool
    output_path: Optional[Path] = None
    template: str = ""
    accent_color: str = ""
    errors: List[str] = field(default_factory=list)


def render_html(tree: RenderedTree, title: Optional[str] = None) -> str:
    """
    Serialize a rendered tree to a complete HTML document.

    All text and attribute values are HTML-escaped.

    Args:
        tree: Output of a template variant
        title: Document title (defaults to the rendered name)

    Returns:
        HTML string

    Raises:
        TemplateRenderError: If the Jinja2 templates fail to render
    """
    if title is None:
        name_node = tree.find("name")
        title = name_node.text if name_node is not None else "Resume"

    try:
        template = _env.get_template("document.html.jinja")
        return template.render(root=tree.root, title=title)
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to serialize rendered resume to HTML",
            template_name=tree.template,
            original_error=e,
        ) from e


def render_json(tree: RenderedTree) -> str:
    """Serialize a rendered tree to indented JSON."""
    return json.dumps(tree.to_dict(), indent=2, ensure_ascii=False)


def export_resume(
    document: Union[ResumeDocument, Mapping[str, Any]],
    output_path: Optional[Path] = None,
    template: str = DEFAULT_TEMPLATE,
    accent_color: Optional[str] = None,
    output_format: str = "html",
    overwrite_allowed: bool = True,
    log_dir: Optional[Path] = None,
) -> ExportResult:
    """
    Render a resume and write it to disk.

    Args:
        document: ResumeDocument or mapping in the persisted shape
        output_path: Destination file (default: RESULTS_PATH/resume_<template>.<format>)
        template: Template name
        accent_color: CSS color (default: template preset)
        output_format: "html" or "json"
        overwrite_allowed: Replace an existing file at output_path
        log_dir: If given, configure file + console logging for this session there

    Returns:
        ExportResult with success status and output path

    Raises:
        ValueError: If document is None or structurally invalid, or format is unknown
        TemplateNotFoundError: If the template name is unknown
    """
    if output_format not in EXPORT_FORMATS:
        raise ValueError(f"Unknown output format '{output_format}'. Valid formats: {EXPORT_FORMATS}")

    tree = render_resume(document, accent_color=accent_color, template=template)

    if output_path is None:
        output_path = RESULTS_PATH / f"resume_{tree.template}.{output_format}"
    output_path = Path(output_path)

    if log_dir is not None:
        setup_rendering_logger(Path(log_dir), tree.template)

    start_time = time.time()
    log_export_start(output_path, tree.template, tree.accent_color)

    if output_path.exists() and not overwrite_allowed:
        result = ExportResult(
            success=False,
            template=tree.template,
            accent_color=tree.accent_color,
            errors=[f"Output file already exists: {output_path}"],
        )
        log_export_result(result, time.time() - start_time)
        return result

    content = render_html(tree) if output_format == "html" else render_json(tree)
    _log_debug(f"Serialized {len(content)} characters of {output_format}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")

    result = ExportResult(
        success=True,
        output_path=output_path,
        template=tree.template,
        accent_color=tree.accent_color,
    )
    log_export_result(result, time.time() - start_time)
    return result
