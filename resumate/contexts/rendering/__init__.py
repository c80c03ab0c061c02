"""
Rendering Context

Responsibilities:
- Serializes rendered resume trees to HTML (and JSON)
- Writes exported files and reports the outcome

Owns: Markup generation, output files
Never: Decides section content, ordering, or visibility
"""

from resumate.contexts.rendering.html_exporter import (
    ExportResult,
    export_resume,
    render_html,
    render_json,
)

__all__ = ["ExportResult", "export_resume", "render_html", "render_json"]
