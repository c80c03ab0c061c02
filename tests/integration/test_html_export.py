"""
Integration tests for HTML/JSON export of rendered resumes.
"""

import json
import sys
from pathlib import Path

import pytest
from loguru import logger

from resumate.contexts.rendering import export_resume, render_html
from resumate.contexts.rendering.html_exporter import css_declarations
from resumate.contexts.templating import ResumeDocument, render_resume
from resumate.contexts.templating.exceptions import TemplateNotFoundError

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def sample_document():
    return ResumeDocument.from_file(FIXTURES_PATH / "sample_resume.yaml")


@pytest.fixture
def restore_logger():
    """export_resume(log_dir=...) reconfigures loguru; put the default sink back."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_css_declarations():
    assert css_declarations({"color": "red", "border-left": "2px solid red"}) == (
        "color: red; border-left: 2px solid red"
    )
    assert css_declarations({}) == ""


@pytest.mark.integration
def test_render_html_classic(sample_document):
    html = render_html(render_resume(sample_document, "#123456", "classic"))

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Ada Okafor</title>" in html
    assert '<h1 class="name" style="color: #123456">Ada Okafor</h1>' in html
    assert 'href="https://www.linkedin.com/in/ada-okafor"' in html
    assert ">linkedin.com/in/ada-okafor</a>" in html
    assert 'href="mailto:ada.okafor@example.com"' in html
    assert 'data-section="experience"' in html
    assert "PROFESSIONAL EXPERIENCE" in html
    assert "white-space: pre-line" in html


@pytest.mark.integration
def test_render_html_modern(sample_document):
    html = render_html(render_resume(sample_document, "teal", "modern"))

    assert '<aside class="header"' in html
    assert "<main" in html
    assert html.count('class="badge"') == 8
    assert "background-color: teal" in html


@pytest.mark.integration
def test_render_html_escapes_text():
    tree = render_resume(
        {"personal_info": {"full_name": "<script>alert(1)</script>"}, "skills": ["C & C++"]},
        "red",
        "classic",
    )
    html = render_html(tree)

    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "C &amp; C++" in html


@pytest.mark.integration
def test_render_html_custom_title(sample_document):
    html = render_html(render_resume(sample_document, "red"), title="CV - Ada")
    assert "<title>CV - Ada</title>" in html


@pytest.mark.integration
def test_export_html(sample_document, tmp_path):
    output_path = tmp_path / "out" / "resume.html"
    result = export_resume(sample_document, output_path, template="modern", accent_color="navy")

    assert result.success
    assert result.output_path == output_path
    assert result.template == "modern"
    assert result.accent_color == "navy"
    assert output_path.exists()
    assert "Ada Okafor" in output_path.read_text(encoding="utf-8")


@pytest.mark.integration
def test_export_json(sample_document, tmp_path):
    output_path = tmp_path / "resume.json"
    result = export_resume(sample_document, output_path, output_format="json")

    assert result.success
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["template"] == "classic"
    assert data["accent_color"] == "#6B7280"
    assert data["root"]["role"] == "resume"


@pytest.mark.integration
def test_export_refuses_overwrite(sample_document, tmp_path):
    output_path = tmp_path / "resume.html"
    output_path.write_text("existing", encoding="utf-8")

    result = export_resume(sample_document, output_path, overwrite_allowed=False)

    assert not result.success
    assert result.output_path is None
    assert "already exists" in result.errors[0]
    assert output_path.read_text(encoding="utf-8") == "existing"


@pytest.mark.integration
def test_export_writes_session_log(sample_document, tmp_path, restore_logger):
    log_dir = tmp_path / "logs"
    result = export_resume(sample_document, tmp_path / "resume.html", log_dir=log_dir)

    assert result.success
    log_text = (log_dir / "render.log").read_text(encoding="utf-8")
    assert "[render] Exporting classic resume to resume.html" in log_text
    assert "[render] Export succeeded" in log_text


@pytest.mark.integration
def test_export_invalid_arguments(sample_document, tmp_path):
    with pytest.raises(ValueError):
        export_resume(sample_document, tmp_path / "resume.pdf", output_format="pdf")
    with pytest.raises(TemplateNotFoundError):
        export_resume(sample_document, tmp_path / "resume.html", template="minimal")
    with pytest.raises(ValueError):
        export_resume({"experience": "oops"}, tmp_path / "resume.html")
