"""
Integration tests for the Modern template.
Tests: sidebar/main split, accent placement, and the repeated skills block.
"""

from pathlib import Path

import pytest

from resumate.contexts.templating import PersonalInfo, ResumeDocument
from resumate.contexts.templating.templates import ModernTemplate

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
ACCENT = "rgb(220, 38, 38)"


@pytest.fixture
def tree():
    document = ResumeDocument.from_file(FIXTURES_PATH / "sample_resume.yaml")
    return ModernTemplate().render(document, ACCENT)


def _section_keys(node):
    return [n.attrs["data-section"] for n in node.find_all("section")]


@pytest.mark.integration
def test_layout(tree):
    assert tree.template == "modern"
    sidebar, main = tree.root.children
    assert sidebar.tag == "aside"
    assert main.tag == "main"

    assert _section_keys(sidebar) == ["skills"]
    assert _section_keys(main) == ["summary", "experience", "project", "education", "skills"]


@pytest.mark.integration
def test_sidebar_identity_and_contact(tree):
    sidebar = tree.root.children[0]
    assert sidebar.find("name").text == "Ada Okafor"
    assert "color" not in sidebar.find("name").style
    assert sidebar.find("headline").text == "Senior Data Engineer"
    assert sidebar.find("subheading").text == "Contact"
    assert len(sidebar.find_all("contact")) == 5


@pytest.mark.integration
def test_main_title_and_summary(tree):
    main = tree.find("main")
    assert main.find("title").text == "Senior Data Engineer"

    summary = tree.section("summary").find("summary")
    assert summary.text.startswith("Data engineer with eight years")
    assert "\n" in summary.text


@pytest.mark.integration
def test_title_falls_back_to_summary_first_line():
    document = ResumeDocument(professional_summary="Builder of things\nand more")
    tree = ModernTemplate().render(document, ACCENT)
    assert tree.find("title").text == "Builder of things"


@pytest.mark.integration
def test_no_title_without_headline_or_summary():
    document = ResumeDocument(personal_info=PersonalInfo(full_name="Ada"))
    tree = ModernTemplate().render(document, ACCENT)
    assert tree.find("title") is None
    assert tree.find("main-header") is None
    assert tree.section("summary") is None


@pytest.mark.integration
def test_accent_on_dividers_company_and_institution(tree):
    for heading in tree.find_all("heading"):
        assert heading.style["border-bottom"] == f"2px solid {ACCENT}"

    companies = tree.section("experience").find_all("company")
    assert [c.text for c in companies] == ["Northwind Analytics", "Contoso Retail"]
    assert all(c.style["color"] == ACCENT for c in companies)

    institutions = tree.section("education").find_all("institution")
    assert all(i.style["color"] == ACCENT for i in institutions)


@pytest.mark.integration
def test_experience_dates(tree):
    dates = [d.text for d in tree.section("experience").find_all("dates")]
    assert dates == ["Mar 2021 - Present", "Sep 2016 - Feb 2021"]


@pytest.mark.integration
def test_skills_repeated_in_sidebar_and_grid(tree):
    blocks = tree.sections("skills")
    assert len(blocks) == 2

    for block in blocks:
        badges = block.find_all("badge")
        assert [b.text for b in badges] == ["Python", "Kafka", "SQL", "Python"]
        assert all(b.style["background-color"] == ACCENT for b in badges)
        assert all(b.style["color"] == "#FFFFFF" for b in badges)

    grid = tree.find("grid")
    assert _section_keys(grid) == ["education", "skills"]


@pytest.mark.integration
def test_education_meta(tree):
    entries = tree.section("education").find_all("entry")
    meta = entries[0].find("entry-meta")
    assert [n.text for n in meta.children] == ["Jun 2016", "GPA: 3.8"]
    assert [n.text for n in entries[1].find("entry-meta").children] == ["Nov 2019"]


@pytest.mark.integration
def test_empty_document():
    tree = ModernTemplate().render(ResumeDocument(), ACCENT)

    assert tree.section_keys() == []
    assert tree.find("name").text == "Your Name"
    assert tree.find("grid") is None
    assert tree.find("main").children == []
