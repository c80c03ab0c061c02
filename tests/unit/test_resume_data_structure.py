"""Unit tests for ResumeDocument loading."""

from pathlib import Path

import pytest

from resumate.contexts.templating.exceptions import InvalidResumeStructureError
from resumate.contexts.templating.resume_data_structure import (
    ExperienceEntry,
    ResumeDocument,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.mark.unit
def test_from_dict_empty():
    """An empty mapping is a valid, empty resume."""
    doc = ResumeDocument.from_dict({})
    assert doc.personal_info is None
    assert doc.professional_summary is None
    assert doc.experience == []
    assert doc.education == []
    assert doc.project == []
    assert doc.skills == []


@pytest.mark.unit
def test_from_dict_blank_and_null_fields_are_absent():
    doc = ResumeDocument.from_dict(
        {
            "personal_info": {"full_name": "  ", "email": None, "phone": "555-0100"},
            "professional_summary": "",
            "education": None,
        }
    )
    assert doc.personal_info.full_name is None
    assert doc.personal_info.email is None
    assert doc.personal_info.phone == "555-0100"
    assert doc.professional_summary is None
    assert doc.education == []


@pytest.mark.unit
def test_from_dict_keeps_order_and_duplicates():
    doc = ResumeDocument.from_dict(
        {
            "experience": [{"position": "B"}, {"position": "A"}],
            "skills": ["Go", "Go", "Rust"],
        }
    )
    assert [e.position for e in doc.experience] == ["B", "A"]
    assert doc.skills == ["Go", "Go", "Rust"]


@pytest.mark.unit
def test_from_dict_ignores_unknown_keys():
    doc = ResumeDocument.from_dict({"_id": "abc", "title": "My Resume", "template": "modern"})
    assert doc == ResumeDocument()


@pytest.mark.unit
def test_is_current_defaults_false():
    assert ExperienceEntry.from_dict({"position": "Dev"}).is_current is False


@pytest.mark.unit
def test_description_line_breaks_preserved():
    doc = ResumeDocument.from_dict({"experience": [{"description": "one\ntwo\n\nthree"}]})
    assert doc.experience[0].description == "one\ntwo\n\nthree"


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [
        ["not", "a", "mapping"],
        {"experience": {"position": "Dev"}},
        {"education": ["BSc"]},
        {"skills": "Python, Go"},
        {"personal_info": "Ada"},
    ],
)
def test_from_dict_invalid_structure(payload):
    with pytest.raises(InvalidResumeStructureError):
        ResumeDocument.from_dict(payload)


@pytest.mark.unit
def test_invalid_structure_is_value_error():
    with pytest.raises(ValueError):
        ResumeDocument.from_dict({"project": 3})


@pytest.mark.unit
def test_from_file_yaml():
    doc = ResumeDocument.from_file(FIXTURES_PATH / "sample_resume.yaml")
    assert doc.full_name == "Ada Okafor"
    assert len(doc.experience) == 2
    assert doc.experience[0].is_current is True
    assert doc.education[1].field is None
    assert doc.project[1].description is None
    assert doc.skills == ["Python", "Kafka", "SQL", "Python"]
    assert "\n" in doc.professional_summary


@pytest.mark.unit
def test_from_file_json():
    doc = ResumeDocument.from_file(str(FIXTURES_PATH / "minimal_resume.json"))
    assert doc.full_name is None
    assert doc.personal_info.email == "someone@example.com"
    assert doc.skills == ["Go", "Go", "Rust"]


@pytest.mark.unit
def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        ResumeDocument.from_file(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_to_dict_round_trip():
    doc = ResumeDocument.from_file(FIXTURES_PATH / "sample_resume.yaml")
    assert ResumeDocument.from_dict(doc.to_dict()) == doc


@pytest.mark.unit
def test_from_file_keeps_interpolation_text_verbatim(tmp_path):
    """"${...}" in free text is resume content, never resolved or expanded."""
    path = tmp_path / "resume.yaml"
    path.write_text(
        "professional_summary: \"Cut costs using ${BUDGET} tracking\"\n"
        "project:\n"
        "  - name: Shell helpers\n"
        "    description: \"Exports ${HOME} and ${oc.env:PATH}\"\n",
        encoding="utf-8",
    )

    doc = ResumeDocument.from_file(path)

    assert doc.professional_summary == "Cut costs using ${BUDGET} tracking"
    assert doc.project[0].description == "Exports ${HOME} and ${oc.env:PATH}"


@pytest.mark.unit
@pytest.mark.parametrize("raw", [False, "false", "False", " FALSE ", "", None])
def test_is_current_false_values(raw):
    entry = ExperienceEntry.from_dict(
        {"start_date": "2021-03", "end_date": "2022-01", "is_current": raw}
    )
    assert entry.is_current is False


@pytest.mark.unit
@pytest.mark.parametrize("raw", [True, "true", "True"])
def test_is_current_true_values(raw):
    assert ExperienceEntry.from_dict({"is_current": raw}).is_current is True


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["maybe", "yes", 1, 0, []])
def test_is_current_rejects_non_boolean(raw):
    with pytest.raises(InvalidResumeStructureError, match="is_current"):
        ResumeDocument.from_dict({"experience": [{"is_current": raw}]})
