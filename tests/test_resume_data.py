"""Tests for the structured resume model."""

from __future__ import annotations

from resume_builder.services.resume_data import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeData,
)


class TestCoercion:
    def test_empty(self):
        data = ResumeData.coerce(None)
        assert data.personal_info == PersonalInfo()
        assert data.skills == []
        assert data.experience == []

    def test_camel_case_keys(self):
        data = ResumeData.coerce(
            {
                "personalInfo": {"name": "Jane"},
                "experience": [{"title": "Dev", "startDate": "2020", "endDate": "2022"}],
            }
        )
        assert data.personal_info.name == "Jane"
        assert data.experience[0].start_date == "2020"
        assert data.experience[0].end_date == "2022"

    def test_nulls_become_defaults(self):
        data = ResumeData.coerce(
            {
                "personalInfo": {"name": None, "email": "a@b.c"},
                "summary": None,
                "skills": None,
                "projects": [None, {"name": "Tool", "technologies": None}],
            }
        )
        assert data.personal_info.name == ""
        assert data.summary == ""
        assert data.skills == []
        assert len(data.projects) == 1
        assert data.projects[0].technologies == []

    def test_numbers_become_text(self):
        entry = EducationEntry.model_validate({"degree": "BSc", "gpa": 3.9, "endDate": 2024})
        assert entry.gpa == "3.9"
        assert entry.end_date == "2024"

    def test_unknown_keys_ignored(self):
        data = ResumeData.coerce({"summary": "Hi", "photo": "x.png"})
        assert data.summary == "Hi"

    def test_instance_passed_through(self):
        data = ResumeData(summary="Hi")
        assert ResumeData.coerce(data) is data


class TestIsEmpty:
    def test_blank_entry(self):
        assert ExperienceEntry(title="  ", highlights=["", " "]).is_empty()

    def test_current_flag_alone_is_empty(self):
        assert ExperienceEntry(current=True).is_empty()

    def test_highlight_counts(self):
        assert not ExperienceEntry(highlights=["Shipped"]).is_empty()


class TestWireFormat:
    def test_to_wire_uses_camel_case(self):
        wire = ResumeData.coerce({"personalInfo": {"name": "Jane"}}).to_wire()
        assert wire["personalInfo"]["name"] == "Jane"
        assert "startDate" not in wire
        assert wire["certifications"] == []

    def test_wire_round_trip(self):
        original = ResumeData.coerce(
            {"experience": [{"title": "Dev", "current": True, "highlights": ["A"]}]}
        )
        assert ResumeData.coerce(original.to_wire()) == original
