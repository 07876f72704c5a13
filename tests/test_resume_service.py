"""Tests for the resume record service."""

from __future__ import annotations

import pytest

import resume_builder.rendering.assembler as assembler
from resume_builder.data.db import get_database_url
from resume_builder.rendering import PdfGenerationError
from resume_builder.services import resume as resume_service
from resume_builder.services.pdf_storage import get_generated_dir, resolve_generated_pdf

pytestmark = pytest.mark.usefixtures("api_db")

SESSION = "3f2b8c1e-9a4d-4c2b-8e1f-2a3b4c5d6e7f"
OTHER_SESSION = "9c1d2e3f-4a5b-4c6d-9e7f-8a9b0c1d2e3f"

JANE = {
    "personalInfo": {"name": "Jane Doe"},
    "skills": ["Go", "Rust"],
}


def pdf_exists(url: str) -> bool:
    return resolve_generated_pdf(url.rsplit("/", 1)[-1]) is not None


class TestCreate:
    def test_create_renders_and_stores(self):
        result = resume_service.create_resume(SESSION, JANE, "classic", {"lineSpacing": 16})

        assert result["session_id"] == SESSION
        assert result["template"] == "classic"
        assert result["custom_styles"] == {"lineSpacing": 16.0}
        assert result["structured_data"]["personalInfo"]["name"] == "Jane Doe"
        assert result["version"] == 1
        assert result["is_active"] is True
        assert pdf_exists(result["pdf_url"])

    def test_unknown_template_stored_as_default(self):
        result = resume_service.create_resume(SESSION, JANE, "fancy")
        assert result["template"] == "modern"

    def test_new_resume_deactivates_previous(self):
        first = resume_service.create_resume(SESSION, JANE)
        second = resume_service.create_resume(SESSION, JANE)

        assert resume_service.get_resume(SESSION, first["id"])["is_active"] is False
        assert resume_service.get_current_resume(SESSION)["id"] == second["id"]

    def test_render_failure_stores_nothing(self, monkeypatch: pytest.MonkeyPatch):
        def boom(*args, **kwargs):
            raise ValueError("broken")

        monkeypatch.setattr(assembler, "document_to_pdf_bytes", boom)
        with pytest.raises(PdfGenerationError):
            resume_service.create_resume(SESSION, JANE)

        assert resume_service.get_resume_history(SESSION) == []
        assert list(get_generated_dir().iterdir()) == []


class TestQueries:
    def test_records_use_temporary_database(self, tmp_path):
        db_path = tmp_path / "api.db"
        assert get_database_url() == f"sqlite:///{db_path.as_posix()}"

    def test_no_current_resume(self):
        assert resume_service.get_current_resume(SESSION) is None

    def test_history_newest_first(self):
        first = resume_service.create_resume(SESSION, JANE)
        second = resume_service.create_resume(SESSION, JANE)
        history = resume_service.get_resume_history(SESSION)
        assert [r["id"] for r in history] == [second["id"], first["id"]]

    def test_sessions_are_isolated(self):
        created = resume_service.create_resume(SESSION, JANE)
        assert resume_service.get_resume(OTHER_SESSION, created["id"]) is None
        assert resume_service.get_resume_history(OTHER_SESSION) == []
        assert resume_service.delete_resume(OTHER_SESSION, created["id"]) is False


class TestRerender:
    def test_update_bumps_version_and_replaces_pdf(self):
        created = resume_service.create_resume(SESSION, JANE)
        updated = resume_service.update_resume(SESSION, created["id"], {"summary": "New."})

        assert updated["version"] == 2
        assert updated["structured_data"]["summary"] == "New."
        assert updated["pdf_url"] != created["pdf_url"]
        assert pdf_exists(updated["pdf_url"])
        assert not pdf_exists(created["pdf_url"])

    def test_restyle_merges_styles(self):
        created = resume_service.create_resume(SESSION, JANE, custom_styles={"lineSpacing": 16})
        restyled = resume_service.restyle_resume(
            SESSION,
            created["id"],
            template="professional",
            custom_styles={"accentColor": "#00ff00"},
        )

        assert restyled["template"] == "professional"
        assert restyled["custom_styles"] == {"accentColor": "#00ff00", "lineSpacing": 16.0}
        assert restyled["version"] == 2

    def test_restyle_keeps_template_when_omitted(self):
        created = resume_service.create_resume(SESSION, JANE, "minimal")
        restyled = resume_service.restyle_resume(SESSION, created["id"])
        assert restyled["template"] == "minimal"

    def test_regenerate_keeps_version(self):
        created = resume_service.create_resume(SESSION, JANE, "creative")
        regenerated = resume_service.regenerate_pdf(SESSION, created["id"])

        assert regenerated["version"] == 1
        assert regenerated["template"] == "creative"
        assert regenerated["pdf_url"] != created["pdf_url"]

    def test_failed_rerender_leaves_record_untouched(self, monkeypatch: pytest.MonkeyPatch):
        created = resume_service.create_resume(SESSION, JANE)

        def boom(*args, **kwargs):
            raise ValueError("broken")

        monkeypatch.setattr(assembler, "document_to_pdf_bytes", boom)
        with pytest.raises(PdfGenerationError):
            resume_service.update_resume(SESSION, created["id"], {"summary": "New."})

        stored = resume_service.get_resume(SESSION, created["id"])
        assert stored["version"] == 1
        assert stored["pdf_url"] == created["pdf_url"]
        assert pdf_exists(created["pdf_url"])

    def test_failed_save_removes_new_pdf(self, monkeypatch: pytest.MonkeyPatch):
        created = resume_service.create_resume(SESSION, JANE)
        to_dict = resume_service._resume_to_dict

        def broken(resume):
            raise RuntimeError("serialization failed")

        monkeypatch.setattr(resume_service, "_resume_to_dict", broken)
        with pytest.raises(RuntimeError):
            resume_service.update_resume(SESSION, created["id"], {"summary": "New."})
        monkeypatch.setattr(resume_service, "_resume_to_dict", to_dict)

        stored_files = list(get_generated_dir().iterdir())
        assert [path.name for path in stored_files] == [created["pdf_url"].rsplit("/", 1)[-1]]
        stored = resume_service.get_resume(SESSION, created["id"])
        assert stored["version"] == 1
        assert stored["pdf_url"] == created["pdf_url"]

    def test_missing_resume(self):
        assert resume_service.update_resume(SESSION, 999, JANE) is None
        assert resume_service.restyle_resume(SESSION, 999) is None
        assert resume_service.regenerate_pdf(SESSION, 999) is None


class TestActivateDelete:
    def test_activate(self):
        first = resume_service.create_resume(SESSION, JANE)
        second = resume_service.create_resume(SESSION, JANE)

        activated = resume_service.activate_resume(SESSION, first["id"])

        assert activated["is_active"] is True
        assert resume_service.get_resume(SESSION, second["id"])["is_active"] is False
        assert resume_service.get_current_resume(SESSION)["id"] == first["id"]

    def test_activate_missing(self):
        assert resume_service.activate_resume(SESSION, 999) is None

    def test_delete_removes_record_and_pdf(self):
        created = resume_service.create_resume(SESSION, JANE)
        assert resume_service.delete_resume(SESSION, created["id"]) is True
        assert resume_service.get_resume(SESSION, created["id"]) is None
        assert not pdf_exists(created["pdf_url"])
        assert resume_service.delete_resume(SESSION, created["id"]) is False
