"""Tests for generated PDF storage helpers."""

from __future__ import annotations

from pathlib import Path

from resume_builder.services.pdf_storage import (
    GENERATED_URL_PREFIX,
    get_generated_dir,
    get_upload_root,
    remove_generated_pdf,
    resolve_generated_pdf,
    store_pdf,
)


def test_upload_root_from_env(upload_dir: Path):
    assert get_upload_root() == upload_dir.resolve()
    assert get_generated_dir() == upload_dir.resolve() / "generated"


def test_store_pdf_writes_atomically():
    filename, path = store_pdf(b"%PDF-1.4 test")
    assert path.read_bytes() == b"%PDF-1.4 test"
    assert [p.name for p in get_generated_dir().iterdir()] == [filename]


def test_resolve_ignores_directories():
    filename, path = store_pdf(b"%PDF")
    assert resolve_generated_pdf(f"../../{filename}") == path
    assert resolve_generated_pdf("../../etc/passwd") is None
    assert resolve_generated_pdf("missing.pdf") is None


def test_remove_generated_pdf():
    filename, path = store_pdf(b"%PDF")
    assert remove_generated_pdf(f"{GENERATED_URL_PREFIX}{filename}") is True
    assert not path.exists()
    assert remove_generated_pdf(f"{GENERATED_URL_PREFIX}{filename}") is False
    assert remove_generated_pdf("/elsewhere/file.pdf") is False
    assert remove_generated_pdf(None) is False
