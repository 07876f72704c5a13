from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

import resume_builder.data.db as app_db
from resume_builder.data.db import init_db


@pytest.fixture(autouse=True)
def upload_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Write generated PDFs into a per-test directory."""
    upload_root = tmp_path / "uploads"
    monkeypatch.setenv("RESUME_BUILDER_UPLOAD_DIR", upload_root.as_posix())
    return upload_root


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None]:
    """Use a temporary SQLite DB for the tests that request it."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.reset_engine()
    init_db()
    yield
    # Dispose engine to release connections
    app_db.reset_engine()

