"""Helpers for storing and retrieving generated resume PDFs."""

from __future__ import annotations

import os
import tempfile
import uuid
from pathlib import Path

__all__ = [
    "GENERATED_URL_PREFIX",
    "get_generated_dir",
    "get_upload_root",
    "remove_generated_pdf",
    "resolve_generated_pdf",
    "store_pdf",
]

GENERATED_URL_PREFIX = "/uploads/generated/"


def get_upload_root() -> Path:
    """Return the root of the uploads tree."""
    env_root = os.getenv("RESUME_BUILDER_UPLOAD_DIR")
    if env_root:
        return Path(env_root).expanduser().resolve()

    project_root = Path(__file__).resolve().parents[3]
    return project_root / "uploads"


def get_generated_dir() -> Path:
    """Return the directory generated PDFs are written to, creating it if needed."""
    path = get_upload_root() / "generated"
    path.mkdir(parents=True, exist_ok=True)
    return path


def store_pdf(data: bytes) -> tuple[str, Path]:
    """Write *data* under a fresh random filename.

    The bytes go to a temporary file in the same directory first and are
    renamed into place, so a failed write never leaves a partial PDF
    behind under the final name.

    Returns:
        ``(filename, path)`` of the stored file.
    """
    directory = get_generated_dir()
    filename = f"resume_{uuid.uuid4()}.pdf"
    target = directory / filename

    fd, tmp_name = tempfile.mkstemp(dir=directory, suffix=".part")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return filename, target


def resolve_generated_pdf(filename: str) -> Path | None:
    """Return the path of a stored PDF, or ``None`` if it does not exist.

    Any directory components in *filename* are ignored.
    """
    safe_name = Path(filename).name
    if not safe_name.endswith(".pdf"):
        return None
    path = get_generated_dir() / safe_name
    return path if path.is_file() else None


def remove_generated_pdf(url: str | None) -> bool:
    """Delete the PDF a caller-facing *url* points to.

    Returns:
        ``True`` if a file was removed.
    """
    if not url or not url.startswith(GENERATED_URL_PREFIX):
        return False
    path = resolve_generated_pdf(url[len(GENERATED_URL_PREFIX) :])
    if path is None:
        return False
    path.unlink(missing_ok=True)
    return True
