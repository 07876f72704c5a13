"""Top-level PDF rendering entry points.

:func:`build_document` lays a resume out into pages, :func:`render_pdf_bytes`
serializes that layout, and :func:`render_resume_pdf` additionally stores the
bytes and returns where they can be fetched from.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from resume_builder.rendering.canvas import check_fonts, document_to_pdf_bytes
from resume_builder.rendering.context import RenderContext
from resume_builder.rendering.document import Document
from resume_builder.rendering.exceptions import PdfGenerationError
from resume_builder.rendering.sections import (
    clean,
    render_certifications,
    render_education,
    render_experience,
    render_header,
    render_projects,
    render_skills,
    render_summary,
)
from resume_builder.rendering.styles import StyleOverride, resolve_style
from resume_builder.services import pdf_storage
from resume_builder.services.resume_data import ResumeData

logger = logging.getLogger(__name__)

__all__ = [
    "GeneratedPdf",
    "build_document",
    "render_pdf_bytes",
    "render_resume_pdf",
]

Overrides = StyleOverride | Mapping[str, Any] | None


@dataclass(frozen=True)
class GeneratedPdf:
    """Where a freshly rendered PDF was stored."""

    filename: str
    filepath: Path
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"filename": self.filename, "filepath": str(self.filepath), "url": self.url}


def build_document(
    resume: ResumeData | dict[str, Any] | None,
    template_id: str | None = None,
    overrides: Overrides = None,
) -> Document:
    """Lay *resume* out into pages using the given template and overrides.

    Sections are always drawn in the same order: header, summary, skills,
    experience, projects, education, certifications.  Empty sections are
    skipped.
    """
    data = ResumeData.coerce(resume)
    style = resolve_style(template_id, overrides)
    check_fonts(style.fonts)

    ctx = RenderContext(style=style)
    render_header(ctx, data.personal_info)
    render_summary(ctx, data.summary)
    render_skills(ctx, data.skills)
    render_experience(ctx, data.experience)
    render_projects(ctx, data.projects)
    render_education(ctx, data.education)
    render_certifications(ctx, data.certifications)
    return ctx.document


def _document_title(data: ResumeData) -> str:
    name = clean(data.personal_info.name)
    return f"{name} - Resume" if name else "Resume"


def render_pdf_bytes(
    resume: ResumeData | dict[str, Any] | None,
    template_id: str | None = None,
    overrides: Overrides = None,
) -> bytes:
    """Render *resume* to PDF bytes without storing anything.

    Raises:
        PdfGenerationError: If layout or serialization fails.
    """
    try:
        data = ResumeData.coerce(resume)
        document = build_document(data, template_id, overrides)
        logger.debug("Laid out resume on %d page(s)", document.page_count)
        return document_to_pdf_bytes(document, title=_document_title(data))
    except Exception as exc:
        logger.exception("PDF rendering failed")
        raise PdfGenerationError(f"Failed to generate PDF: {exc}") from exc


def render_resume_pdf(
    resume: ResumeData | dict[str, Any] | None,
    template_id: str | None = None,
    overrides: Overrides = None,
) -> GeneratedPdf:
    """Render *resume*, store the PDF under a unique name and describe it.

    Nothing is stored unless rendering succeeds completely.

    Raises:
        PdfGenerationError: If layout, serialization or the write fails.
    """
    pdf_bytes = render_pdf_bytes(resume, template_id, overrides)
    try:
        filename, filepath = pdf_storage.store_pdf(pdf_bytes)
    except Exception as exc:
        logger.exception("Storing generated PDF failed")
        raise PdfGenerationError(f"Failed to generate PDF: {exc}") from exc

    logger.info("Generated resume PDF %s (%d bytes)", filename, len(pdf_bytes))
    return GeneratedPdf(
        filename=filename,
        filepath=filepath,
        url=f"{pdf_storage.GENERATED_URL_PREFIX}{filename}",
    )
