"""PDF template rendering engine."""

from resume_builder.rendering.assembler import (
    GeneratedPdf,
    build_document,
    render_pdf_bytes,
    render_resume_pdf,
)
from resume_builder.rendering.exceptions import PdfGenerationError
from resume_builder.rendering.sanitize import sanitize_text
from resume_builder.rendering.styles import ResolvedStyle, StyleOverride, resolve_style
from resume_builder.rendering.text import wrap_text

__all__ = [
    "GeneratedPdf",
    "PdfGenerationError",
    "ResolvedStyle",
    "StyleOverride",
    "build_document",
    "render_pdf_bytes",
    "render_resume_pdf",
    "resolve_style",
    "sanitize_text",
    "wrap_text",
]
