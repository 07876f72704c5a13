"""Errors raised by the PDF rendering pipeline."""

from __future__ import annotations

__all__ = ["PdfGenerationError"]


class PdfGenerationError(RuntimeError):
    """Rendering, serialization or storage of a resume PDF failed.

    The original exception is available as ``__cause__``.
    """
