"""Text measurement and greedy line wrapping against font metrics."""

from __future__ import annotations

import threading

from fpdf import FPDF

from resume_builder.rendering.sanitize import CORE_FONT_ENCODING, sanitize_text

__all__ = ["measure_text", "split_font_name", "wrap_text"]

_STYLE_SUFFIXES = {
    "": "",
    "Roman": "",
    "Bold": "B",
    "Italic": "I",
    "Oblique": "I",
    "BoldItalic": "BI",
    "BoldOblique": "BI",
}

_local = threading.local()


def split_font_name(font: str) -> tuple[str, str]:
    """Split a PostScript name such as ``Times-Bold`` into ``("times", "B")``.

    Raises:
        ValueError: If the style suffix is not one of the standard ones.
    """
    family, _, suffix = font.partition("-")
    try:
        style = _STYLE_SUFFIXES[suffix]
    except KeyError:
        raise ValueError(f"Unknown font style in {font!r}") from None
    return family.lower(), style


def _measurer() -> FPDF:
    # FPDF keeps the selected font as state, so each thread gets its own.
    pdf = getattr(_local, "pdf", None)
    if pdf is None:
        pdf = FPDF(unit="pt")
        pdf.core_fonts_encoding = CORE_FONT_ENCODING
        _local.pdf = pdf
    return pdf


def measure_text(text: str, font: str, size: float) -> float:
    """Return the advance width of *text* in points."""
    pdf = _measurer()
    family, style = split_font_name(font)
    pdf.set_font(family, style, size)
    return pdf.get_string_width(text)


def wrap_text(
    text: str,
    max_width: float,
    font: str,
    size: float,
    *,
    sanitize: bool = True,
) -> list[str]:
    """Greedily break *text* into lines narrower than *max_width*.

    *text* is sanitized first unless the caller passes ``sanitize=False``
    for text whose fields were already cleaned, so that a template bullet
    such as ``•`` survives.  Words are separated by single spaces.  A word
    that is wider than *max_width* on its own is still emitted as a line by
    itself; nothing is hyphenated or truncated.  Blank input yields no lines.
    """
    if sanitize:
        text = sanitize_text(text)
    if not text or not text.strip():
        return []

    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if measure_text(candidate, font, size) < max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines
