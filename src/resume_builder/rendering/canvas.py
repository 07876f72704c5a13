"""Replay a :class:`Document` onto an fpdf2 page stream."""

from __future__ import annotations

from fpdf import FPDF

from resume_builder.rendering.document import Document, Line, Rect, TextRun
from resume_builder.rendering.sanitize import CORE_FONT_ENCODING
from resume_builder.rendering.text import split_font_name
from resume_builder.templates.base import RGB, FontSet

__all__ = ["check_fonts", "document_to_pdf_bytes"]


def _rgb255(color: RGB) -> tuple[int, ...]:
    return tuple(round(channel * 255) for channel in color)


def check_fonts(fonts: FontSet) -> None:
    """Make sure every font role names one of the standard PDF fonts.

    Raises:
        FPDFException: If a font family is not a core font.
        ValueError: If a font style suffix is not recognised.
    """
    pdf = FPDF(unit="pt")
    for name in (fonts.header, fonts.body, fonts.accent):
        family, style = split_font_name(name)
        pdf.set_font(family, style, 10)


def document_to_pdf_bytes(document: Document, *, title: str = "Resume") -> bytes:
    """Serialize *document* to PDF bytes, one PDF page per :class:`Page`.

    Document coordinates have their origin at the bottom-left corner; fpdf2
    measures from the top-left, so every y value is flipped here.
    """
    height = document.page_height
    pdf = FPDF(unit="pt", format=(document.page_width, height))
    pdf.core_fonts_encoding = CORE_FONT_ENCODING
    pdf.set_auto_page_break(auto=False)
    pdf.set_title(title)
    pdf.set_creator("resume-builder")

    for page in document.pages:
        pdf.add_page()
        for op in page.operations:
            if isinstance(op, TextRun):
                family, style = split_font_name(op.font)
                pdf.set_font(family, style, op.size)
                pdf.set_text_color(*_rgb255(op.color))
                pdf.text(op.x, height - op.y, op.text)
            elif isinstance(op, Line):
                pdf.set_draw_color(*_rgb255(op.color))
                pdf.set_line_width(op.thickness)
                pdf.line(op.x1, height - op.y1, op.x2, height - op.y2)
            elif isinstance(op, Rect):
                mode = ""
                if op.stroke is not None:
                    pdf.set_draw_color(*_rgb255(op.stroke))
                    pdf.set_line_width(op.stroke_width)
                    mode += "D"
                if op.fill is not None:
                    pdf.set_fill_color(*_rgb255(op.fill))
                    mode += "F"
                if mode:
                    pdf.rect(op.x, height - op.y - op.height, op.width, op.height, style=mode)

    return bytes(pdf.output())
