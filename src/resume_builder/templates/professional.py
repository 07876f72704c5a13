"""Professional template: dark blue serif with boxed section titles."""

from __future__ import annotations

from resume_builder.templates.base import (
    RGB,
    FontSet,
    HeaderStyle,
    Layout,
    Palette,
    SectionStyle,
    TemplateDefinition,
)

__all__ = ["PROFESSIONAL_TEMPLATE"]

_DARK_BLUE = RGB(0.13, 0.27, 0.42)

PROFESSIONAL_TEMPLATE = TemplateDefinition(
    name="Professional",
    colors=Palette(
        primary=_DARK_BLUE,
        secondary=RGB(0.35, 0.35, 0.35),
        text=RGB(0.15, 0.15, 0.15),
        accent=RGB(0.18, 0.55, 0.34),
        background=RGB(1.0, 1.0, 1.0),
        header_bg=_DARK_BLUE,
    ),
    fonts=FontSet(
        header="Times-Bold",
        body="Times-Roman",
        accent="Times-Italic",
    ),
    layout=Layout(
        header_style=HeaderStyle.TWO_COLUMN,
        section_style=SectionStyle.BOXED,
        bullet_glyph="■",
    ),
)
