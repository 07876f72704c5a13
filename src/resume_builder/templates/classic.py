"""Classic template: serif type, centered header, bold section titles."""

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

__all__ = ["CLASSIC_TEMPLATE"]

CLASSIC_TEMPLATE = TemplateDefinition(
    name="Classic",
    colors=Palette(
        primary=RGB(0.1, 0.1, 0.3),
        secondary=RGB(0.3, 0.3, 0.3),
        text=RGB(0.15, 0.15, 0.15),
        accent=RGB(0.2, 0.4, 0.6),
        background=RGB(1.0, 1.0, 1.0),
        header_bg=RGB(1.0, 1.0, 1.0),
    ),
    fonts=FontSet(
        header="Times-Bold",
        body="Times-Roman",
        accent="Times-Italic",
    ),
    layout=Layout(
        header_style=HeaderStyle.CENTERED,
        section_style=SectionStyle.BOLD,
        bullet_glyph="•",
    ),
)
