"""Modern template: blue colored header bar, underlined section titles."""

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

__all__ = ["MODERN_TEMPLATE"]

_BLUE = RGB(0.04, 0.52, 0.89)

MODERN_TEMPLATE = TemplateDefinition(
    name="Modern",
    colors=Palette(
        primary=_BLUE,
        secondary=RGB(0.4, 0.4, 0.4),
        text=RGB(0.1, 0.1, 0.1),
        accent=_BLUE,
        background=RGB(1.0, 1.0, 1.0),
        header_bg=_BLUE,
    ),
    fonts=FontSet(
        header="Helvetica-Bold",
        body="Helvetica",
        accent="Helvetica-Oblique",
    ),
    layout=Layout(
        header_style=HeaderStyle.COLORED_BAR,
        section_style=SectionStyle.UNDERLINED,
        bullet_glyph="●",
    ),
)
