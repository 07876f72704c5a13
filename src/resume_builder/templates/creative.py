"""Creative template: purple with an orange accent and tinted section bands."""

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

__all__ = ["CREATIVE_TEMPLATE"]

_PURPLE = RGB(0.56, 0.27, 0.68)

CREATIVE_TEMPLATE = TemplateDefinition(
    name="Creative",
    colors=Palette(
        primary=_PURPLE,
        secondary=RGB(0.4, 0.4, 0.45),
        text=RGB(0.2, 0.2, 0.25),
        accent=RGB(0.93, 0.46, 0.19),
        background=RGB(1.0, 1.0, 1.0),
        header_bg=_PURPLE,
    ),
    fonts=FontSet(
        header="Helvetica-Bold",
        body="Helvetica",
        accent="Helvetica-Oblique",
    ),
    layout=Layout(
        header_style=HeaderStyle.SIDEBAR,
        section_style=SectionStyle.COLORED,
        bullet_glyph="▸",
    ),
)
