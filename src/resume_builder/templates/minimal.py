"""Minimal template: monochrome, left-aligned header, plain section titles."""

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

__all__ = ["MINIMAL_TEMPLATE"]

MINIMAL_TEMPLATE = TemplateDefinition(
    name="Minimal",
    colors=Palette(
        primary=RGB(0.0, 0.0, 0.0),
        secondary=RGB(0.5, 0.5, 0.5),
        text=RGB(0.2, 0.2, 0.2),
        accent=RGB(0.3, 0.3, 0.3),
        background=RGB(1.0, 1.0, 1.0),
        header_bg=RGB(1.0, 1.0, 1.0),
    ),
    fonts=FontSet(
        header="Helvetica-Bold",
        body="Helvetica",
        accent="Helvetica",
    ),
    layout=Layout(
        header_style=HeaderStyle.LEFT_ALIGNED,
        section_style=SectionStyle.SIMPLE,
        bullet_glyph="-",
    ),
)
