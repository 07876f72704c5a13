"""Immutable building blocks shared by every PDF resume template."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

__all__ = [
    "RGB",
    "FontSet",
    "HeaderStyle",
    "Layout",
    "Palette",
    "SectionStyle",
    "TemplateDefinition",
]


class RGB(NamedTuple):
    """An RGB color with each channel in ``[0, 1]``."""

    red: float
    green: float
    blue: float

    def tint(self, strength: float) -> RGB:
        """Blend toward white, keeping *strength* of the original color."""
        keep = 1.0 - strength
        return RGB(
            self.red * strength + keep,
            self.green * strength + keep,
            self.blue * strength + keep,
        )


WHITE = RGB(1.0, 1.0, 1.0)


class HeaderStyle(StrEnum):
    COLORED_BAR = "colored-bar"
    CENTERED = "centered"
    LEFT_ALIGNED = "left-aligned"
    SIDEBAR = "sidebar"
    TWO_COLUMN = "two-column"


class SectionStyle(StrEnum):
    UNDERLINED = "underlined"
    COLORED = "colored"
    BOXED = "boxed"
    BOLD = "bold"
    SIMPLE = "simple"


@dataclass(frozen=True)
class Palette:
    """Named color roles used across a template."""

    primary: RGB
    secondary: RGB
    text: RGB
    accent: RGB
    background: RGB
    header_bg: RGB


@dataclass(frozen=True)
class FontSet:
    """Standard Type 1 font names for each typographic role."""

    header: str
    body: str
    accent: str


@dataclass(frozen=True)
class Layout:
    header_style: HeaderStyle
    section_style: SectionStyle
    bullet_glyph: str


@dataclass(frozen=True)
class TemplateDefinition:
    """A named bundle of colors, fonts and layout rules."""

    name: str
    colors: Palette
    fonts: FontSet
    layout: Layout
