"""Resolve a template id plus user overrides into a concrete style."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from resume_builder.rendering.document import DEFAULT_LINE_HEIGHT
from resume_builder.rendering.sanitize import drawable_glyph
from resume_builder.templates import TemplateId, resolve_template_id
from resume_builder.templates.base import RGB, FontSet, Layout, Palette

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_OVERRIDE_COLOR",
    "ResolvedStyle",
    "StyleOverride",
    "hex_to_rgb",
    "resolve_style",
]

_HEX_COLOR = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

DEFAULT_OVERRIDE_COLOR = RGB(0.1, 0.1, 0.3)


def hex_to_rgb(value: str) -> RGB:
    """Parse ``#RRGGBB`` (``#`` optional, any case).

    Malformed input returns :data:`DEFAULT_OVERRIDE_COLOR`.
    """
    match = _HEX_COLOR.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        logger.debug("Malformed hex color %r, using default", value)
        return DEFAULT_OVERRIDE_COLOR
    red, green, blue = (int(part, 16) / 255 for part in match.groups())
    return RGB(red, green, blue)


def _positive_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


@dataclass(frozen=True)
class StyleOverride:
    """User customization layered over a template.

    Keys mirror the wire format: ``primaryColor``, ``accentColor`` and
    ``lineSpacing``.
    """

    primary_color: str | None = None
    accent_color: str | None = None
    line_spacing: float | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> StyleOverride:
        """Build an override from a loosely typed mapping, ignoring bad values."""
        if not data:
            return cls()
        primary = data.get("primaryColor")
        accent = data.get("accentColor")
        return cls(
            primary_color=primary if isinstance(primary, str) and primary else None,
            accent_color=accent if isinstance(accent, str) and accent else None,
            line_spacing=_positive_number(data.get("lineSpacing")),
        )

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.primary_color:
            data["primaryColor"] = self.primary_color
        if self.accent_color:
            data["accentColor"] = self.accent_color
        if self.line_spacing:
            data["lineSpacing"] = self.line_spacing
        return data


@dataclass(frozen=True)
class ResolvedStyle:
    """Everything the section renderers need, with no further lookups."""

    template_id: TemplateId
    colors: Palette
    fonts: FontSet
    layout: Layout
    bullet: str
    line_height: float


def resolve_style(
    template_id: str | None,
    overrides: StyleOverride | Mapping[str, Any] | None = None,
) -> ResolvedStyle:
    """Resolve *template_id* and apply *overrides* on a copy of its palette.

    ``primaryColor`` replaces the primary, header background and accent
    colors; ``accentColor`` then replaces the accent alone.
    """
    if not isinstance(overrides, StyleOverride):
        overrides = StyleOverride.from_mapping(overrides)

    resolved_id = resolve_template_id(template_id)
    template = resolved_id.definition

    colors = template.colors
    if overrides.primary_color:
        primary = hex_to_rgb(overrides.primary_color)
        colors = replace(colors, primary=primary, header_bg=primary, accent=primary)
    if overrides.accent_color:
        colors = replace(colors, accent=hex_to_rgb(overrides.accent_color))

    return ResolvedStyle(
        template_id=resolved_id,
        colors=colors,
        fonts=template.fonts,
        layout=template.layout,
        bullet=drawable_glyph(template.layout.bullet_glyph),
        line_height=overrides.line_spacing or DEFAULT_LINE_HEIGHT,
    )
