"""Turn a free-text styling request into style overrides."""

from __future__ import annotations

import re
from typing import Any

__all__ = ["COLOR_NAMES", "parse_style_instruction"]

COLOR_NAMES: dict[str, str] = {
    "blue": "#0D84E3",
    "red": "#DC2626",
    "green": "#16A34A",
    "purple": "#9333EA",
    "orange": "#EA580C",
    "teal": "#0D9488",
    "pink": "#DB2777",
    "indigo": "#4F46E5",
    "navy": "#1E3A5F",
    "black": "#000000",
}

_HEX = re.compile(r"#[0-9A-Fa-f]{6}\b")
_LOOSER = ("more spacing", "looser", "spaced out")
_TIGHTER = ("less spacing", "tighter", "compact")


def parse_style_instruction(instruction: str) -> dict[str, Any]:
    """Extract ``primaryColor``, ``accentColor`` and ``lineSpacing`` from *instruction*.

    Named colors go to the accent when the text mentions an accent or
    highlight, otherwise to the primary color.  A literal ``#RRGGBB`` always
    sets the primary color.  Keys that are not mentioned are left out.

    >>> parse_style_instruction("make it green and more compact")
    {'primaryColor': '#16A34A', 'lineSpacing': 12}
    """
    styles: dict[str, Any] = {}
    lower = instruction.lower()
    targets_accent = "accent" in lower or "highlight" in lower

    for name, hex_value in COLOR_NAMES.items():
        if re.search(rf"\b{name}\b", lower):
            styles["accentColor" if targets_accent else "primaryColor"] = hex_value

    hex_match = _HEX.search(instruction)
    if hex_match:
        styles["primaryColor"] = hex_match.group(0)

    if any(phrase in lower for phrase in _LOOSER):
        styles["lineSpacing"] = 18
    elif any(phrase in lower for phrase in _TIGHTER):
        styles["lineSpacing"] = 12

    return styles
