"""Map arbitrary text onto what the standard PDF fonts can encode.

The standard Type 1 fonts only cover a single-byte character set, so every
string drawn on a page goes through :func:`sanitize_text` first.  Typographic
punctuation is folded to ASCII and anything else outside printable Latin-1 is
dropped rather than rejected.
"""

from __future__ import annotations

import re
from typing import Any

__all__ = ["CORE_FONT_ENCODING", "drawable_glyph", "sanitize_text"]

# The standard PDF fonts are written with WinAnsiEncoding.
CORE_FONT_ENCODING = "windows-1252"

_SUBSTITUTIONS: dict[int, str] = {}


def _register(chars: str, replacement: str) -> None:
    for char in chars:
        _SUBSTITUTIONS[ord(char)] = replacement


_register("‘’‚‛", "'")
_register("“”„‟", '"')
_register("‒–—―−", "-")
_register("…", "...")
_register("▸▹►", ">")
_register("●○■▪◦•‣⁃∙", "*")
_register("\u00a0\u2007\u202f", " ")
_register("→←↑↓", "->")

# Printable ASCII plus the printable upper half of Latin-1.
_UNSUPPORTED = re.compile(r"[^\x20-\x7e\xa0-\xff]")


def sanitize_text(text: Any) -> str:
    """Return *text* reduced to printable Latin-1.

    ``None`` and empty values give ``""``.  Never raises, and applying it
    twice gives the same result as applying it once.
    """
    if text is None:
        return ""
    value = text if isinstance(text, str) else str(text)
    if not value:
        return ""
    return _UNSUPPORTED.sub("", value.translate(_SUBSTITUTIONS))


def drawable_glyph(glyph: str) -> str:
    """Return *glyph* if the standard font encoding has it, else its ASCII fallback."""
    try:
        glyph.encode(CORE_FONT_ENCODING)
    except UnicodeEncodeError:
        return sanitize_text(glyph) or "*"
    return glyph
