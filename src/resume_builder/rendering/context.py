"""Per-render state threaded explicitly through every section renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from resume_builder.rendering.document import MARGIN, SECTION_GAP, Document
from resume_builder.rendering.styles import ResolvedStyle
from resume_builder.rendering.text import measure_text, wrap_text
from resume_builder.templates.base import RGB

__all__ = ["RenderContext"]


@dataclass
class RenderContext:
    """The document being built together with its resolved style."""

    style: ResolvedStyle
    document: Document = field(default_factory=Document)
    margin: float = MARGIN
    section_gap: float = SECTION_GAP

    @property
    def page_width(self) -> float:
        return self.document.page_width

    @property
    def page_height(self) -> float:
        return self.document.page_height

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def line_height(self) -> float:
        return self.style.line_height

    def centered_x(self, text: str, font: str, size: float) -> float:
        return (self.page_width - measure_text(text, font, size)) / 2

    def draw_wrapped(
        self,
        text: str,
        *,
        indent: float = 0.0,
        font: str | None = None,
        size: float = 10,
        color: RGB | None = None,
        line_height: float | None = None,
        wrap_inset: float | None = None,
    ) -> int:
        """Wrap already cleaned *text* and draw it line by line at *indent*.

        Lines wrap to the content width minus *wrap_inset*, which defaults
        to *indent*.

        Space is checked before each line, so a paragraph may continue on
        the next page but a single line never straddles a page break.

        Returns:
            Number of lines drawn.
        """
        font = font or self.style.fonts.body
        color = color or self.style.colors.text
        step = line_height or self.line_height
        inset = indent if wrap_inset is None else wrap_inset
        lines = wrap_text(text, self.content_width - inset, font, size, sanitize=False)
        for line in lines:
            self.document.ensure_space(step)
            self.document.draw_text(line, self.margin + indent, font, size, color)
            self.document.advance(step)
        return len(lines)
