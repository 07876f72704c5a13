"""In-memory page model and the vertical write cursor.

A :class:`Document` is an ordered list of fixed-size :class:`Page` objects,
each holding absolutely positioned draw operations.  Section renderers never
touch a PDF canvas directly; they append operations here and the finished
document is replayed onto a canvas by :mod:`resume_builder.rendering.canvas`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from resume_builder.templates.base import RGB

__all__ = [
    "DEFAULT_LINE_HEIGHT",
    "MARGIN",
    "PAGE_HEIGHT",
    "PAGE_WIDTH",
    "SECTION_GAP",
    "Document",
    "Line",
    "Page",
    "Rect",
    "TextRun",
]

# US Letter, in points.
PAGE_WIDTH = 612.0
PAGE_HEIGHT = 792.0
MARGIN = 50.0
DEFAULT_LINE_HEIGHT = 14.0
SECTION_GAP = 20.0


@dataclass(frozen=True)
class TextRun:
    x: float
    y: float
    text: str
    font: str
    size: float
    color: RGB


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float
    color: RGB


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: RGB | None = None
    stroke: RGB | None = None
    stroke_width: float = 1.0


Operation = TextRun | Line | Rect


@dataclass
class Page:
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    operations: list[Operation] = field(default_factory=list)

    @property
    def text_runs(self) -> list[TextRun]:
        return [op for op in self.operations if isinstance(op, TextRun)]

    def text(self) -> list[str]:
        """Return the text of every run on the page, top to bottom."""
        return [run.text for run in self.text_runs]


class Document:
    """Ordered pages plus the cursor of the page currently being written.

    The cursor starts at ``page_height - top_margin`` on a single page.
    :meth:`ensure_space` is the only way a new page gets started.
    """

    def __init__(
        self,
        *,
        page_width: float = PAGE_WIDTH,
        page_height: float = PAGE_HEIGHT,
        top_margin: float = MARGIN,
        bottom_margin: float = MARGIN,
    ) -> None:
        self.page_width = page_width
        self.page_height = page_height
        self.top_margin = top_margin
        self.bottom_margin = bottom_margin
        self.pages: list[Page] = []
        self.page_index = -1
        self.cursor_y = 0.0
        self._start_page()

    # ------------------------------------------------------------------
    # cursor management
    # ------------------------------------------------------------------

    @property
    def current_page(self) -> Page:
        return self.pages[self.page_index]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def top_y(self) -> float:
        return self.page_height - self.top_margin

    def _start_page(self) -> None:
        self.pages.append(Page(width=self.page_width, height=self.page_height))
        self.page_index = len(self.pages) - 1
        self.cursor_y = self.top_y

    def ensure_space(self, needed_height: float) -> bool:
        """Start a new page unless *needed_height* fits above the bottom margin.

        Returns:
            ``True`` if a page break happened.
        """
        if self.cursor_y - needed_height < self.bottom_margin:
            self._start_page()
            return True
        return False

    def advance(self, height: float) -> None:
        """Move the cursor down by *height*, stopping at the bottom margin."""
        self.cursor_y = max(self.cursor_y - height, self.bottom_margin)

    def move_cursor_to(self, y: float) -> None:
        self.cursor_y = y

    # ------------------------------------------------------------------
    # drawing
    # ------------------------------------------------------------------

    def draw_text(
        self,
        text: str,
        x: float,
        font: str,
        size: float,
        color: RGB,
        *,
        y: float | None = None,
    ) -> None:
        """Place *text* at *x* on the cursor line (or at an explicit *y*).

        Blank text is skipped.
        """
        if not text or not text.strip():
            return
        baseline = self.cursor_y if y is None else y
        self.current_page.operations.append(TextRun(x, baseline, text, font, size, color))

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        thickness: float = 1.0,
        color: RGB,
    ) -> None:
        self.current_page.operations.append(Line(x1, y1, x2, y2, thickness, color))

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        *,
        fill: RGB | None = None,
        stroke: RGB | None = None,
        stroke_width: float = 1.0,
    ) -> None:
        self.current_page.operations.append(
            Rect(x, y, width, height, fill=fill, stroke=stroke, stroke_width=stroke_width)
        )

    def all_text(self) -> list[str]:
        """Return the text of every run in page order."""
        return [text for page in self.pages for text in page.text()]
