# =============================================================================
# Frame
# =============================================================================
# The drawing context components render into.
#
# A Frame is a grid of width x height cells, stored as rows of Rich
# Segments. Components paint Rich renderables (Text, Panel, Table, ...) into
# rectangular areas of it:
#
#   frame = Frame(80, 24)
#   view.render("INPUT", frame, Rect(1, 1, 78, 3))
#   view.render("LABEL", frame, Rect(1, 4, 78, 3))
#
# Whatever is painted last wins, cell by cell. The Frame is itself a Rich
# renderable, so the host just hands it to Textual (or prints it with a
# Console) once all components have been drawn.
# =============================================================================

import logging
from typing import NamedTuple

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.errors import ConsoleError
from rich.segment import Segment

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when the rendering backend fails to draw a component."""
    pass


class Rect(NamedTuple):
    """
    A rectangular area of the terminal, in cells.

    Attributes:
        x: Column of the top-left corner.
        y: Row of the top-left corner.
        width: Width in columns.
        height: Height in rows.
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        """Column just past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Row just past the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersection(self, other: "Rect") -> "Rect":
        """
        Return the part of this rect that overlaps `other`.

        Non-overlapping rects give an empty Rect.
        """
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= x or bottom <= y:
            return Rect(x, y, 0, 0)
        return Rect(x, y, right - x, bottom - y)

    def inner(self, margin: int) -> "Rect":
        """Shrink the rect by `margin` cells on every side."""
        width = max(0, self.width - 2 * margin)
        height = max(0, self.height - 2 * margin)
        return Rect(self.x + margin, self.y + margin, width, height)


class Frame:
    """
    A cell buffer components draw into.

    Usage:
        >>> frame = Frame(40, 5)
        >>> frame.render_widget(Text("hello"), Rect(0, 0, 40, 1))
        >>> frame.plain_lines()[0].rstrip()
        'hello'

    Attributes:
        width: Width in columns.
        height: Height in rows.
        rendered: Number of render_widget() calls that drew something.
    """

    def __init__(self, width: int, height: int, console: Console | None = None) -> None:
        """
        Initialize an empty frame.

        Args:
            width: Width in columns.
            height: Height in rows.
            console: Console used to lay out renderables. A private
                     off-screen console is created if not given.
        """
        self.width = max(0, width)
        self.height = max(0, height)
        self.rendered = 0
        self._console = console or Console(
            width=self.width or 1,
            height=self.height or 1,
            force_terminal=True,
            color_system="truecolor",
            legacy_windows=False,
        )
        self._rows: list[list[Segment]] = [
            [Segment(" " * self.width)] for _ in range(self.height)
        ]

    @property
    def size(self) -> Rect:
        """The whole frame as a Rect."""
        return Rect(0, 0, self.width, self.height)

    def render_widget(self, renderable: RenderableType, area: Rect) -> None:
        """
        Paint a Rich renderable into an area of the frame.

        The area is clipped to the frame; an area with no cells left after
        clipping draws nothing. The renderable is laid out at exactly the
        area's size (cropped or padded as needed).

        Args:
            renderable: Anything Rich can render.
            area: Where to draw it.

        Raises:
            RenderError: If Rich fails to render the object.
        """
        area = area.intersection(self.size)
        if area.is_empty:
            return

        options = self._console.options.update_dimensions(area.width, area.height)
        try:
            lines = self._console.render_lines(renderable, options, pad=True)
        except ConsoleError as e:
            raise RenderError(f"Failed to render {type(renderable).__name__}: {e}") from e

        lines = Segment.set_shape(lines[: area.height], area.width, area.height)

        for offset, line in enumerate(lines):
            y = area.y + offset
            before, _replaced, after = Segment.divide(
                self._rows[y], [area.x, area.right, self.width]
            )
            self._rows[y] = [*before, *line, *after]

        self.rendered += 1

    def plain_lines(self) -> list[str]:
        """Return the frame's content as plain text, one string per row."""
        return ["".join(segment.text for segment in row) for row in self._rows]

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        new_line = Segment.line()
        for row in self._rows:
            yield from row
            yield new_line
