# =============================================================================
# Text Properties
# =============================================================================
# Styled text carried by Props:
#
#   - TextSpan:  a piece of text with its own colors and modifiers
#   - Table:     rows of spans (used by table-like widgets)
#   - TextParts: the bundle stored in Props (title, spans, table)
#
# All of them are frozen; use the builders to make new ones.
# =============================================================================

from collections.abc import Iterable
from dataclasses import dataclass

from rich.color import Color

from realm_tui.core.style import RESET, Modifier


@dataclass(frozen=True)
class TextSpan:
    """
    A span of text with its own style.

    Attributes:
        content: The text.
        foreground: Text color.
        background: Background color.
        modifiers: Style modifiers (bold, italic, ...).
    """
    content: str
    foreground: Color = RESET
    background: Color = RESET
    modifiers: Modifier = Modifier.NONE

    @property
    def bold(self) -> bool:
        return bool(self.modifiers & Modifier.BOLD)

    @property
    def italic(self) -> bool:
        return bool(self.modifiers & Modifier.ITALIC)

    @property
    def underlined(self) -> bool:
        return bool(self.modifiers & Modifier.UNDERLINED)

    def __str__(self) -> str:
        return self.content


class TextSpanBuilder:
    """
    Builds a TextSpan step by step.

    Usage:
        >>> span = TextSpanBuilder("Hello").with_foreground(red).bold().build()
    """

    def __init__(self, content: str) -> None:
        self._content = content
        self._foreground = RESET
        self._background = RESET
        self._modifiers = Modifier.NONE

    def with_foreground(self, color: Color) -> "TextSpanBuilder":
        self._foreground = color
        return self

    def with_background(self, color: Color) -> "TextSpanBuilder":
        self._background = color
        return self

    def bold(self) -> "TextSpanBuilder":
        self._modifiers |= Modifier.BOLD
        return self

    def italic(self) -> "TextSpanBuilder":
        self._modifiers |= Modifier.ITALIC
        return self

    def underlined(self) -> "TextSpanBuilder":
        self._modifiers |= Modifier.UNDERLINED
        return self

    def blink(self) -> "TextSpanBuilder":
        self._modifiers |= Modifier.SLOW_BLINK
        return self

    def rapid_blink(self) -> "TextSpanBuilder":
        self._modifiers |= Modifier.RAPID_BLINK
        return self

    def reversed(self) -> "TextSpanBuilder":
        self._modifiers |= Modifier.REVERSED
        return self

    def strikethrough(self) -> "TextSpanBuilder":
        self._modifiers |= Modifier.CROSSED_OUT
        return self

    def build(self) -> TextSpan:
        return TextSpan(
            content=self._content,
            foreground=self._foreground,
            background=self._background,
            modifiers=self._modifiers,
        )


# A table is a tuple of rows, each row a tuple of spans (one per column)
Table = tuple[tuple[TextSpan, ...], ...]


class TableBuilder:
    """
    Builds a Table row by row.

    Usage:
        >>> table = (
        ...     TableBuilder()
        ...     .add_col(TextSpan("name"))
        ...     .add_col(TextSpan("age"))
        ...     .add_row()
        ...     .add_col(TextSpan("omar"))
        ...     .add_col(TextSpan("32"))
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._rows: list[list[TextSpan]] = [[]]

    def add_col(self, span: TextSpan) -> "TableBuilder":
        """Append a column to the current row."""
        self._rows[-1].append(span)
        return self

    def add_row(self) -> "TableBuilder":
        """Start a new row."""
        self._rows.append([])
        return self

    def build(self) -> Table:
        rows = self._rows
        # A trailing add_row() with no columns doesn't make a row
        if len(rows) > 1 and not rows[-1]:
            rows = rows[:-1]
        return tuple(tuple(row) for row in rows)


@dataclass(frozen=True)
class TextParts:
    """
    The text carried by a component.

    Attributes:
        title: Optional title (usually drawn on the border).
        spans: Optional ordered spans making up the body.
        table: Optional table body, for table-like widgets.
    """
    title: str | None = None
    spans: tuple[TextSpan, ...] | None = None
    table: Table | None = None

    @classmethod
    def new(cls, title: str | None = None, spans: Iterable[TextSpan] | None = None) -> "TextParts":
        """Create text parts from a title and any iterable of spans."""
        return cls(title=title, spans=tuple(spans) if spans is not None else None)

    @classmethod
    def with_table(cls, title: str | None, table: Table) -> "TextParts":
        """Create text parts holding a table."""
        return cls(title=title, table=tuple(tuple(row) for row in table))
