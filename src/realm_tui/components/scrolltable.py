# =============================================================================
# Scroll Table Widget
# =============================================================================
# A table with a selected row the user can move through.
#
# Keys:
#   - up / down: previous / next row                 -> nothing
#   - page up / page down: jump by the max step      -> nothing
#   - home / end: first / last row                   -> nothing
#   - enter: submit the selected row                 -> OnSubmit(row index)
#   - anything else                                  -> OnKey(event)
#
# Only the rows that fit are drawn; the window follows the selection.
# The selected row is drawn with the "highlight" palette color (reversed
# if unset) and prefixed with the highlight symbol.
# =============================================================================

from rich.style import Style

from realm_tui.component import Component
from realm_tui.components.table import PROP_HEADERS, TablePropsBuilder, build_rich_table
from realm_tui.components.utils import get_block, own_value, own_values, text_value, usize
from realm_tui.core.event import Event, Key, KeyEvent
from realm_tui.core.msg import Msg, OnKey, OnSubmit, Payload, Value
from realm_tui.core.props import Borders, PropPayload, Props
from realm_tui.rendering import Frame, Rect

PROP_MAX_STEP = "max_step"
PROP_HIGHLIGHTED_STR = "highlighted_str"
PALETTE_HIGHLIGHT = "highlight"

DEFAULT_MAX_STEP = 8


class ScrollTablePropsBuilder(TablePropsBuilder):
    """
    Props builder for ScrollTable.

    Usage:
        >>> props = (
        ...     ScrollTablePropsBuilder()
        ...     .with_table("Files", rows)
        ...     .with_max_scroll_step(4)
        ...     .with_highlighted_str("> ")
        ...     .build()
        ... )
    """

    def with_max_scroll_step(self, step: int) -> "ScrollTablePropsBuilder":
        """How many rows page up / page down move."""
        return self.with_own(PROP_MAX_STEP, PropPayload.one(usize(step)))

    def with_highlighted_str(self, symbol: str) -> "ScrollTablePropsBuilder":
        """Prefix drawn before the selected row."""
        return self.with_own(PROP_HIGHLIGHTED_STR, PropPayload.one(text_value(symbol)))


class ScrollTableState:
    """The selected row index among `rows` rows."""

    def __init__(self, rows: int) -> None:
        self.rows = rows
        self.index = 0

    def move(self, delta: int) -> None:
        if not self.rows:
            self.index = 0
            return
        self.index = min(max(0, self.index + delta), self.rows - 1)

    def first(self) -> None:
        self.index = 0

    def last(self) -> None:
        self.index = max(0, self.rows - 1)

    def resize(self, rows: int) -> None:
        """Change the row count, keeping the selection in range."""
        self.rows = rows
        self.move(0)


def visible_window(index: int, rows: int, height: int) -> tuple[int, int]:
    """
    Pick which rows to draw so that `index` is visible.

    Returns:
        (first row, end row) with at most `height` rows between them.
    """
    if height <= 0 or rows <= 0:
        return (0, 0)
    if rows <= height:
        return (0, rows)
    start = min(max(0, index - height // 2), rows - height)
    return (start, start + height)


class ScrollTable(Component):
    """A table with a movable selection."""

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props
        self.state = ScrollTableState(len(props.texts.table or ()))

    @property
    def max_step(self) -> int:
        return own_value(self.props, PROP_MAX_STEP, DEFAULT_MAX_STEP)

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return

        rows = self.props.texts.table or ()
        height = area.height
        if self.props.borders.borders != Borders.NONE:
            height -= 2
        if own_values(self.props, PROP_HEADERS):
            height -= 1

        start, end = visible_window(self.state.index, len(rows), height)
        highlight_color = self.props.palette.get(PALETTE_HIGHLIGHT)
        if highlight_color is None:
            highlight_style = Style(reverse=True)
        else:
            highlight_style = Style(color=highlight_color, bold=True)

        table = build_rich_table(
            rows[start:end],
            self.props,
            highlighted=self.state.index - start,
            highlight_style=highlight_style,
            highlight_symbol=own_value(self.props, PROP_HIGHLIGHTED_STR, ""),
        )
        frame.render_widget(get_block(table, self.props, self.focused), area)

    def on(self, event: Event) -> Msg | None:
        if not isinstance(event, KeyEvent):
            return None

        code = event.code
        if code is Key.DOWN:
            self.state.move(1)
        elif code is Key.UP:
            self.state.move(-1)
        elif code is Key.PAGE_DOWN:
            self.state.move(self.max_step)
        elif code is Key.PAGE_UP:
            self.state.move(-self.max_step)
        elif code is Key.HOME:
            self.state.first()
        elif code is Key.END:
            self.state.last()
        elif code is Key.ENTER:
            return OnSubmit(self.get_state())
        else:
            return OnKey(event)
        return None

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        self.props = props
        self.state.resize(len(props.texts.table or ()))
        return None

    def get_state(self) -> Payload:
        """The selected row index, or no payload for an empty table."""
        if not self.state.rows:
            return Payload.none()
        return Payload.one(Value.integer(self.state.index))
