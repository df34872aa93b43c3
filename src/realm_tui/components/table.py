# =============================================================================
# Table Widget
# =============================================================================
# Rows of styled spans laid out in columns, with an optional header row.
# Read-only: key presses are passed on as OnKey. For a table the user can
# move through, see ScrollTable.
# =============================================================================

from collections.abc import Iterable, Sequence

from rich.style import Style
from rich.table import Table as RichTable
from rich.text import Text

from realm_tui.component import Component
from realm_tui.components.utils import get_block, own_values, props_style, span_style, text_value
from realm_tui.core.event import Event, KeyEvent
from realm_tui.core.msg import Msg, OnKey
from realm_tui.core.props import (
    GenericPropsBuilder,
    PropPayload,
    Props,
    Table,
    TextParts,
    TextSpan,
)
from realm_tui.rendering import Frame, Rect

PROP_HEADERS = "headers"


class TablePropsBuilder(GenericPropsBuilder):
    """
    Props builder for Table (and ScrollTable).

    Usage:
        >>> rows = TableBuilder().add_col(TextSpan("a")).add_row().add_col(TextSpan("b")).build()
        >>> props = TablePropsBuilder().with_table("Letters", rows).with_header(["letter"]).build()
    """

    def with_table(self, title: str | None, table: Table) -> "TablePropsBuilder":
        return self.with_texts(TextParts.with_table(title, table))

    def with_header(self, headers: Iterable[str]) -> "TablePropsBuilder":
        return self.with_own(PROP_HEADERS, PropPayload.vec(text_value(h) for h in headers))


def build_rich_table(
    rows: Sequence[Sequence[TextSpan]],
    props: Props,
    highlighted: int | None = None,
    highlight_style: Style | None = None,
    highlight_symbol: str = "",
) -> RichTable:
    """
    Lay out rows of spans as a Rich table.

    Args:
        rows: The rows to show.
        props: Component props (headers, colors).
        highlighted: Index (into `rows`) of a row to highlight.
        highlight_style: Style added to the highlighted row.
        highlight_symbol: Prefix drawn before the highlighted row; other
                          rows are indented by the same width.
    """
    headers = own_values(props, PROP_HEADERS)
    columns = max([len(headers), *(len(row) for row in rows)], default=0)

    table = RichTable(
        box=None,
        show_header=bool(headers),
        show_edge=False,
        pad_edge=False,
        expand=True,
        style=props_style(props),
        header_style=Style(bold=True),
    )
    for index in range(columns):
        table.add_column(headers[index] if index < len(headers) else "", no_wrap=True)

    indent = " " * len(highlight_symbol)
    for index, row in enumerate(rows):
        cells = [Text(span.content, style=span_style(span, props)) for span in row]
        cells += [Text("")] * (columns - len(cells))
        is_highlighted = index == highlighted
        if highlight_symbol and cells:
            prefix = highlight_symbol if is_highlighted else indent
            cells[0] = Text(prefix) + cells[0]
        table.add_row(*cells, style=highlight_style if is_highlighted else None)

    return table


class TableWidget(Component):
    """
    A static table.

    Named TableWidget so it doesn't clash with the Table rows type.
    """

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return
        table = build_rich_table(self.props.texts.table or (), self.props)
        frame.render_widget(get_block(table, self.props, self.focused), area)

    def on(self, event: Event) -> Msg | None:
        if isinstance(event, KeyEvent):
            return OnKey(event)
        return None

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        self.props = props
        return None
