# =============================================================================
# Text Area Widget
# =============================================================================
# Multi-line read-only text that scrolls. Each span of props.texts is one
# line (long lines wrap).
#
# Keys:
#   - up / down: scroll one line                     -> nothing
#   - page up / page down: scroll by the max step    -> nothing
#   - home / end: first / last line                  -> nothing
#   - anything else                                  -> OnKey(event)
# =============================================================================

from collections.abc import Iterable

from rich.text import Text

from realm_tui.component import Component
from realm_tui.components.scrolltable import DEFAULT_MAX_STEP, PROP_MAX_STEP, ScrollTableState
from realm_tui.components.utils import get_block, own_value, props_style, span_style, usize
from realm_tui.core.event import Event, Key, KeyEvent
from realm_tui.core.msg import Msg, OnKey
from realm_tui.core.props import GenericPropsBuilder, PropPayload, Props, TextParts, TextSpan
from realm_tui.rendering import Frame, Rect


class TextareaPropsBuilder(GenericPropsBuilder):
    """
    Props builder for Textarea.

    Usage:
        >>> props = TextareaPropsBuilder().with_lines("Log", [TextSpan("started")]).build()
    """

    def with_lines(self, title: str | None, lines: Iterable[TextSpan]) -> "TextareaPropsBuilder":
        return self.with_texts(TextParts.new(title, lines))

    def with_max_scroll_step(self, step: int) -> "TextareaPropsBuilder":
        return self.with_own(PROP_MAX_STEP, PropPayload.one(usize(step)))


class Textarea(Component):
    """Scrollable multi-line text."""

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props
        # The first visible line, reusing the table's bounded index
        self.state = ScrollTableState(len(props.texts.spans or ()))

    @property
    def max_step(self) -> int:
        return own_value(self.props, PROP_MAX_STEP, DEFAULT_MAX_STEP)

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return

        lines = (self.props.texts.spans or ())[self.state.index:]
        text = Text(style=props_style(self.props))
        for number, span in enumerate(lines):
            if number:
                text.append("\n")
            text.append(span.content, style=span_style(span, self.props))

        frame.render_widget(get_block(text, self.props, self.focused), area)

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
        else:
            return OnKey(event)
        return None

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        self.props = props
        self.state.resize(len(props.texts.spans or ()))
        return None
