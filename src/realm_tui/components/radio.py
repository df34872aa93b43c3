# =============================================================================
# Radio Widget
# =============================================================================
# A horizontal group of options of which exactly one is selected.
#
# Keys:
#   - left / right: select the previous / next option -> OnChange(index)
#   - enter: submit the selection                      -> OnSubmit(index)
#   - anything else                                    -> OnKey(event)
#
# Moving past either end does nothing and reports nothing.
# =============================================================================

from collections.abc import Iterable

from rich.style import Style
from rich.text import Text

from realm_tui.component import Component
from realm_tui.components.utils import get_block, own_value, props_style, span_style, usize
from realm_tui.core.event import Event, Key, KeyEvent
from realm_tui.core.msg import Msg, OnChange, OnKey, OnSubmit, Payload, Value
from realm_tui.core.props import GenericPropsBuilder, PropPayload, Props, TextParts, TextSpan
from realm_tui.rendering import Frame, Rect

PROP_VALUE = "value"

SELECTED = "◉"
UNSELECTED = "○"


class RadioPropsBuilder(GenericPropsBuilder):
    """
    Props builder for Radio.

    Usage:
        >>> props = (
        ...     RadioPropsBuilder()
        ...     .with_options("Size", ["small", "medium", "large"])
        ...     .with_value(1)
        ...     .build()
        ... )
    """

    def with_options(self, title: str | None, options: Iterable[str]) -> "RadioPropsBuilder":
        return self.with_texts(TextParts.new(title, [TextSpan(option) for option in options]))

    def with_value(self, index: int) -> "RadioPropsBuilder":
        """Index of the option selected at start."""
        return self.with_own(PROP_VALUE, PropPayload.one(usize(index)))


class RadioState:
    """The number of options and the selected one."""

    def __init__(self, choices: int, choice: int = 0) -> None:
        self.choices = choices
        self.choice = min(max(0, choice), max(0, choices - 1))

    def next_choice(self) -> bool:
        if self.choice + 1 >= self.choices:
            return False
        self.choice += 1
        return True

    def prev_choice(self) -> bool:
        if self.choice == 0:
            return False
        self.choice -= 1
        return True


class Radio(Component):
    """A group of mutually exclusive options."""

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props
        self.state = self._make_state(props)

    @staticmethod
    def _make_state(props: Props) -> RadioState:
        spans = props.texts.spans or ()
        return RadioState(len(spans), own_value(props, PROP_VALUE, 0))

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return

        text = Text(no_wrap=True, overflow="ellipsis", style=props_style(self.props))
        for index, span in enumerate(self.props.texts.spans or ()):
            if index:
                text.append("  ")
            selected = index == self.state.choice
            style = span_style(span, self.props)
            if selected and self.focused:
                style += Style(reverse=True)
            text.append(f"{SELECTED if selected else UNSELECTED} {span.content}", style=style)

        frame.render_widget(get_block(text, self.props, self.focused), area)

    def on(self, event: Event) -> Msg | None:
        if not isinstance(event, KeyEvent):
            return None

        if event.code is Key.RIGHT:
            return OnChange(self.get_state()) if self.state.next_choice() else None
        elif event.code is Key.LEFT:
            return OnChange(self.get_state()) if self.state.prev_choice() else None
        elif event.code is Key.ENTER:
            return OnSubmit(self.get_state())

        return OnKey(event)

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        old_options = self.props.texts.spans
        old_value = own_value(self.props, PROP_VALUE, 0)
        self.props = props
        if props.texts.spans != old_options or own_value(props, PROP_VALUE, 0) != old_value:
            self.state = self._make_state(props)
        return None

    def get_state(self) -> Payload:
        """The selected index, or no payload when there are no options."""
        if not self.state.choices:
            return Payload.none()
        return Payload.one(Value.integer(self.state.choice))
