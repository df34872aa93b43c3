# =============================================================================
# Checkbox Widget
# =============================================================================
# A horizontal group of options, any number of which can be checked.
#
# Keys:
#   - left / right: move between options       -> nothing
#   - space: check / uncheck the current option  -> OnChange([checked indices])
#   - enter: submit                             -> OnSubmit([checked indices])
#   - anything else                             -> OnKey(event)
#
# The options are the spans of props.texts; the initially checked options
# are set with CheckboxPropsBuilder.with_value().
# =============================================================================

from collections.abc import Iterable

from rich.style import Style
from rich.text import Text

from realm_tui.component import Component
from realm_tui.components.utils import get_block, own_values, props_style, span_style, usize
from realm_tui.core.event import Event, Key, KeyEvent
from realm_tui.core.msg import Msg, OnChange, OnKey, OnSubmit, Payload, Value
from realm_tui.core.props import GenericPropsBuilder, PropPayload, Props, TextParts, TextSpan
from realm_tui.rendering import Frame, Rect

PROP_VALUE = "value"

CHECKED = "☑"
UNCHECKED = "☐"


class CheckboxPropsBuilder(GenericPropsBuilder):
    """
    Props builder for Checkbox.

    Usage:
        >>> props = (
        ...     CheckboxPropsBuilder()
        ...     .with_options("Toppings", ["cheese", "ham", "olives"])
        ...     .with_value([0, 2])
        ...     .build()
        ... )
    """

    def with_options(self, title: str | None, options: Iterable[str]) -> "CheckboxPropsBuilder":
        return self.with_texts(TextParts.new(title, [TextSpan(option) for option in options]))

    def with_value(self, checked: Iterable[int]) -> "CheckboxPropsBuilder":
        """Indices of the options checked at start."""
        return self.with_own(PROP_VALUE, PropPayload.vec(usize(i) for i in checked))


class CheckboxState:
    """Which options exist, which are checked, and which one has the cursor."""

    def __init__(self, choices: int, checked: Iterable[int] = ()) -> None:
        self.choices = choices
        self.selection: set[int] = {i for i in checked if 0 <= i < choices}
        self.focus = 0

    def next_choice(self) -> None:
        if self.focus + 1 < self.choices:
            self.focus += 1

    def prev_choice(self) -> None:
        if self.focus > 0:
            self.focus -= 1

    def toggle(self) -> bool:
        """Toggle the option under the cursor. False if there are no options."""
        if not self.choices:
            return False
        self.selection ^= {self.focus}
        return True

    def is_checked(self, index: int) -> bool:
        return index in self.selection

    def checked(self) -> list[int]:
        return sorted(self.selection)


class Checkbox(Component):
    """A group of checkable options."""

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props
        self.state = self._make_state(props)

    @staticmethod
    def _make_state(props: Props) -> CheckboxState:
        spans = props.texts.spans or ()
        return CheckboxState(len(spans), own_values(props, PROP_VALUE))

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return

        text = Text(no_wrap=True, overflow="ellipsis", style=props_style(self.props))
        for index, span in enumerate(self.props.texts.spans or ()):
            if index:
                text.append("  ")
            mark = CHECKED if self.state.is_checked(index) else UNCHECKED
            style = span_style(span, self.props)
            if self.focused and index == self.state.focus:
                style += Style(reverse=True)
            text.append(f"{mark} {span.content}", style=style)

        frame.render_widget(get_block(text, self.props, self.focused), area)

    def on(self, event: Event) -> Msg | None:
        if not isinstance(event, KeyEvent):
            return None

        if event.code is Key.RIGHT:
            self.state.next_choice()
            return None
        elif event.code is Key.LEFT:
            self.state.prev_choice()
            return None
        elif event.code is Key.CHAR and event.char == " " and not event.is_control:
            if self.state.toggle():
                return OnChange(self.get_state())
            return None
        elif event.code is Key.ENTER:
            return OnSubmit(self.get_state())

        return OnKey(event)

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        old_options = self.props.texts.spans
        old_value = own_values(self.props, PROP_VALUE)
        self.props = props
        if props.texts.spans != old_options or own_values(props, PROP_VALUE) != old_value:
            focus = self.state.focus
            self.state = self._make_state(props)
            self.state.focus = min(focus, max(0, self.state.choices - 1))
        return None

    def get_state(self) -> Payload:
        """The checked option indices, in ascending order."""
        return Payload.vec(Value.integer(i) for i in self.state.checked())
