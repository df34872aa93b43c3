# =============================================================================
# Input Widget
# =============================================================================
# A single-line text field.
#
# Keys:
#   - characters / paste: insert at the cursor      -> OnChange(value)
#   - backspace / delete: remove a character        -> OnChange(value)
#   - left, right, home, end: move the cursor       -> nothing
#   - enter: submit                                 -> OnSubmit(value)
#   - anything else (esc, tab, ctrl+...)            -> OnKey(event)
#
# Properties (set with InputPropsBuilder):
#   - input type: TEXT, NUMBER (only numeric characters) or PASSWORD
#     (drawn as asterisks)
#   - input length: maximum number of characters (0 = unlimited)
#   - label: title drawn on the border
#   - value: initial value
# =============================================================================

from rich.style import Style
from rich.text import Text

from realm_tui.component import Component
from realm_tui.components.utils import (
    get_block,
    own_value,
    props_style,
    text_value,
    usize,
)
from realm_tui.core.event import Event, Key, KeyEvent, PasteEvent
from realm_tui.core.msg import Msg, OnChange, OnKey, OnSubmit, Payload, Value
from realm_tui.core.props import (
    Borders,
    GenericPropsBuilder,
    InputType,
    PropKind,
    PropPayload,
    Props,
    PropValue,
    TextParts,
)
from realm_tui.rendering import Frame, Rect

PROP_INPUT_TYPE = "input_type"
PROP_INPUT_LEN = "input_len"
PROP_VALUE = "value"


class InputPropsBuilder(GenericPropsBuilder):
    """
    Props builder for Input.

    Usage:
        >>> props = (
        ...     InputPropsBuilder()
        ...     .with_input(InputType.TEXT)
        ...     .with_label("Type in something nice")
        ...     .build()
        ... )
    """

    def __init__(self, props: Props | None = None) -> None:
        super().__init__(props)
        if props is None:
            self.with_input(InputType.TEXT)

    def with_input(self, input_type: InputType) -> "InputPropsBuilder":
        return self.with_own(
            PROP_INPUT_TYPE, PropPayload.one(PropValue(PropKind.INPUT_TYPE, input_type))
        )

    def with_input_len(self, length: int) -> "InputPropsBuilder":
        """Limit the value to `length` characters (0 means no limit)."""
        return self.with_own(PROP_INPUT_LEN, PropPayload.one(usize(length)))

    def with_label(self, label: str) -> "InputPropsBuilder":
        return self.with_texts(TextParts.new(label, self._texts.spans))

    def with_value(self, value: str) -> "InputPropsBuilder":
        return self.with_own(PROP_VALUE, PropPayload.one(text_value(value)))


class InputState:
    """
    The text being edited and the cursor position.

    The cursor is an index into the characters: 0 is before the first one,
    len(chars) is after the last one.
    """

    def __init__(self, value: str = "") -> None:
        self.chars: list[str] = list(value)
        self.cursor = len(self.chars)

    @property
    def value(self) -> str:
        return "".join(self.chars)

    def insert(self, char: str, input_type: InputType, max_len: int) -> bool:
        """Insert `char` at the cursor. Returns False if it was rejected."""
        if max_len and len(self.chars) >= max_len:
            return False
        if input_type is InputType.NUMBER and not self._is_numeric(char):
            return False
        self.chars.insert(self.cursor, char)
        self.cursor += 1
        return True

    def _is_numeric(self, char: str) -> bool:
        # Nothing goes in front of a leading minus sign
        if self.cursor == 0 and self.chars[:1] == ["-"]:
            return False
        if char.isascii() and char.isdigit():
            return True
        # One leading minus sign and one decimal point
        if char == "-":
            return self.cursor == 0 and "-" not in self.chars
        if char == ".":
            return "." not in self.chars
        return False

    def backspace(self) -> bool:
        if self.cursor == 0:
            return False
        self.cursor -= 1
        del self.chars[self.cursor]
        return True

    def delete(self) -> bool:
        if self.cursor >= len(self.chars):
            return False
        del self.chars[self.cursor]
        return True

    def left(self) -> None:
        self.cursor = max(0, self.cursor - 1)

    def right(self) -> None:
        self.cursor = min(len(self.chars), self.cursor + 1)

    def home(self) -> None:
        self.cursor = 0

    def end(self) -> None:
        self.cursor = len(self.chars)

    def truncate(self, max_len: int) -> None:
        """Drop characters past `max_len` (0 means no limit)."""
        if max_len:
            del self.chars[max_len:]
            self.cursor = min(self.cursor, len(self.chars))

    def display(self, input_type: InputType) -> str:
        """The text as shown on screen (masked for passwords)."""
        if input_type is InputType.PASSWORD:
            return "*" * len(self.chars)
        return self.value


class Input(Component):
    """
    A single-line text input.

    Usage:
        >>> view.mount("INPUT", Input(InputPropsBuilder().with_label("Name").build()))
    """

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props
        self.state = InputState()
        self._reset_state()

    # -------------------------------------------------------------------------
    # Property helpers
    # -------------------------------------------------------------------------

    @property
    def input_type(self) -> InputType:
        return own_value(self.props, PROP_INPUT_TYPE, InputType.TEXT)

    @property
    def input_len(self) -> int:
        return own_value(self.props, PROP_INPUT_LEN, 0)

    def _reset_state(self) -> None:
        """Load the value from props, dropping characters that don't fit."""
        self.state = InputState()
        for char in own_value(self.props, PROP_VALUE, ""):
            self.state.insert(char, self.input_type, self.input_len)

    # -------------------------------------------------------------------------
    # Component contract
    # -------------------------------------------------------------------------

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return

        has_borders = self.props.borders.borders != Borders.NONE
        inner_width = max(1, area.width - 2) if has_borders else area.width

        shown = self.state.display(self.input_type)
        cursor = self.state.cursor
        # Scroll horizontally so the cursor stays visible
        offset = max(0, cursor - inner_width + 1)
        visible = shown[offset:offset + inner_width]

        text = Text(no_wrap=True, overflow="crop", style=props_style(self.props))
        if self.focused:
            at = cursor - offset
            text.append(visible[:at])
            text.append(visible[at:at + 1] or " ", style=Style(reverse=True))
            text.append(visible[at + 1:])
        else:
            text.append(visible)

        frame.render_widget(get_block(text, self.props, self.focused), area)

    def on(self, event: Event) -> Msg | None:
        if isinstance(event, PasteEvent):
            inserted = False
            for char in event.text:
                if char.isprintable():
                    inserted |= self.state.insert(char, self.input_type, self.input_len)
            return OnChange(self.get_state()) if inserted else None

        if not isinstance(event, KeyEvent):
            return None

        code = event.code
        if code is Key.CHAR and not event.is_control:
            if self.state.insert(event.char, self.input_type, self.input_len):
                return OnChange(self.get_state())
            return None
        elif code is Key.BACKSPACE:
            return OnChange(self.get_state()) if self.state.backspace() else None
        elif code is Key.DELETE:
            return OnChange(self.get_state()) if self.state.delete() else None
        elif code is Key.LEFT:
            self.state.left()
            return None
        elif code is Key.RIGHT:
            self.state.right()
            return None
        elif code is Key.HOME:
            self.state.home()
            return None
        elif code is Key.END:
            self.state.end()
            return None
        elif code is Key.ENTER:
            return OnSubmit(self.get_state())

        return OnKey(event)

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        old_value = own_value(self.props, PROP_VALUE, "")
        old_type = self.input_type
        self.props = props
        # Only reset the text if the configured value or type changed
        if own_value(props, PROP_VALUE, "") != old_value or self.input_type is not old_type:
            self._reset_state()
        else:
            self.state.truncate(self.input_len)
        return None

    def get_state(self) -> Payload:
        """
        The current value.

        Text and password inputs give Value.text. Number inputs give
        Value.integer or Value.number when the text parses, and no payload
        while the field is empty.
        """
        value = self.state.value
        if self.input_type is not InputType.NUMBER:
            return Payload.one(Value.text(value))

        if not value:
            return Payload.none()
        try:
            return Payload.one(Value.integer(int(value)))
        except ValueError:
            pass
        try:
            return Payload.one(Value.number(float(value)))
        except ValueError:
            return Payload.one(Value.text(value))
