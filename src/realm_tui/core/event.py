# =============================================================================
# Input Events
# =============================================================================
# The raw events components receive through View.on().
#
# These are backend-neutral: the Textual host translates its own events
# into these (see realm_tui.input.translate), and tests can create them
# directly. Components only ever see:
#
#   - KeyEvent:    a key press (special key or printable character)
#   - ResizeEvent: the terminal changed size
#   - PasteEvent:  a bracketed paste of text
# =============================================================================

from dataclasses import dataclass
from enum import Enum, IntFlag, auto


class Key(Enum):
    """Key codes. CHAR means a printable character, see KeyEvent.char."""
    CHAR = auto()
    ENTER = auto()
    ESC = auto()
    BACKSPACE = auto()
    DELETE = auto()
    INSERT = auto()
    TAB = auto()
    BACK_TAB = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    FUNCTION = auto()   # F1..F24, number in KeyEvent.char


class KeyModifiers(IntFlag):
    """Modifier keys held during a key press."""
    NONE = 0
    SHIFT = 1 << 0
    CONTROL = 1 << 1
    ALT = 1 << 2


@dataclass(frozen=True)
class KeyEvent:
    """
    A key press.

    Attributes:
        code: Which key.
        char: The character for Key.CHAR (and the number for Key.FUNCTION).
        modifiers: Modifier keys held.

    Example:
        >>> KeyEvent(Key.ENTER)
        >>> KeyEvent.from_char("h")
        >>> KeyEvent.from_char("c", KeyModifiers.CONTROL)
    """
    code: Key
    char: str | None = None
    modifiers: KeyModifiers = KeyModifiers.NONE

    @classmethod
    def from_char(cls, char: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> "KeyEvent":
        """Create a printable-character key press."""
        return cls(Key.CHAR, char, modifiers)

    @property
    def is_char(self) -> bool:
        return self.code is Key.CHAR

    @property
    def is_control(self) -> bool:
        return bool(self.modifiers & KeyModifiers.CONTROL)

    def __str__(self) -> str:
        mods = [m.name.lower() for m in KeyModifiers if m and self.modifiers & m]
        name = self.char if self.code is Key.CHAR else self.code.name.lower()
        if self.code is Key.FUNCTION:
            name = f"f{self.char}"
        return "+".join([*mods, str(name)])


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal was resized to width x height cells."""
    width: int
    height: int


@dataclass(frozen=True)
class PasteEvent:
    """Text pasted into the terminal."""
    text: str


# Anything a component can receive
Event = KeyEvent | ResizeEvent | PasteEvent
