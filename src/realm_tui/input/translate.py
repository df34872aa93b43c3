# =============================================================================
# Textual Event Translation
# =============================================================================
# Textual decodes the terminal's byte stream for us (escape sequences,
# bracketed paste, resize signals). This module turns the resulting Textual
# events into the backend-neutral events components understand.
#
# Textual names keys like "enter", "ctrl+left" or "shift+tab"; printable
# keys also carry the typed character ("a", "A", " ").
# =============================================================================

from textual import events

from realm_tui.core.event import (
    Event,
    Key,
    KeyEvent,
    KeyModifiers,
    PasteEvent,
    ResizeEvent,
)


# Textual key names -> key codes
KEY_NAMES: dict[str, Key] = {
    "enter": Key.ENTER,
    "escape": Key.ESC,
    "backspace": Key.BACKSPACE,
    "delete": Key.DELETE,
    "insert": Key.INSERT,
    "tab": Key.TAB,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "up": Key.UP,
    "down": Key.DOWN,
    "home": Key.HOME,
    "end": Key.END,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
}

MODIFIER_NAMES: dict[str, KeyModifiers] = {
    "shift": KeyModifiers.SHIFT,
    "ctrl": KeyModifiers.CONTROL,
    "alt": KeyModifiers.ALT,
    "meta": KeyModifiers.ALT,
}


def key_event_from_textual(event: events.Key) -> KeyEvent | None:
    """
    Translate a Textual key press.

    Args:
        event: The Textual Key event.

    Returns:
        The matching KeyEvent, or None for keys with no equivalent.
    """
    *modifier_names, name = event.key.split("+")
    modifiers = KeyModifiers.NONE
    for modifier_name in modifier_names:
        modifiers |= MODIFIER_NAMES.get(modifier_name, KeyModifiers.NONE)

    # shift+tab is its own key
    if name == "tab" and modifiers & KeyModifiers.SHIFT:
        return KeyEvent(Key.BACK_TAB, modifiers=modifiers & ~KeyModifiers.SHIFT)

    if name in KEY_NAMES:
        return KeyEvent(KEY_NAMES[name], modifiers=modifiers)

    # Function keys: "f1" .. "f24"
    if name.startswith("f") and name[1:].isdigit():
        return KeyEvent(Key.FUNCTION, name[1:], modifiers)

    # Printable keys carry their character; shift is already applied to it
    if event.is_printable and event.character:
        return KeyEvent.from_char(event.character, modifiers & ~KeyModifiers.SHIFT)

    # Control combinations ("ctrl+c") have a non-printable character
    if len(name) == 1 and modifiers:
        return KeyEvent.from_char(name, modifiers)

    return None


def event_from_textual(event: events.Event) -> Event | None:
    """
    Translate any supported Textual event.

    Handles key presses, resizes and pastes. Returns None for everything
    else (mouse, focus, ...).
    """
    if isinstance(event, events.Key):
        return key_event_from_textual(event)
    if isinstance(event, events.Resize):
        return ResizeEvent(event.size.width, event.size.height)
    if isinstance(event, events.Paste):
        return PasteEvent(event.text)
    return None
