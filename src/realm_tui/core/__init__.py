# =============================================================================
# Realm-TUI Core Module
# =============================================================================
# The value types the framework is built on. These are frozen dataclasses
# and enums with no dependency on the rest of the package (only on Rich's
# color type), so they can be imported anywhere.
#
#   - props: the component configuration model (Props, PropPayload, ...)
#   - event: raw input events (KeyEvent, ResizeEvent, PasteEvent)
#   - msg:   messages components emit (OnChange, OnSubmit, OnKey, Payload)
#   - style: colors and modifiers
# =============================================================================

from realm_tui.core.event import (
    Event,
    Key,
    KeyEvent,
    KeyModifiers,
    PasteEvent,
    ResizeEvent,
)
from realm_tui.core.msg import (
    Msg,
    OnChange,
    OnKey,
    OnSubmit,
    Payload,
    PayloadShape,
    TaggedMsg,
    Value,
    ValueKind,
)
from realm_tui.core.style import RESET, Modifier, parse_color, to_rich_style

__all__ = [
    "Event",
    "Key",
    "KeyEvent",
    "KeyModifiers",
    "PasteEvent",
    "ResizeEvent",
    "Msg",
    "OnChange",
    "OnKey",
    "OnSubmit",
    "Payload",
    "PayloadShape",
    "TaggedMsg",
    "Value",
    "ValueKind",
    "RESET",
    "Modifier",
    "parse_color",
    "to_rich_style",
]
