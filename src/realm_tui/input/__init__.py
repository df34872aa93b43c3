# =============================================================================
# Input Module
# =============================================================================
# Input backends: where raw events come from.
#   - InputHandler: the interface (read_event() -> event or None)
#   - QueueInputHandler: in-memory FIFO backend
#   - event_from_textual: translation of Textual's decoded events
# =============================================================================

from realm_tui.input.handler import InputHandler, QueueInputHandler
from realm_tui.input.translate import event_from_textual, key_event_from_textual

__all__ = [
    "InputHandler",
    "QueueInputHandler",
    "event_from_textual",
    "key_event_from_textual",
]
