# =============================================================================
# Input Handlers
# =============================================================================
# The input backend interface: something that can be asked for the next
# raw event and answers with an event or None (nothing ready yet).
#
# QueueInputHandler is an in-memory backend. The Textual host pushes the
# events it receives into one, headless hosts and tests push events by
# hand.
# =============================================================================

from collections import deque
from collections.abc import Iterable
from typing import Protocol

from realm_tui.core.event import Event


class InputHandler(Protocol):
    """Source of raw input events."""

    def read_event(self) -> Event | None:
        """Return the next event, or None if nothing is ready."""
        ...


class QueueInputHandler:
    """
    An input backend backed by a FIFO queue.

    Usage:
        >>> handler = QueueInputHandler([KeyEvent.from_char("h")])
        >>> handler.read_event()
        KeyEvent(code=<Key.CHAR: 1>, char='h', modifiers=<KeyModifiers.NONE: 0>)
        >>> handler.read_event() is None
        True
    """

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._queue: deque[Event] = deque(events)

    def push(self, event: Event) -> None:
        """Queue an event."""
        self._queue.append(event)

    def extend(self, events: Iterable[Event]) -> None:
        """Queue several events, in order."""
        self._queue.extend(events)

    def read_event(self) -> Event | None:
        if not self._queue:
            return None
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)
