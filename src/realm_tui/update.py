# =============================================================================
# Update Dispatch
# =============================================================================
# The "U" in Model-View-Update.
#
# The application provides one reducer: given the last tagged message (or
# None), it reacts (possibly changing other components through
# View.update) and returns the next tagged message to process, or None
# when it's done.
#
# run_update() feeds the reducer's output back into itself in a loop. A
# chain like "input changed -> update label -> label reports a change ->
# update status bar" therefore never grows the call stack, however long it
# gets. The loop stops only when the reducer returns None: a reducer that
# always returns a new message never returns control to the host.
# =============================================================================

import logging
from collections.abc import Callable
from typing import Protocol

from realm_tui.core.msg import TaggedMsg

logger = logging.getLogger(__name__)


# The reducer signature
Reducer = Callable[[TaggedMsg | None], TaggedMsg | None]


class Update(Protocol):
    """Anything with an update() reducer, typically the application model."""

    def update(self, msg: TaggedMsg | None) -> TaggedMsg | None:
        """Process `msg` and return the next message, or None to stop."""
        ...


def run_update(reducer: Reducer, msg: TaggedMsg | None) -> int:
    """
    Run the reducer until it returns None.

    The reducer is always called once with `msg` (even if it's None), then
    again with each message it returns.

    Args:
        reducer: The application's reducer, e.g. `model.update`.
        msg: The first message, usually the result of View.on().

    Returns:
        How many times the reducer was called.
    """
    steps = 0
    while True:
        msg = reducer(msg)
        steps += 1
        if msg is None:
            break
        logger.debug(f"Update step {steps}: {msg[0]!r} -> {msg[1]!r}")
    return steps
