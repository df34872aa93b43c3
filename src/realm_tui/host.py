# =============================================================================
# Application Model
# =============================================================================
# The state a host loop keeps around a View:
#
#   - quit:   set by the reducer when the application should stop
#   - redraw: set whenever something happened that needs a repaint
#   - last_redraw: when the last repaint happened
#
# A concrete application subclasses Application, implements update() (the
# reducer) and draw() (the layout), and hands itself to a host: the Textual
# RealmApp, or the tick() loop below for headless use and tests.
#
# One tick:
#   event = input.read_event()          # None if nothing is ready
#   msg = view.on(event)                # route to the focused component
#   run_update(self.update, msg)        # trampoline the reducer
#   if should_redraw(): draw(); reset()
# =============================================================================

import logging
import time
from abc import ABC, abstractmethod

from realm_tui.core.event import Event
from realm_tui.core.msg import TaggedMsg
from realm_tui.input import InputHandler
from realm_tui.rendering import Frame
from realm_tui.update import run_update
from realm_tui.view import View

logger = logging.getLogger(__name__)


class Application(ABC):
    """
    Base class for application models.

    Attributes:
        view: The View holding the application's components.
        quit: Becomes True when the application wants to exit.
        redraw: True if the UI must be repainted.
        last_redraw: Monotonic time of the last repaint.
        redraw_interval: Repaint at least this often (seconds).
    """

    def __init__(self, view: View, redraw_interval: float = 0.05) -> None:
        self.view = view
        self.quit = False
        self.redraw = True
        self.last_redraw = time.monotonic()
        self.redraw_interval = redraw_interval

    # -------------------------------------------------------------------------
    # To implement
    # -------------------------------------------------------------------------

    @abstractmethod
    def update(self, msg: TaggedMsg | None) -> TaggedMsg | None:
        """The reducer: handle `msg`, return the next message or None."""

    @abstractmethod
    def draw(self, frame: Frame) -> None:
        """Lay out and render the components into `frame`."""

    # -------------------------------------------------------------------------
    # Host loop helpers
    # -------------------------------------------------------------------------

    def request_quit(self) -> None:
        self.quit = True

    def request_redraw(self) -> None:
        self.redraw = True

    def should_redraw(self) -> bool:
        """True if a repaint was requested or the redraw interval elapsed."""
        return self.redraw or time.monotonic() - self.last_redraw > self.redraw_interval

    def reset(self) -> None:
        """Mark the UI as freshly drawn."""
        self.redraw = False
        self.last_redraw = time.monotonic()

    def handle(self, event: Event) -> int:
        """
        Process one input event: route it, then run the update loop.

        Returns:
            Number of reducer calls made.
        """
        msg = self.view.on(event)
        self.request_redraw()
        return run_update(self.update, msg)

    def tick(self, input_handler: InputHandler) -> bool:
        """
        Run one iteration of a polling host loop.

        Args:
            input_handler: Where to read the next event from.

        Returns:
            True if an event was processed.
        """
        event = input_handler.read_event()
        if event is None:
            return False
        logger.debug(f"Event: {event}")
        self.handle(event)
        return True

    def render(self, width: int, height: int) -> Frame:
        """Draw the whole UI into a new frame and mark it as drawn."""
        frame = Frame(width, height)
        self.draw(frame)
        self.reset()
        return frame
