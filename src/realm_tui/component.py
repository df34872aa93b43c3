# =============================================================================
# Component
# =============================================================================
# The contract every widget implements.
#
# A component owns exactly one Props value plus whatever private state it
# needs (cursor position, scroll offset, selected option...). The View
# talks to every widget through this interface only, so any widget can be
# mounted next to any other:
#
#   - render(frame, area): draw yourself; never change state here
#   - on(event):           handle an input event, maybe return a Msg
#   - get_props():         current configuration
#   - update(props):       replace configuration, maybe return a Msg
#   - get_state():         current value as a Payload
#   - active() / blur():   focus gained / lost
# =============================================================================

from abc import ABC, abstractmethod

from realm_tui.core.event import Event
from realm_tui.core.msg import Msg, Payload
from realm_tui.core.props import Props
from realm_tui.rendering import Frame, Rect


class Component(ABC):
    """
    Base class of all widgets.

    Subclasses must implement render(), on(), get_props() and update().
    The focus hooks and get_state() have working defaults.

    Attributes:
        focused: True while the View has this component focused.
    """

    def __init__(self) -> None:
        self.focused = False

    @abstractmethod
    def render(self, frame: Frame, area: Rect) -> None:
        """
        Draw the component into `area` of `frame`.

        Must not mutate the component and must work whether or not the
        component has focus. Hidden components and empty areas draw nothing.
        """

    @abstractmethod
    def on(self, event: Event) -> Msg | None:
        """
        Handle one input event.

        May change this component's own state. Returns None when nothing the
        application needs to know about happened (e.g. the cursor moved), or
        a Msg describing what happened (value changed, submitted, ...).
        """

    @abstractmethod
    def get_props(self) -> Props:
        """Return the current configuration."""

    @abstractmethod
    def update(self, props: Props) -> Msg | None:
        """
        Replace the configuration wholesale.

        Returns a Msg if the change has an effect worth reporting, which
        most components don't.
        """

    def get_state(self) -> Payload:
        """Return the component's current value. Nothing by default."""
        return Payload.none()

    def active(self) -> None:
        """Called when the component gets focus."""
        self.focused = True

    def blur(self) -> None:
        """Called when the component loses focus."""
        self.focused = False
