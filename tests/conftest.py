# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Realm-TUI test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from realm_tui.component import Component
from realm_tui.core.event import Event
from realm_tui.core.msg import Msg, Payload, Value
from realm_tui.core.props import GenericPropsBuilder, Props
from realm_tui.core.style import parse_color
from realm_tui.rendering import Frame, Rect
from realm_tui.view import View


class StubComponent(Component):
    """
    A component that records what it's asked to do.

    Attributes:
        events: Every event passed to on().
        reply: Msg returned from on() (None by default).
        update_reply: Msg returned from update() (None by default).
        activations / blurs: How many times focus was gained / lost.
        renders: Areas passed to render().
    """

    def __init__(
        self,
        props: Props | None = None,
        reply: Msg | None = None,
        update_reply: Msg | None = None,
    ) -> None:
        super().__init__()
        self.props = props or Props()
        self.reply = reply
        self.update_reply = update_reply
        self.events: list[Event] = []
        self.activations = 0
        self.blurs = 0
        self.renders: list[Rect] = []

    def render(self, frame: Frame, area: Rect) -> None:
        self.renders.append(area)

    def on(self, event: Event) -> Msg | None:
        self.events.append(event)
        return self.reply

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        self.props = props
        return self.update_reply

    def get_state(self) -> Payload:
        return Payload.one(Value.integer(len(self.events)))

    def active(self) -> None:
        super().active()
        self.activations += 1

    def blur(self) -> None:
        super().blur()
        self.blurs += 1


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def stub_component():
    """The recording component class, to create as many as needed."""
    return StubComponent


@pytest.fixture
def view():
    """An empty View."""
    return View()


@pytest.fixture
def frame():
    """A 40x10 frame."""
    return Frame(40, 10)


@pytest.fixture
def sample_props():
    """Props with every field set to something other than its default."""
    from realm_tui.core.props import (
        Borders,
        BorderType,
        PropKind,
        PropPayload,
        PropValue,
        TextParts,
        TextSpan,
    )

    return (
        GenericPropsBuilder()
        .hidden()
        .with_foreground(parse_color("cyan"))
        .with_background(parse_color("black"))
        .with_borders(Borders.TOP | Borders.BOTTOM, BorderType.DOUBLE, parse_color("yellow"))
        .with_palette("highlight", parse_color("red"))
        .bold()
        .italic()
        .with_texts(TextParts.new("Title", [TextSpan("hello"), TextSpan("world")]))
        .with_own("max", PropPayload.one(PropValue(PropKind.USIZE, 8)))
        .build()
    )
