# =============================================================================
# Demo Application
# =============================================================================
# A minimal application showing the whole cycle:
#
#   ┌ Type in something nice ───────────────┐
#   │hi                                     │   <- Input, focused
#   └───────────────────────────────────────┘
#   You typed: 'hi'                               <- Label
#
# Typing edits the input; <ENTER> submits it, and the reducer copies the
# value into the label. <ESC> quits.
# =============================================================================

import logging

from realm_tui.components import Input, InputPropsBuilder, Label, LabelPropsBuilder
from realm_tui.config import Config
from realm_tui.core.event import Key
from realm_tui.core.msg import OnKey, OnSubmit, PayloadShape, TaggedMsg, ValueKind
from realm_tui.core.props import Borders, BorderType, InputType
from realm_tui.core.style import parse_color
from realm_tui.host import Application
from realm_tui.rendering import Frame, Rect
from realm_tui.view import View

logger = logging.getLogger(__name__)

COMPONENT_INPUT = "INPUT"
COMPONENT_LABEL = "LABEL"

INPUT_HEIGHT = 3
LABEL_HEIGHT = 1


def build_view(config: Config | None = None) -> View:
    """Create the demo View: an input with focus and a label."""
    config = config or Config()
    view = View()

    view.mount(
        COMPONENT_INPUT,
        Input(
            InputPropsBuilder()
            .with_borders(Borders.ALL, BorderType.ROUNDED, parse_color("bright_yellow"))
            .with_foreground(parse_color("bright_yellow"))
            .with_input(InputType.TEXT)
            .with_input_len(config.ui.input_max_length)
            .with_label("Type in something nice")
            .build()
        ),
    )
    view.mount(
        COMPONENT_LABEL,
        Label(
            LabelPropsBuilder()
            .with_foreground(parse_color("cyan"))
            .with_text("Your input will appear in after a submit")
            .build()
        ),
    )

    view.active(COMPONENT_INPUT)
    return view


class DemoModel(Application):
    """The demo's model and reducer."""

    def __init__(self, view: View, config: Config | None = None) -> None:
        config = config or Config()
        super().__init__(view, redraw_interval=config.host.redraw_interval_ms / 1000)
        self.margin = config.ui.margin

    def update(self, msg: TaggedMsg | None) -> TaggedMsg | None:
        if msg is None:
            return None

        id, message = msg
        if (
            id == COMPONENT_INPUT
            and isinstance(message, OnSubmit)
            and message.payload.shape is PayloadShape.ONE
            and message.payload.data.kind is ValueKind.TEXT
        ):
            props = self.view.get_props(COMPONENT_LABEL)
            if props is None:
                return None
            text = message.payload.data.value
            props = LabelPropsBuilder.from_props(props).with_text(f"You typed: '{text}'").build()
            # Hand the label's own message (if any) back to the update loop
            return self.view.update(COMPONENT_LABEL, props)
        elif isinstance(message, OnKey) and message.event.code is Key.ESC:
            logger.info("Quit requested")
            self.request_quit()
            return None

        return None

    def draw(self, frame: Frame) -> None:
        area = frame.size.inner(self.margin)
        input_area = Rect(area.x, area.y, area.width, min(INPUT_HEIGHT, area.height))
        label_area = Rect(
            area.x,
            input_area.bottom,
            area.width,
            max(0, min(LABEL_HEIGHT, area.bottom - input_area.bottom)),
        )
        self.view.render(COMPONENT_INPUT, frame, input_area)
        self.view.render(COMPONENT_LABEL, frame, label_area)
