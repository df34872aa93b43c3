# =============================================================================
# Label Widget
# =============================================================================
# A single line of text, without border. It has no state of its own: every
# key press is passed on to the application as OnKey.
# =============================================================================

from rich.text import Text

from realm_tui.component import Component
from realm_tui.components.utils import own_value, props_style, text_value
from realm_tui.core.event import Event, KeyEvent
from realm_tui.core.msg import Msg, OnKey
from realm_tui.core.props import GenericPropsBuilder, PropPayload, Props
from realm_tui.rendering import Frame, Rect

PROP_TEXT = "text"


class LabelPropsBuilder(GenericPropsBuilder):
    """
    Props builder for Label.

    Usage:
        >>> props = LabelPropsBuilder().with_text("Hello").bold().build()
    """

    def with_text(self, text: str) -> "LabelPropsBuilder":
        return self.with_own(PROP_TEXT, PropPayload.one(text_value(text)))


class Label(Component):
    """A line of styled text."""

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props

    @property
    def text(self) -> str:
        return own_value(self.props, PROP_TEXT, "")

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return
        text = Text(self.text, style=props_style(self.props), no_wrap=True, overflow="ellipsis")
        frame.render_widget(text, area)

    def on(self, event: Event) -> Msg | None:
        if isinstance(event, KeyEvent):
            return OnKey(event)
        return None

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        self.props = props
        return None
