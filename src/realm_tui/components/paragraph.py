# =============================================================================
# Paragraph Widget
# =============================================================================
# A block of styled spans, wrapped to the available width, inside a border.
# Read-only: key presses are passed on as OnKey.
# =============================================================================

from collections.abc import Iterable

from rich.text import Text

from realm_tui.component import Component
from realm_tui.components.utils import get_block, own_value, spans_to_text, text_value
from realm_tui.core.event import Event, KeyEvent
from realm_tui.core.msg import Msg, OnKey
from realm_tui.core.props import GenericPropsBuilder, PropPayload, Props, TextParts, TextSpan
from realm_tui.rendering import Frame, Rect

PROP_ALIGNMENT = "alignment"

ALIGNMENTS = ("left", "center", "right")


class ParagraphPropsBuilder(GenericPropsBuilder):
    """
    Props builder for Paragraph.

    Usage:
        >>> props = (
        ...     ParagraphPropsBuilder()
        ...     .with_texts(TextParts.new("Lorem", [TextSpan("ipsum dolor sit amet")]))
        ...     .with_alignment("center")
        ...     .build()
        ... )
    """

    def with_spans(self, title: str | None, spans: Iterable[TextSpan]) -> "ParagraphPropsBuilder":
        return self.with_texts(TextParts.new(title, spans))

    def with_alignment(self, alignment: str) -> "ParagraphPropsBuilder":
        """Text alignment: "left", "center" or "right". Anything else means left."""
        return self.with_own(PROP_ALIGNMENT, PropPayload.one(text_value(alignment)))


def alignment_of(props: Props) -> str:
    alignment = own_value(props, PROP_ALIGNMENT, "left")
    return alignment if alignment in ALIGNMENTS else "left"


class Paragraph(Component):
    """Wrapped, styled text inside a block."""

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return
        text: Text = spans_to_text(self.props.texts.spans, self.props, justify=alignment_of(self.props))
        frame.render_widget(get_block(text, self.props, self.focused), area)

    def on(self, event: Event) -> Msg | None:
        if isinstance(event, KeyEvent):
            return OnKey(event)
        return None

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        self.props = props
        return None
