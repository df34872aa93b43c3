# =============================================================================
# Span Widget
# =============================================================================
# Styled spans on a single line, without border. Like Label, but each piece
# of text can have its own colors and modifiers.
# =============================================================================

from collections.abc import Iterable

from realm_tui.component import Component
from realm_tui.components.paragraph import PROP_ALIGNMENT, alignment_of
from realm_tui.components.utils import spans_to_text, text_value
from realm_tui.core.event import Event, KeyEvent
from realm_tui.core.msg import Msg, OnKey
from realm_tui.core.props import GenericPropsBuilder, PropPayload, Props, TextParts, TextSpan
from realm_tui.rendering import Frame, Rect


class SpanPropsBuilder(GenericPropsBuilder):
    """
    Props builder for Span.

    Usage:
        >>> props = SpanPropsBuilder().with_spans([TextSpan("a"), TextSpan("b")]).build()
    """

    def with_spans(self, spans: Iterable[TextSpan]) -> "SpanPropsBuilder":
        return self.with_texts(TextParts.new(self._texts.title, spans))

    def with_alignment(self, alignment: str) -> "SpanPropsBuilder":
        return self.with_own(PROP_ALIGNMENT, PropPayload.one(text_value(alignment)))


class Span(Component):
    """A single line of styled spans."""

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return
        text = spans_to_text(
            self.props.texts.spans,
            self.props,
            justify=alignment_of(self.props),
            no_wrap=True,
            overflow="ellipsis",
        )
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
