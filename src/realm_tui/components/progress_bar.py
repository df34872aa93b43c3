# =============================================================================
# Progress Bar Widget
# =============================================================================
# A horizontal bar showing a ratio between 0.0 and 1.0, with an optional
# label drawn under it (the first span of props.texts). Read-only.
# =============================================================================

from rich.progress_bar import ProgressBar as RichProgressBar
from rich.style import Style
from rich.table import Table

from realm_tui.component import Component
from realm_tui.components.utils import get_block, own_value, spans_to_text
from realm_tui.core.event import Event, KeyEvent
from realm_tui.core.msg import Msg, OnKey
from realm_tui.core.props import (
    GenericPropsBuilder,
    PropKind,
    PropPayload,
    Props,
    PropValue,
    TextParts,
    TextSpan,
)
from realm_tui.core.style import RESET
from realm_tui.rendering import Frame, Rect

PROP_PROGRESS = "progress"


class ProgressBarPropsBuilder(GenericPropsBuilder):
    """
    Props builder for ProgressBar.

    Usage:
        >>> props = ProgressBarPropsBuilder().with_progress(0.64).with_label("64%").build()
    """

    def with_progress(self, progress: float) -> "ProgressBarPropsBuilder":
        """Set the ratio. Values outside 0.0..1.0 are clamped when drawn."""
        return self.with_own(PROP_PROGRESS, PropPayload.one(PropValue(PropKind.F64, progress)))

    def with_label(self, label: str) -> "ProgressBarPropsBuilder":
        return self.with_texts(TextParts.new(self._texts.title, [TextSpan(label)]))

    def with_title(self, title: str) -> "ProgressBarPropsBuilder":
        return self.with_texts(TextParts.new(title, self._texts.spans))


def clamp_progress(progress: float) -> float:
    """Clamp a ratio to 0.0..1.0 (NaN counts as 0.0)."""
    if progress != progress:
        return 0.0
    return min(max(progress, 0.0), 1.0)


class ProgressBar(Component):
    """A progress gauge."""

    def __init__(self, props: Props) -> None:
        super().__init__()
        self.props = props

    @property
    def progress(self) -> float:
        return clamp_progress(own_value(self.props, PROP_PROGRESS, 0.0))

    def render(self, frame: Frame, area: Rect) -> None:
        if not self.props.visible or area.is_empty:
            return

        color = self.props.foreground if self.props.foreground != RESET else None
        bar = RichProgressBar(
            total=1.0,
            completed=self.progress,
            complete_style=Style(color=color),
            finished_style=Style(color=color),
        )
        spans = (self.props.texts.spans or ())[:1]
        if not spans:
            frame.render_widget(get_block(bar, self.props, self.focused), area)
            return

        # Bar and label on separate rows
        body = Table.grid(expand=True)
        body.add_column()
        body.add_row(bar)
        body.add_row(spans_to_text(spans, self.props, no_wrap=True))
        frame.render_widget(get_block(body, self.props, self.focused), area)

    def on(self, event: Event) -> Msg | None:
        if isinstance(event, KeyEvent):
            return OnKey(event)
        return None

    def get_props(self) -> Props:
        return self.props

    def update(self, props: Props) -> Msg | None:
        self.props = props
        return None
