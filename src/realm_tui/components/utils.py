# =============================================================================
# Component Utilities
# =============================================================================
# Helpers shared by the standard widgets:
#   - turning Props into Rich styles, texts and bordered blocks
#   - reading typed values out of a Props `own` map
# =============================================================================

from typing import Any

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from realm_tui.core.props import Borders, BorderType, PropKind, Props, PropValue, TextSpan
from realm_tui.core.style import RESET, to_rich_style


# Rich box drawing for each border variant
BORDER_BOXES: dict[BorderType, box.Box] = {
    BorderType.PLAIN: box.SQUARE,
    BorderType.ROUNDED: box.ROUNDED,
    BorderType.DOUBLE: box.DOUBLE,
    BorderType.THICK: box.HEAVY,
}


# =============================================================================
# Styles and text
# =============================================================================

def props_style(props: Props) -> Style:
    """The base style of a component: its colors and modifiers."""
    return to_rich_style(props.foreground, props.background, props.modifiers)


def span_style(span: TextSpan, props: Props) -> Style:
    """
    The style of a span.

    Span colors left at RESET inherit the component's colors.
    """
    foreground = span.foreground if span.foreground != RESET else props.foreground
    background = span.background if span.background != RESET else props.background
    return to_rich_style(foreground, background, span.modifiers | props.modifiers)


def spans_to_text(spans: tuple[TextSpan, ...] | None, props: Props, **kwargs: Any) -> Text:
    """
    Join spans into a single Rich Text.

    Args:
        spans: The spans (None means no text).
        props: Component props, for inherited colors.
        **kwargs: Passed to Text (e.g. no_wrap=True, overflow="ellipsis").
    """
    text = Text(**kwargs)
    for span in spans or ():
        text.append(span.content, style=span_style(span, props))
    return text


# =============================================================================
# Blocks
# =============================================================================

def get_block(
    renderable: RenderableType,
    props: Props,
    focused: bool,
    title: str | None = None,
) -> RenderableType:
    """
    Wrap a renderable in the component's border.

    Focused components draw their border in the border color; unfocused
    ones use the terminal default. With no borders the renderable is
    returned as is. Rich panels can't leave out single sides, so any
    partial side set is drawn as top and bottom lines only.

    Args:
        renderable: The component body.
        props: Component props (borders, background).
        focused: Whether the component has focus.
        title: Title drawn on the top border. Defaults to props.texts.title.
    """
    borders = props.borders
    if borders.borders == Borders.NONE:
        return renderable

    if title is None:
        title = props.texts.title

    panel_box = BORDER_BOXES[borders.variant]
    if borders.borders != Borders.ALL:
        panel_box = box.HORIZONTALS

    border_style = Style(color=borders.color) if focused else Style()
    return Panel(
        renderable,
        title=Text(title) if title else None,
        title_align="left",
        box=panel_box,
        border_style=border_style,
        style=Style(bgcolor=props.background),
        padding=0,
        expand=True,
    )


# =============================================================================
# Own properties
# =============================================================================

def own_value(props: Props, key: str, default: Any = None) -> Any:
    """
    Read the raw value of a single-value own property.

    Returns `default` if the key is missing or isn't a ONE payload.
    """
    payload = props.get_own(key)
    if payload is None:
        return default
    try:
        return payload.unwrap_one()
    except ValueError:
        return default


def own_values(props: Props, key: str) -> list[Any]:
    """
    Read the raw values of a list own property.

    Returns an empty list if the key is missing or isn't a list payload.
    """
    payload = props.get_own(key)
    if payload is None:
        return []
    try:
        return payload.unwrap_vec()
    except ValueError:
        return []


def usize(value: int) -> PropValue:
    """Shorthand for a USIZE PropValue."""
    return PropValue(PropKind.USIZE, value)


def text_value(value: str) -> PropValue:
    """Shorthand for a STR PropValue."""
    return PropValue(PropKind.STR, value)
