# =============================================================================
# Style Primitives
# =============================================================================
# Colors and text modifiers shared by the property model and the widgets.
#
# Colors are Rich colors and are treated as opaque values: the core never
# interprets them, it only hands them over to the rendering backend.
# The "reset" color is Rich's default color, meaning "whatever the terminal
# uses", which is the neutral value every property starts from.
# =============================================================================

from enum import IntFlag

from rich.color import Color
from rich.style import Style


# Neutral color sentinel: let the terminal decide
RESET = Color.default()


class Modifier(IntFlag):
    """
    Text style modifiers, stored as a bitmask.

    Usage:
        # Combine modifiers
        mods = Modifier.BOLD | Modifier.ITALIC

        # Check a modifier
        if mods & Modifier.BOLD:
            print("bold text")
    """
    NONE = 0
    BOLD = 1 << 0
    DIM = 1 << 1
    ITALIC = 1 << 2
    UNDERLINED = 1 << 3
    SLOW_BLINK = 1 << 4
    RAPID_BLINK = 1 << 5
    REVERSED = 1 << 6
    HIDDEN = 1 << 7
    CROSSED_OUT = 1 << 8


def parse_color(name: str) -> Color:
    """
    Parse a color name, hex code or "reset".

    Args:
        name: Anything Rich understands ("cyan", "#ff8800", "color(4)").

    Returns:
        The parsed Color. "reset" maps to the RESET sentinel.
    """
    if name.lower() == "reset":
        return RESET
    return Color.parse(name)


def to_rich_style(
    foreground: Color = RESET,
    background: Color = RESET,
    modifiers: Modifier = Modifier.NONE,
) -> Style:
    """
    Convert colors and modifiers into a Rich Style.

    Args:
        foreground: Text color.
        background: Background color.
        modifiers: Modifier bitmask.

    Returns:
        A Rich Style carrying the same information.
    """
    return Style(
        color=foreground,
        bgcolor=background,
        bold=bool(modifiers & Modifier.BOLD) or None,
        dim=bool(modifiers & Modifier.DIM) or None,
        italic=bool(modifiers & Modifier.ITALIC) or None,
        underline=bool(modifiers & Modifier.UNDERLINED) or None,
        blink=bool(modifiers & Modifier.SLOW_BLINK) or None,
        blink2=bool(modifiers & Modifier.RAPID_BLINK) or None,
        reverse=bool(modifiers & Modifier.REVERSED) or None,
        conceal=bool(modifiers & Modifier.HIDDEN) or None,
        strike=bool(modifiers & Modifier.CROSSED_OUT) or None,
    )
