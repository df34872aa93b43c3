# =============================================================================
# Border Properties
# =============================================================================
# Which sides of a component get a border, how the border is drawn, and in
# which color.
# =============================================================================

from dataclasses import dataclass
from enum import Enum, IntFlag, auto

from rich.color import Color

from realm_tui.core.style import RESET


class Borders(IntFlag):
    """Sides of a component's block that carry a border."""
    NONE = 0
    TOP = 1 << 0
    RIGHT = 1 << 1
    BOTTOM = 1 << 2
    LEFT = 1 << 3
    ALL = TOP | RIGHT | BOTTOM | LEFT


class BorderType(Enum):
    """Line style of the border."""
    PLAIN = auto()      # ┌─┐
    ROUNDED = auto()    # ╭─╮
    DOUBLE = auto()     # ╔═╗
    THICK = auto()      # ┏━┓


@dataclass(frozen=True)
class BordersProps:
    """
    Border configuration of a component.

    Attributes:
        borders: Sides to draw.
        variant: Line style.
        color: Border color.
    """
    borders: Borders = Borders.ALL
    variant: BorderType = BorderType.PLAIN
    color: Color = RESET
