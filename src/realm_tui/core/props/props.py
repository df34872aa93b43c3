# =============================================================================
# Props
# =============================================================================
# The configuration snapshot attached to every component.
#
# Props are immutable: once built, a component's configuration is never
# edited in place from outside. To change it, seed a builder from the
# current props, override what you need and pass the new value to
# View.update().
# =============================================================================

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from rich.color import Color

from realm_tui.core.props.borders import BordersProps
from realm_tui.core.props.payload import PropPayload
from realm_tui.core.props.texts import TextParts
from realm_tui.core.style import RESET, Modifier


def _empty_map() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class Props:
    """
    All the properties of a component.

    Attributes:
        visible: Whether the component is drawn at all.
        foreground: Main text color.
        background: Main background color.
        borders: Border sides, style and color.
        modifiers: Text modifiers applied to the whole component.
        palette: Extra named colors (e.g. "highlight"), read-only.
        texts: Title, spans and table making up the component's text.
        own: Widget-specific properties, read-only.

    Example:
        >>> props = GenericPropsBuilder().with_foreground(cyan).bold().build()
        >>> props.visible
        True
    """
    visible: bool = True
    foreground: Color = RESET
    background: Color = RESET
    borders: BordersProps = field(default_factory=BordersProps)
    modifiers: Modifier = Modifier.NONE
    palette: Mapping[str, Color] = field(default_factory=_empty_map)
    texts: TextParts = field(default_factory=TextParts)
    own: Mapping[str, PropPayload] = field(default_factory=_empty_map)

    def get_own(self, key: str) -> PropPayload | None:
        """Return a widget-specific property, or None if unset."""
        return self.own.get(key)

    def get_color(self, key: str, default: Color = RESET) -> Color:
        """Return a palette color, falling back to `default`."""
        return self.palette.get(key, default)

    def __hash__(self) -> int:
        # The read-only maps hash by their items
        return hash((
            self.visible,
            self.foreground,
            self.background,
            self.borders,
            self.modifiers,
            frozenset(self.palette.items()),
            self.texts,
            frozenset(self.own.items()),
        ))
