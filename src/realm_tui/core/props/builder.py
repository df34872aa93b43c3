# =============================================================================
# Props Builders
# =============================================================================
# Props are immutable, so they are produced by builders:
#
#   props = (
#       GenericPropsBuilder()
#       .with_foreground(Color.parse("cyan"))
#       .with_borders(Borders.ALL, BorderType.ROUNDED, Color.parse("yellow"))
#       .bold()
#       .build()
#   )
#
# Every setter returns the builder so calls can be chained, and none of them
# can fail: each field has a usable default. To change an existing
# configuration, seed a builder with `from_props()` and override only what
# you need. `from_props(p).build() == p` always holds.
#
# Widgets subclass GenericPropsBuilder to add their own setters (which store
# values in `own` or `texts`).
# =============================================================================

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Self

from rich.color import Color

from realm_tui.core.props.borders import Borders, BordersProps, BorderType
from realm_tui.core.props.payload import PropPayload
from realm_tui.core.props.props import Props
from realm_tui.core.props.texts import TextParts
from realm_tui.core.style import Modifier


class PropsBuilder(ABC):
    """The minimal interface every props builder offers."""

    @abstractmethod
    def build(self) -> Props:
        """Produce the Props. Never fails."""

    @abstractmethod
    def hidden(self) -> Self:
        """Make the component invisible."""

    @abstractmethod
    def visible(self) -> Self:
        """Make the component visible."""


class GenericPropsBuilder(PropsBuilder):
    """
    A builder exposing every field of Props.

    Usage:
        >>> props = GenericPropsBuilder().hidden().build()
        >>> updated = GenericPropsBuilder.from_props(props).visible().build()
    """

    def __init__(self, props: Props | None = None) -> None:
        """
        Initialize the builder.

        Args:
            props: Props to start from. Defaults to Props().
        """
        props = props if props is not None else Props()
        self._visible = props.visible
        self._foreground = props.foreground
        self._background = props.background
        self._borders = props.borders
        self._modifiers = props.modifiers
        self._palette: dict[str, Color] = dict(props.palette)
        self._texts = props.texts
        self._own: dict[str, PropPayload] = dict(props.own)

    @classmethod
    def from_props(cls, props: Props) -> Self:
        """Create a builder seeded with an existing configuration."""
        return cls(props)

    def build(self) -> Props:
        # Copy the maps so later builder calls don't leak into built props
        return Props(
            visible=self._visible,
            foreground=self._foreground,
            background=self._background,
            borders=self._borders,
            modifiers=self._modifiers,
            palette=MappingProxyType(dict(self._palette)),
            texts=self._texts,
            own=MappingProxyType(dict(self._own)),
        )

    # -------------------------------------------------------------------------
    # Visibility
    # -------------------------------------------------------------------------

    def hidden(self) -> Self:
        self._visible = False
        return self

    def visible(self) -> Self:
        self._visible = True
        return self

    # -------------------------------------------------------------------------
    # Colors and borders
    # -------------------------------------------------------------------------

    def with_foreground(self, color: Color) -> Self:
        self._foreground = color
        return self

    def with_background(self, color: Color) -> Self:
        self._background = color
        return self

    def with_borders(self, borders: Borders, variant: BorderType, color: Color) -> Self:
        self._borders = BordersProps(borders=borders, variant=variant, color=color)
        return self

    def with_palette(self, key: str, color: Color) -> Self:
        """Register an extra named color."""
        self._palette[key] = color
        return self

    # -------------------------------------------------------------------------
    # Modifiers
    # -------------------------------------------------------------------------

    def with_modifiers(self, modifiers: Modifier) -> Self:
        """Replace the whole modifier set."""
        self._modifiers = modifiers
        return self

    def bold(self) -> Self:
        self._modifiers |= Modifier.BOLD
        return self

    def italic(self) -> Self:
        self._modifiers |= Modifier.ITALIC
        return self

    def underlined(self) -> Self:
        self._modifiers |= Modifier.UNDERLINED
        return self

    def slow_blink(self) -> Self:
        self._modifiers |= Modifier.SLOW_BLINK
        return self

    def rapid_blink(self) -> Self:
        self._modifiers |= Modifier.RAPID_BLINK
        return self

    def reversed(self) -> Self:
        self._modifiers |= Modifier.REVERSED
        return self

    def strikethrough(self) -> Self:
        self._modifiers |= Modifier.CROSSED_OUT
        return self

    # -------------------------------------------------------------------------
    # Texts and widget-specific values
    # -------------------------------------------------------------------------

    def with_texts(self, texts: TextParts) -> Self:
        self._texts = texts
        return self

    def with_own(self, key: str, payload: PropPayload) -> Self:
        """Set a widget-specific property."""
        self._own[key] = payload
        return self
