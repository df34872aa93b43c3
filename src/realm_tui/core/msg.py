# =============================================================================
# Messages
# =============================================================================
# What components report back to the application.
#
# When a component handles an event and something the application cares
# about happens, it returns a Msg:
#
#   - OnChange(payload): the component's value changed
#   - OnSubmit(payload): the user confirmed the value (usually <ENTER>)
#   - OnKey(event):      a key the component doesn't handle itself, passed
#                        on so the application can react (navigation, quit)
#
# Payload and Value mirror PropPayload/PropValue but are a separate family:
# message data and property data evolve independently.
# =============================================================================

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Any

from realm_tui.core.event import KeyEvent


# =============================================================================
# Values
# =============================================================================

class ValueKind(Enum):
    """The closed set of kinds a message Value can hold."""
    BOOL = auto()
    INT = auto()
    FLOAT = auto()
    TEXT = auto()
    LIST = auto()
    MAP = auto()


@dataclass(frozen=True)
class Value:
    """
    A primitive result carried by a message payload.

    Use the constructors:
        >>> Value.text("hi")
        >>> Value.integer(3)
        >>> Value.sequence([Value.integer(0), Value.integer(2)])

    Attributes:
        kind: Which kind of value.
        value: The frozen Python value (tuple for LIST, read-only mapping
               for MAP).
    """
    kind: ValueKind
    value: Any

    @classmethod
    def boolean(cls, value: bool) -> "Value":
        return cls(ValueKind.BOOL, bool(value))

    @classmethod
    def integer(cls, value: int) -> "Value":
        return cls(ValueKind.INT, int(value))

    @classmethod
    def number(cls, value: float) -> "Value":
        return cls(ValueKind.FLOAT, float(value))

    @classmethod
    def text(cls, value: str) -> "Value":
        return cls(ValueKind.TEXT, str(value))

    @classmethod
    def sequence(cls, values: Iterable["Value"]) -> "Value":
        return cls(ValueKind.LIST, tuple(values))

    @classmethod
    def mapping(cls, values: Mapping[str, "Value"]) -> "Value":
        return cls(ValueKind.MAP, MappingProxyType(dict(values)))

    def __hash__(self) -> int:
        if self.kind is ValueKind.MAP:
            return hash((self.kind, frozenset(self.value.items())))
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        if self.kind is ValueKind.MAP:
            return f"Value.{self.kind.name}({dict(self.value)!r})"
        return f"Value.{self.kind.name}({self.value!r})"


# =============================================================================
# Payloads
# =============================================================================

class PayloadShape(Enum):
    """Zero, one or many values."""
    NONE = auto()
    ONE = auto()
    VEC = auto()


@dataclass(frozen=True)
class Payload:
    """
    The values returned alongside a message.

    Example:
        >>> Payload.one(Value.text("hi"))
        >>> Payload.vec([Value.integer(1), Value.integer(3)])
        >>> Payload.none()
    """
    shape: PayloadShape
    data: Any = None

    @classmethod
    def none(cls) -> "Payload":
        return cls(PayloadShape.NONE, None)

    @classmethod
    def one(cls, value: Value) -> "Payload":
        return cls(PayloadShape.ONE, value)

    @classmethod
    def vec(cls, values: Iterable[Value]) -> "Payload":
        return cls(PayloadShape.VEC, tuple(values))

    @property
    def is_none(self) -> bool:
        return self.shape is PayloadShape.NONE

    def __repr__(self) -> str:
        return f"Payload.{self.shape.name}({self.data!r})"


# =============================================================================
# Messages
# =============================================================================

class Msg:
    """Base class of the messages a component can emit."""
    __slots__ = ()


@dataclass(frozen=True)
class OnChange(Msg):
    """The component's value changed."""
    payload: Payload


@dataclass(frozen=True)
class OnSubmit(Msg):
    """The component's value was submitted."""
    payload: Payload


@dataclass(frozen=True)
class OnKey(Msg):
    """A key the component didn't consume."""
    event: KeyEvent


# A message tagged with the id of the component that produced it
TaggedMsg = tuple[str, Msg]
