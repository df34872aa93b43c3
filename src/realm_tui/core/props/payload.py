# =============================================================================
# Property Payloads
# =============================================================================
# Typed values for widget-specific properties.
#
# Every component can carry extra configuration in the `own` map of its
# Props (e.g. the maximum length of a text input, the options of a radio
# group). Instead of storing arbitrary objects there, values are wrapped in
# two closed tagged unions:
#
#   - PropValue:   a single primitive (bool, sized integer, float, string,
#                  color, input type)
#   - PropPayload: the "shape" holding those primitives (one value, a 2-4
#                  tuple, a list, a map, a nested list of payloads, nothing)
#
# Both are frozen and compare structurally: the kind is part of the value,
# so a U8 holding 1 is not equal to a U16 holding 1.
# =============================================================================

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Any

from rich.color import Color


class InputType(Enum):
    """What kind of text an input field accepts."""
    TEXT = auto()
    NUMBER = auto()
    PASSWORD = auto()


class PropKind(Enum):
    """The closed set of primitive kinds a PropValue can hold."""
    BOOL = auto()
    U8 = auto()
    U16 = auto()
    U32 = auto()
    U64 = auto()
    U128 = auto()
    USIZE = auto()
    I8 = auto()
    I16 = auto()
    I32 = auto()
    I64 = auto()
    I128 = auto()
    ISIZE = auto()
    F32 = auto()
    F64 = auto()
    STR = auto()
    COLOR = auto()
    INPUT_TYPE = auto()


# Inclusive integer ranges per kind (usize/isize are 64 bit wide)
_INT_RANGES: dict[PropKind, tuple[int, int]] = {
    PropKind.U8: (0, 2**8 - 1),
    PropKind.U16: (0, 2**16 - 1),
    PropKind.U32: (0, 2**32 - 1),
    PropKind.U64: (0, 2**64 - 1),
    PropKind.U128: (0, 2**128 - 1),
    PropKind.USIZE: (0, 2**64 - 1),
    PropKind.I8: (-(2**7), 2**7 - 1),
    PropKind.I16: (-(2**15), 2**15 - 1),
    PropKind.I32: (-(2**31), 2**31 - 1),
    PropKind.I64: (-(2**63), 2**63 - 1),
    PropKind.I128: (-(2**127), 2**127 - 1),
    PropKind.ISIZE: (-(2**63), 2**63 - 1),
}


@dataclass(frozen=True)
class PropValue:
    """
    A single typed primitive stored in a property payload.

    Attributes:
        kind: Which primitive this is.
        value: The Python value. Checked against the kind on construction.
            Float equality is not total: F32/F64 values holding NaN
            compare unequal (NaN != NaN).

    Example:
        >>> PropValue(PropKind.USIZE, 128)
        >>> PropValue(PropKind.STR, "omar")
        >>> PropValue(PropKind.COLOR, Color.parse("red"))

    Raises:
        TypeError: If the value's type doesn't match the kind.
        ValueError: If an integer doesn't fit the kind's width.
    """
    kind: PropKind
    value: Any

    def __post_init__(self) -> None:
        kind, value = self.kind, self.value

        if kind is PropKind.BOOL:
            if not isinstance(value, bool):
                raise TypeError(f"{kind.name} expects bool, got {type(value).__name__}")
        elif kind in _INT_RANGES:
            # bool is an int subclass, but True is not a number here
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{kind.name} expects int, got {type(value).__name__}")
            low, high = _INT_RANGES[kind]
            if not low <= value <= high:
                raise ValueError(f"{value} does not fit in {kind.name}")
        elif kind in (PropKind.F32, PropKind.F64):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{kind.name} expects float, got {type(value).__name__}")
            object.__setattr__(self, "value", float(value))
        elif kind is PropKind.STR:
            if not isinstance(value, str):
                raise TypeError(f"STR expects str, got {type(value).__name__}")
        elif kind is PropKind.COLOR:
            if not isinstance(value, Color):
                raise TypeError(f"COLOR expects rich Color, got {type(value).__name__}")
        elif kind is PropKind.INPUT_TYPE:
            if not isinstance(value, InputType):
                raise TypeError(f"INPUT_TYPE expects InputType, got {type(value).__name__}")

    def __repr__(self) -> str:
        return f"PropValue.{self.kind.name}({self.value!r})"


class PropShape(Enum):
    """The closed set of shapes a PropPayload can take."""
    ONE = auto()
    TUP2 = auto()
    TUP3 = auto()
    TUP4 = auto()
    VEC = auto()
    MAP = auto()
    LINKED = auto()
    NONE = auto()


@dataclass(frozen=True)
class PropPayload:
    """
    A container of PropValues with a fixed shape.

    Don't build these directly; use the constructors, which freeze the
    contents (lists become tuples, maps become read-only views):

        >>> PropPayload.one(PropValue(PropKind.USIZE, 2))
        >>> PropPayload.tup2(PropValue(PropKind.BOOL, True), PropValue(PropKind.U8, 4))
        >>> PropPayload.vec([PropValue(PropKind.STR, "a"), PropValue(PropKind.STR, "b")])
        >>> PropPayload.mapping({"a": PropValue(PropKind.I8, 4)})
        >>> PropPayload.linked([PropPayload.one(...), PropPayload.none()])
        >>> PropPayload.none()

    Attributes:
        shape: Which shape this payload has.
        data: The frozen contents:
              ONE -> PropValue, TUP*/VEC -> tuple[PropValue, ...],
              MAP -> read-only mapping str -> PropValue,
              LINKED -> tuple[PropPayload, ...], NONE -> None.
    """
    shape: PropShape
    data: Any = None

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def one(cls, value: PropValue) -> "PropPayload":
        return cls(PropShape.ONE, _check_value(value))

    @classmethod
    def tup2(cls, a: PropValue, b: PropValue) -> "PropPayload":
        return cls(PropShape.TUP2, tuple(_check_value(v) for v in (a, b)))

    @classmethod
    def tup3(cls, a: PropValue, b: PropValue, c: PropValue) -> "PropPayload":
        return cls(PropShape.TUP3, tuple(_check_value(v) for v in (a, b, c)))

    @classmethod
    def tup4(cls, a: PropValue, b: PropValue, c: PropValue, d: PropValue) -> "PropPayload":
        return cls(PropShape.TUP4, tuple(_check_value(v) for v in (a, b, c, d)))

    @classmethod
    def vec(cls, values: Iterable[PropValue]) -> "PropPayload":
        return cls(PropShape.VEC, tuple(_check_value(v) for v in values))

    @classmethod
    def mapping(cls, values: Mapping[str, PropValue]) -> "PropPayload":
        frozen = {str(k): _check_value(v) for k, v in values.items()}
        return cls(PropShape.MAP, MappingProxyType(frozen))

    @classmethod
    def linked(cls, payloads: Iterable["PropPayload"]) -> "PropPayload":
        items = tuple(payloads)
        for item in items:
            if not isinstance(item, PropPayload):
                raise TypeError(f"LINKED holds PropPayload, got {type(item).__name__}")
        return cls(PropShape.LINKED, items)

    @classmethod
    def none(cls) -> "PropPayload":
        return cls(PropShape.NONE, None)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def is_none(self) -> bool:
        return self.shape is PropShape.NONE

    def unwrap_one(self) -> Any:
        """
        Return the raw Python value of a ONE payload.

        Raises:
            ValueError: If the payload has another shape.
        """
        if self.shape is not PropShape.ONE:
            raise ValueError(f"Expected a ONE payload, got {self.shape.name}")
        return self.data.value

    def unwrap_vec(self) -> list[Any]:
        """
        Return the raw Python values of a VEC (or TUP*) payload.

        Raises:
            ValueError: If the payload isn't a sequence of values.
        """
        if self.shape not in (PropShape.VEC, PropShape.TUP2, PropShape.TUP3, PropShape.TUP4):
            raise ValueError(f"Expected a VEC payload, got {self.shape.name}")
        return [v.value for v in self.data]

    def __hash__(self) -> int:
        if self.shape is PropShape.MAP:
            return hash((self.shape, frozenset(self.data.items())))
        return hash((self.shape, self.data))

    def __repr__(self) -> str:
        if self.shape is PropShape.MAP:
            return f"PropPayload.MAP({dict(self.data)!r})"
        return f"PropPayload.{self.shape.name}({self.data!r})"


def _check_value(value: Any) -> PropValue:
    if not isinstance(value, PropValue):
        raise TypeError(f"Expected PropValue, got {type(value).__name__}")
    return value
