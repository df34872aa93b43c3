# =============================================================================
# Property Model
# =============================================================================
# Everything that describes how a component looks and behaves:
#   - Props: the immutable configuration snapshot
#   - PropPayload / PropValue: typed widget-specific values
#   - Borders, TextParts, TextSpan, Table: the structured parts of Props
#   - Builders: the only way to produce Props
# =============================================================================

from realm_tui.core.props.borders import Borders, BordersProps, BorderType
from realm_tui.core.props.builder import GenericPropsBuilder, PropsBuilder
from realm_tui.core.props.payload import (
    InputType,
    PropKind,
    PropPayload,
    PropShape,
    PropValue,
)
from realm_tui.core.props.props import Props
from realm_tui.core.props.texts import (
    Table,
    TableBuilder,
    TextParts,
    TextSpan,
    TextSpanBuilder,
)

__all__ = [
    "Borders",
    "BordersProps",
    "BorderType",
    "GenericPropsBuilder",
    "PropsBuilder",
    "InputType",
    "PropKind",
    "PropPayload",
    "PropShape",
    "PropValue",
    "Props",
    "Table",
    "TableBuilder",
    "TextParts",
    "TextSpan",
    "TextSpanBuilder",
]
