# =============================================================================
# Standard Components
# =============================================================================
# The stock widget set. Every widget implements the Component contract and
# comes with a props builder exposing its specific settings:
#
#   - Input:       single-line text field (text, number, password)
#   - Label:       one line of text
#   - Paragraph:   wrapped spans in a block
#   - Span:        one line of styled spans
#   - Checkbox:    multiple-choice options
#   - Radio:       single-choice options
#   - TableWidget: static table
#   - ScrollTable: table with a movable selection
#   - ProgressBar: progress gauge
#   - Textarea:    scrollable multi-line text
# =============================================================================

from realm_tui.components.checkbox import Checkbox, CheckboxPropsBuilder
from realm_tui.components.input import Input, InputPropsBuilder
from realm_tui.components.label import Label, LabelPropsBuilder
from realm_tui.components.paragraph import Paragraph, ParagraphPropsBuilder
from realm_tui.components.progress_bar import ProgressBar, ProgressBarPropsBuilder
from realm_tui.components.radio import Radio, RadioPropsBuilder
from realm_tui.components.scrolltable import ScrollTable, ScrollTablePropsBuilder
from realm_tui.components.span import Span, SpanPropsBuilder
from realm_tui.components.table import TablePropsBuilder, TableWidget
from realm_tui.components.textarea import Textarea, TextareaPropsBuilder

__all__ = [
    "Checkbox",
    "CheckboxPropsBuilder",
    "Input",
    "InputPropsBuilder",
    "Label",
    "LabelPropsBuilder",
    "Paragraph",
    "ParagraphPropsBuilder",
    "ProgressBar",
    "ProgressBarPropsBuilder",
    "Radio",
    "RadioPropsBuilder",
    "ScrollTable",
    "ScrollTablePropsBuilder",
    "Span",
    "SpanPropsBuilder",
    "TablePropsBuilder",
    "TableWidget",
    "Textarea",
    "TextareaPropsBuilder",
]
