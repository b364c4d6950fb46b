"""
Editor model for a fixed five-slot arithmetic expression.

The expression has the shape ``d op d op d`` where each ``d`` is a single
digit and each ``op`` is one of ``+ - *``. It is evaluated strictly left
to right.

The package provides:
- The editor model (selection, validated writes, evaluation)
- Slot and content validation helpers
- Region geometry and a presenter for graphical front ends
"""

from expression_editor.core import ExpressionEditorModel, ExpressionState
from expression_editor.exceptions import (
    EditorError,
    ExpressionShapeError,
    InvalidSlotError,
    RejectedContentError,
    UnknownOperatorError,
)
from expression_editor.operations import apply_op, evaluate_chain
from expression_editor.presenter import OPERAND_ERROR, OPERATOR_ERROR, EditorPresenter
from expression_editor.regions import Region, build_regions, slot_at, text_points
from expression_editor.slots import SLOT_COUNT, SlotKind, field_index, slot_kind, validate_slot
from expression_editor.validators import (
    OPERAND_DIGITS,
    OPERATOR_SYMBOLS,
    validate_content,
    validate_operand,
    validate_operator,
)

__all__ = [
    "OPERAND_DIGITS",
    "OPERAND_ERROR",
    "OPERATOR_ERROR",
    "OPERATOR_SYMBOLS",
    "SLOT_COUNT",
    "EditorError",
    "EditorPresenter",
    "ExpressionEditorModel",
    "ExpressionShapeError",
    "ExpressionState",
    "InvalidSlotError",
    "Region",
    "RejectedContentError",
    "SlotKind",
    "UnknownOperatorError",
    "apply_op",
    "build_regions",
    "evaluate_chain",
    "field_index",
    "slot_at",
    "slot_kind",
    "text_points",
    "validate_content",
    "validate_operand",
    "validate_operator",
    "validate_slot",
]

__version__ = "0.1.0"
