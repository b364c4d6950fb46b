"""Slot indices and the fixed slot-to-field mapping.

The expression has five slots, left to right::

    operand0 operator0 operand1 operator1 operand2

Even slots hold operands, odd slots hold operators.
"""

from enum import Enum

from expression_editor.exceptions import InvalidSlotError

SLOT_COUNT = 5
OPERAND_COUNT = 3
OPERATOR_COUNT = 2


class SlotKind(str, Enum):
    """What a slot holds."""

    OPERAND = "operand"
    OPERATOR = "operator"


def validate_slot(slot: int) -> int:
    """
    Validate that a slot index names one of the editable slots.

    Args:
        slot: The slot index to validate

    Returns:
        The validated slot index

    Raises:
        InvalidSlotError: If slot is not an int in ``range(SLOT_COUNT)``
    """
    # bool is an int subclass but never a meaningful index
    if isinstance(slot, bool) or not isinstance(slot, int):
        raise InvalidSlotError(slot)
    if not 0 <= slot < SLOT_COUNT:
        raise InvalidSlotError(slot)
    return slot


def slot_kind(slot: int) -> SlotKind:
    """Return whether ``slot`` holds an operand or an operator."""
    validate_slot(slot)
    return SlotKind.OPERAND if slot % 2 == 0 else SlotKind.OPERATOR


def field_index(slot: int) -> int:
    """
    Map a slot to its position within the operands or operators list.

    Examples:
        >>> field_index(4)
        2
        >>> field_index(3)
        1
    """
    if slot_kind(slot) is SlotKind.OPERAND:
        return slot // 2
    return (slot - 1) // 2


def slot_for(kind: SlotKind, index: int) -> int:
    """Inverse of :func:`field_index`."""
    if kind is SlotKind.OPERAND:
        return validate_slot(index * 2)
    return validate_slot(index * 2 + 1)
