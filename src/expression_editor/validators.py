"""Content validation for operand and operator slots."""

from typing import Any

from expression_editor.exceptions import RejectedContentError
from expression_editor.slots import SlotKind, slot_kind

# Accepted vocabularies, matched as exact strings
OPERAND_DIGITS = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
OPERATOR_SYMBOLS = ("+", "-", "*")


def validate_operand(content: Any) -> int:
    """
    Validate operand content and parse it.

    Only the ten single-digit strings are accepted. Anything ``int()``
    would tolerate beyond that (signs, padding, ``"07"``, non-ASCII
    digits) is rejected.

    Args:
        content: Candidate text for an operand slot

    Returns:
        The digit as an int

    Raises:
        RejectedContentError: If content is not exactly one of "0".."9"
    """
    if not isinstance(content, str):
        raise RejectedContentError(content, SlotKind.OPERAND, "Operand must be a string")
    if content not in OPERAND_DIGITS:
        raise RejectedContentError(content, SlotKind.OPERAND, "Operand must be a single digit")
    return int(content)


def validate_operator(content: Any) -> str:
    """
    Validate operator content.

    Args:
        content: Candidate text for an operator slot

    Returns:
        The validated symbol

    Raises:
        RejectedContentError: If content is not exactly one of "+", "-", "*"
    """
    if not isinstance(content, str):
        raise RejectedContentError(content, SlotKind.OPERATOR, "Operator must be a string")
    if content not in OPERATOR_SYMBOLS:
        raise RejectedContentError(
            content, SlotKind.OPERATOR, f"Operator must be one of {' '.join(OPERATOR_SYMBOLS)}"
        )
    return content


def validate_content(slot: int, content: Any) -> int | str:
    """Validate ``content`` against the vocabulary of ``slot``'s kind."""
    if slot_kind(slot) is SlotKind.OPERAND:
        return validate_operand(content)
    return validate_operator(content)
