"""Expression editor model: slot selection, content validation, evaluation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from expression_editor.exceptions import RejectedContentError
from expression_editor.operations import evaluate_chain
from expression_editor.slots import (
    OPERAND_COUNT,
    OPERATOR_COUNT,
    SlotKind,
    field_index,
    slot_kind,
    validate_slot,
)
from expression_editor.validators import validate_operand, validate_operator

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_OPERAND = 0
DEFAULT_OPERATOR = "+"


@dataclass(frozen=True)
class ExpressionState:
    """Immutable snapshot of the expression and the selected slot."""

    operands: tuple[int, ...]
    operators: tuple[str, ...]
    selected: int

    def slot_text(self, slot: int) -> str:
        """Text shown in ``slot``."""
        index = field_index(slot)
        if slot_kind(slot) is SlotKind.OPERAND:
            return str(self.operands[index])
        return self.operators[index]

    def __str__(self) -> str:
        parts = [str(self.operands[0])]
        for op, operand in zip(self.operators, self.operands[1:]):
            parts.extend((op, str(operand)))
        return " ".join(parts)


class ExpressionEditorModel:
    """
    Owns the five-slot expression and the selected slot.

    Content writes go to whichever slot is selected and are validated
    against that slot's kind. Rejections are reported only by the
    boolean result of :meth:`set_selected_content`; the stored
    expression is left untouched.

    Every mutating call notifies subscribed listeners, whether or not
    anything changed, so a view can redraw its selection highlight.

    Example:
        >>> model = ExpressionEditorModel()
        >>> model.set_selected_content("2")
        True
        >>> model.select_slot(3)
        >>> model.set_selected_content("*")
        True
        >>> model.select_slot(4)
        >>> model.set_selected_content("4")
        True
        >>> model.evaluate()
        8
    """

    def __init__(self) -> None:
        self._operands = [DEFAULT_OPERAND] * OPERAND_COUNT
        self._operators = [DEFAULT_OPERATOR] * OPERATOR_COUNT
        self._selected = 0
        self._listeners: list[Callable[[], None]] = []
        self._last_rejection: RejectedContentError | None = None

    @property
    def selected(self) -> int:
        """Currently selected slot index."""
        return self._selected

    @property
    def last_rejection(self) -> RejectedContentError | None:
        """Why the most recent content write was rejected, or None if it was accepted."""
        return self._last_rejection

    def select_slot(self, slot: int) -> None:
        """
        Select the slot that the next content write targets.

        Raises:
            InvalidSlotError: If slot is not in 0..4; the selection is unchanged
        """
        self._selected = validate_slot(slot)
        logger.debug("Selected slot %d", slot)
        self._notify()

    def set_selected_content(self, content: Any) -> bool:
        """
        Write ``content`` into the selected slot if it is valid there.

        Operand slots take exactly one of "0".."9"; operator slots take
        exactly one of "+", "-", "*".

        Returns:
            True if the content was accepted and stored, False otherwise
        """
        try:
            self._write(self._selected, content)
        except RejectedContentError as e:
            self._last_rejection = e
            logger.debug("Rejected %r for slot %d: %s", content, self._selected, e.reason)
            accepted = False
        else:
            self._last_rejection = None
            accepted = True
        self._notify()
        return accepted

    def _write(self, slot: int, content: Any) -> None:
        index = field_index(slot)
        if slot_kind(slot) is SlotKind.OPERAND:
            self._operands[index] = validate_operand(content)
        else:
            self._operators[index] = validate_operator(content)
        logger.debug("Slot %d set to %r", slot, content)

    def evaluate(self) -> int:
        """Evaluate the expression left to right, ignoring precedence."""
        return evaluate_chain(self._operands, self._operators)

    def get_state(self) -> ExpressionState:
        """Snapshot of the current operands, operators and selection."""
        return ExpressionState(
            operands=tuple(self._operands),
            operators=tuple(self._operators),
            selected=self._selected,
        )

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """
        Call ``listener`` after every mutating call.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Callable[[], None]) -> None:
        """Remove ``listener``; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def __repr__(self) -> str:
        return (
            f"ExpressionEditorModel(expression='{self.get_state()}', "
            f"selected={self._selected})"
        )
