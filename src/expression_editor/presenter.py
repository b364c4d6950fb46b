"""Turns user actions into model calls and tracks the error message."""

from __future__ import annotations

from collections.abc import Sequence

from expression_editor.core import ExpressionEditorModel
from expression_editor.regions import Region, build_regions, slot_at
from expression_editor.slots import SLOT_COUNT

OPERAND_ERROR = "Failed to set operand."
OPERATOR_ERROR = "Failed to set operator."


class EditorPresenter:
    """Toolkit-independent glue between a view and the model."""

    def __init__(
        self,
        model: ExpressionEditorModel,
        regions: Sequence[Region] | None = None,
    ) -> None:
        self.model = model
        self.regions = tuple(regions) if regions is not None else build_regions()
        self.error_message = ""

    def click(self, x: float, y: float) -> int | None:
        """Select the slot under (x, y), if any, and return it."""
        slot = slot_at(x, y, self.regions)
        if slot is not None:
            self.model.select_slot(slot)
        return slot

    def submit_operand(self, text: str) -> bool:
        return self._submit(text, OPERAND_ERROR)

    def submit_operator(self, symbol: str) -> bool:
        return self._submit(symbol, OPERATOR_ERROR)

    def _submit(self, content: str, failure_message: str) -> bool:
        accepted = self.model.set_selected_content(content)
        self.error_message = "" if accepted else failure_message
        return accepted

    def display_texts(self) -> list[str]:
        """Strings for the five slots, the equals sign and the result."""
        state = self.model.get_state()
        texts = [state.slot_text(slot) for slot in range(SLOT_COUNT)]
        texts.extend(("=", str(self.model.evaluate())))
        return texts

    def highlighted_region(self) -> Region:
        return self.regions[self.model.selected]
