"""Custom exceptions for the expression editor."""

from typing import Any


class EditorError(Exception):
    """Base exception for all expression editor errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class RejectedContentError(EditorError):
    """Raised when content is outside the vocabulary of the target slot."""

    def __init__(self, content: Any, kind: str, reason: str = "rejected content") -> None:
        super().__init__(reason, content)
        self.content = content
        self.kind = kind
        self.reason = reason


class InvalidSlotError(EditorError):
    """Raised when a slot index does not name one of the editable slots."""

    def __init__(self, slot: Any) -> None:
        super().__init__("Slot index out of range", slot)
        self.slot = slot


class UnknownOperatorError(EditorError):
    """Raised when an operator symbol has no arithmetic meaning."""

    def __init__(self, symbol: Any) -> None:
        super().__init__("Unknown operator", symbol)
        self.symbol = symbol


class ExpressionShapeError(EditorError):
    """Raised when a chain does not have exactly one more operand than operators."""

    def __init__(self, n_operands: int, n_operators: int) -> None:
        super().__init__(
            f"Expected {n_operators + 1} operands for {n_operators} operators",
            n_operands,
        )
        self.n_operands = n_operands
        self.n_operators = n_operators
