"""Binary operations and left-to-right chain evaluation."""

import operator
from collections.abc import Callable, Sequence

from expression_editor.exceptions import ExpressionShapeError, UnknownOperatorError

OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def apply_op(a: int, op: str, b: int) -> int:
    """
    Apply a single binary operator.

    Args:
        a: Left operand
        op: One of "+", "-", "*"
        b: Right operand

    Returns:
        ``a + b``, ``a - b`` or ``a * b``

    Raises:
        UnknownOperatorError: If op is not a supported symbol
    """
    try:
        func = OPERATIONS[op]
    except (KeyError, TypeError) as e:
        raise UnknownOperatorError(op) from e
    return func(a, b)


def evaluate_chain(operands: Sequence[int], operators: Sequence[str]) -> int:
    """
    Evaluate ``operands[0] op0 operands[1] op1 ...`` strictly left to right.

    Precedence is ignored: ``2 + 3 * 4`` is ``(2 + 3) * 4 == 20``.

    Raises:
        ExpressionShapeError: If there is not exactly one more operand than operators
        UnknownOperatorError: If an operator is not supported
    """
    if len(operands) != len(operators) + 1:
        raise ExpressionShapeError(len(operands), len(operators))

    result = operands[0]
    for op, operand in zip(operators, operands[1:]):
        result = apply_op(result, op, operand)
    return result
