"""Evaluate parsed rule conditions against concrete values."""

from __future__ import annotations

import operator as op
from decimal import Decimal, InvalidOperation
from typing import Callable

from underwriting_app.core.errors import RuleExpressionError
from underwriting_app.core.rule_parser import Comparison, Operator

_COMPARATORS: dict[Operator, Callable[[Decimal, Decimal], bool]] = {
    Operator.EQ: op.eq,
    Operator.NE: op.ne,
    Operator.LT: op.lt,
    Operator.LE: op.le,
    Operator.GT: op.gt,
    Operator.GE: op.ge,
}


def evaluate(value: Decimal | int, comparison: Comparison) -> bool:
    """Return True when value satisfies the comparison."""
    if comparison.unconstrained:
        return True

    comparator = _COMPARATORS.get(comparison.operator)
    if comparator is None:
        raise RuleExpressionError(f"Unsupported rule operator: {comparison.operator!r}")

    try:
        operand = Decimal(str(comparison.operand).strip())
    except InvalidOperation as error:
        raise RuleExpressionError(f"Rule operand is not numeric: {comparison.operand!r}") from error
    if not operand.is_finite():
        raise RuleExpressionError(f"Rule operand is not numeric: {comparison.operand!r}")

    return comparator(Decimal(value), operand)
