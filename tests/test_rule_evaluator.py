"""Tests for rule condition evaluation."""

from decimal import Decimal

import pytest

from underwriting_app.core.errors import RuleExpressionError
from underwriting_app.core.rule_evaluator import evaluate
from underwriting_app.core.rule_parser import UNCONSTRAINED, Comparison, Operator, parse_condition


def test_unconstrained_is_always_true() -> None:
    assert evaluate(Decimal("-1"), UNCONSTRAINED)
    assert evaluate(0, parse_condition("- -"))


@pytest.mark.parametrize(
    ("value", "token", "expected"),
    [
        (Decimal("1000"), ">=500", True),
        (Decimal("500"), ">=500", True),
        (Decimal("499.99"), ">=500", False),
        (17, "<18", True),
        (18, "<18", False),
        (18, "<=18", True),
        (30, ">30", False),
        (31, ">30", True),
        (Decimal("1000.00"), "=1000", True),
        (Decimal("1000.01"), "=1000", False),
        (Decimal("1000"), "!=1000.0", False),
        (Decimal("2000"), "!=1000", True),
    ],
)
def test_comparisons_are_exact(value, token: str, expected: bool) -> None:
    assert evaluate(value, parse_condition(token)) is expected


def test_non_numeric_operand_is_data_error() -> None:
    with pytest.raises(RuleExpressionError):
        evaluate(10, Comparison(Operator.GT, "ten"))
    with pytest.raises(RuleExpressionError):
        evaluate(10, Comparison(Operator.GT, None))


def test_unknown_operator_fails_fast() -> None:
    with pytest.raises(RuleExpressionError):
        evaluate(10, Comparison("~", "10"))
