"""Tests for rejection rule condition parsing."""

import logging

import pytest

from underwriting_app.core.errors import DataError, RuleExpressionError
from underwriting_app.core.rule_parser import (
    UNCONSTRAINED,
    Comparison,
    Operator,
    parse_condition,
)


@pytest.mark.parametrize("token", ["", "   ", "-", " - ", "- -", None])
def test_unconstrained_tokens(token) -> None:
    assert parse_condition(token) == UNCONSTRAINED
    assert parse_condition(token).unconstrained


@pytest.mark.parametrize(
    ("token", "operator", "operand"),
    [
        (">=500", Operator.GE, "500"),
        ("<= 65", Operator.LE, "65"),
        ("!=0", Operator.NE, "0"),
        ("> 17", Operator.GT, "17"),
        ("<18", Operator.LT, "18"),
        ("=1000.50", Operator.EQ, "1000.50"),
        ("  >=  2500  ", Operator.GE, "2500"),
    ],
)
def test_operator_and_operand(token: str, operator: Operator, operand: str) -> None:
    assert parse_condition(token) == Comparison(operator, operand)


def test_bare_number_means_equality() -> None:
    assert parse_condition("5000") == Comparison(Operator.EQ, "5000")


def test_operator_without_operand_is_unconstrained(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="underwriting_app"):
        assert parse_condition(">=") == UNCONSTRAINED
        assert parse_condition("< abc") == UNCONSTRAINED
    assert "no numeric operand" in caplog.text


@pytest.mark.parametrize("token", ["abc", "18-", "=>5", ">=5x", "1 000"])
def test_malformed_token_is_data_error(token: str) -> None:
    with pytest.raises(RuleExpressionError) as excinfo:
        parse_condition(token)
    assert isinstance(excinfo.value, DataError)
    assert repr(token) in str(excinfo.value)
