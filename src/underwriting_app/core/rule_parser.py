"""Parser for the amount and age conditions of rejection rules.

A condition is an optional comparison operator followed by a numeric literal,
for example ``>=500``, ``< 18`` or ``1000``. Empty text and ``-`` mean the
rule does not constrain that side.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass

from underwriting_app.core.errors import RuleExpressionError

logger = logging.getLogger(__name__)


class Operator(enum.Enum):
    UNCONSTRAINED = "-"
    EQ = "="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="


@dataclass(frozen=True)
class Comparison:
    """Parsed condition; operand is None only when unconstrained."""

    operator: Operator
    operand: str | None = None

    @property
    def unconstrained(self) -> bool:
        return self.operator is Operator.UNCONSTRAINED


UNCONSTRAINED = Comparison(Operator.UNCONSTRAINED)

# Two-character operators first so ">=" is not read as ">" followed by "=5".
OPERATOR_PATTERN = re.compile(r"^(>=|<=|!=|>|<|=)\s*(.*)$", re.DOTALL)
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
DIGIT_PATTERN = re.compile(r"\d")

# "- -" is a malformed value found in existing rule tables; read it as "-".
LEGACY_UNCONSTRAINED_TOKENS = frozenset({"-", "- -"})


def parse_condition(token: str | None) -> Comparison:
    """Parse one side of a rejection rule into a Comparison."""
    text = (token or "").strip()
    if not text or text in LEGACY_UNCONSTRAINED_TOKENS:
        return UNCONSTRAINED

    match = OPERATOR_PATTERN.match(text)
    if match is None:
        if NUMBER_PATTERN.match(text):
            return Comparison(Operator.EQ, text)
        raise RuleExpressionError(f"Malformed rule condition: {token!r}")

    operator = Operator(match.group(1))
    rest = match.group(2).strip()
    if NUMBER_PATTERN.match(rest):
        return Comparison(operator, rest)

    if DIGIT_PATTERN.search(rest) is None:
        logger.warning("Rule condition %r has no numeric operand; treating as unconstrained", token)
        return UNCONSTRAINED

    raise RuleExpressionError(f"Malformed rule condition: {token!r}")
