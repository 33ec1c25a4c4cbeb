"""Coverage type, tariff and coverage models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class CoverageType:
    id: int
    product_id: int
    short_name: str


@dataclass
class CoverageAmountDefinition:
    """One insurable amount tier of a coverage type."""

    id: int
    coverage_type_id: int
    amount: Decimal
    amount_text: str


@dataclass
class CoveragePrice:
    """Price of an amount tier, valid from valid_from to valid_to inclusive."""

    id: int
    amount_definition_id: int
    price: Decimal
    valid_from: date
    valid_to: date


@dataclass
class RejectionRule:
    coverage_type_id: int
    amount_condition: str
    age_condition: str


@dataclass
class CoverageCreate:
    """Input model for adding a coverage to a contract."""

    contract_id: int
    coverage_type_id: int
    amount: Decimal
