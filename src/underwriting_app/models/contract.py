"""Contract domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class ContractCreate:
    """Input model for creating a contract."""

    id: int
    product_id: int
    customer_id: int
    start_date: date


@dataclass
class Contract:
    """Stored contract; end_date is always derived from start_date."""

    id: int
    product_id: int
    customer_id: int
    start_date: date
    end_date: date
