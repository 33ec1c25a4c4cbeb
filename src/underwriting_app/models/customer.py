"""Customer domain model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class Customer:
    """Policy holder as needed for underwriting."""

    id: int
    name: str
    birth_date: date
