"""Product domain model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """Insurance product offered to customers."""

    id: int
    short_name: str
    sort_order: int
