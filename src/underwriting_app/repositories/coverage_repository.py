"""Coverage type, tariff, rejection rule and coverage repository."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from underwriting_app.core.validation import to_date, to_decimal
from underwriting_app.models.coverage import (
    CoverageAmountDefinition,
    CoveragePrice,
    CoverageType,
    RejectionRule,
)
from underwriting_app.repositories.database import Database


class CoverageRepository:
    """Handles coverage reference data and coverage persistence."""

    def __init__(self, database: Database):
        self._db = database

    def get_coverage_type(self, coverage_type_id: int) -> CoverageType | None:
        """Fetch one coverage type with its owning product."""
        row = self._db.fetchone(
            """
            SELECT id, product_id, short_name
            FROM coverage_types
            WHERE id = ?
            """,
            (coverage_type_id,),
        )
        if not row:
            return None
        return CoverageType(id=row["id"], product_id=row["product_id"], short_name=row["short_name"])

    def list_amount_definitions(self, coverage_type_id: int) -> list[CoverageAmountDefinition]:
        """Return the insurable amount tiers of a coverage type."""
        rows = self._db.fetchall(
            """
            SELECT id, coverage_type_id, amount
            FROM coverage_amounts
            WHERE coverage_type_id = ?
            ORDER BY id
            """,
            (coverage_type_id,),
        )
        return [
            CoverageAmountDefinition(
                id=row["id"],
                coverage_type_id=row["coverage_type_id"],
                amount=to_decimal(row["amount"]),
                amount_text=str(row["amount"]),
            )
            for row in rows
        ]

    def find_amount_definition(
        self,
        coverage_type_id: int,
        amount: Decimal,
    ) -> CoverageAmountDefinition | None:
        """Return the tier whose amount equals the given value exactly."""
        for definition in self.list_amount_definitions(coverage_type_id):
            if definition.amount == amount:
                return definition
        return None

    def find_valid_price(self, amount_definition_id: int, on_date: date) -> CoveragePrice | None:
        """Return a price of the tier whose validity interval contains on_date."""
        row = self._db.fetchone(
            """
            SELECT id, coverage_amount_id, valid_from, valid_to, price
            FROM coverage_prices
            WHERE coverage_amount_id = ?
              AND valid_from <= ?
              AND valid_to >= ?
            ORDER BY valid_from DESC, id
            LIMIT 1
            """,
            (amount_definition_id, on_date.isoformat(), on_date.isoformat()),
        )
        if not row:
            return None
        return CoveragePrice(
            id=row["id"],
            amount_definition_id=row["coverage_amount_id"],
            price=to_decimal(row["price"]),
            valid_from=to_date(row["valid_from"]),
            valid_to=to_date(row["valid_to"]),
        )

    def price_exists(self, amount_definition_id: int, on_date: date) -> bool:
        """Return True when the tier has a price valid on on_date."""
        return self.find_valid_price(amount_definition_id, on_date) is not None

    def list_rejection_rules(self, coverage_type_id: int) -> list[RejectionRule]:
        """Return all rejection rules of a coverage type."""
        rows = self._db.fetchall(
            """
            SELECT coverage_type_id, amount_condition, age_condition
            FROM rejection_rules
            WHERE coverage_type_id = ?
            ORDER BY id
            """,
            (coverage_type_id,),
        )
        return [
            RejectionRule(
                coverage_type_id=row["coverage_type_id"],
                amount_condition=row["amount_condition"] or "",
                age_condition=row["age_condition"] or "",
            )
            for row in rows
        ]

    def list_coverage_keys(self, contract_id: int) -> list[tuple[int, Decimal]]:
        """Return (coverage_type_id, amount) of every coverage on a contract."""
        rows = self._db.fetchall(
            """
            SELECT coverage_type_id, amount
            FROM coverages
            WHERE contract_id = ?
            ORDER BY id
            """,
            (contract_id,),
        )
        return [(row["coverage_type_id"], to_decimal(row["amount"])) for row in rows]

    def list_coverage_prices(
        self,
        coverage_type_id: int,
        amount: Decimal,
        on_date: date,
    ) -> list[Decimal]:
        """Prices valid on on_date for every tier matching (coverage type, amount)."""
        tier_ids = [
            definition.id
            for definition in self.list_amount_definitions(coverage_type_id)
            if definition.amount == amount
        ]
        if not tier_ids:
            return []

        placeholders = ", ".join("?" for _ in tier_ids)
        rows = self._db.fetchall(
            f"""
            SELECT price
            FROM coverage_prices
            WHERE coverage_amount_id IN ({placeholders})
              AND valid_from <= ?
              AND valid_to >= ?
            ORDER BY id
            """,
            (*tier_ids, on_date.isoformat(), on_date.isoformat()),
        )
        return [to_decimal(row["price"]) for row in rows]

    def insert_coverage(self, contract_id: int, coverage_type_id: int, amount_text: str) -> int:
        """Insert a coverage and return affected row count."""
        cursor = self._db.execute(
            """
            INSERT INTO coverages (contract_id, coverage_type_id, amount)
            VALUES (?, ?, ?)
            """,
            (contract_id, coverage_type_id, amount_text),
        )
        return cursor.rowcount
