"""Contract repository."""

from __future__ import annotations

from datetime import date

from underwriting_app.core.validation import to_date
from underwriting_app.models.contract import Contract
from underwriting_app.repositories.database import Database


class ContractRepository:
    """Handles contract persistence."""

    def __init__(self, database: Database):
        self._db = database

    def exists_contract(self, contract_id: int) -> bool:
        """Return True when the contract exists."""
        return self._db.exists("SELECT 1 FROM contracts WHERE id = ? LIMIT 1", (contract_id,))

    def get_contract(self, contract_id: int) -> Contract | None:
        """Fetch one contract."""
        row = self._db.fetchone(
            """
            SELECT id, product_id, customer_id, start_date, end_date
            FROM contracts
            WHERE id = ?
            """,
            (contract_id,),
        )
        if not row:
            return None
        return Contract(
            id=row["id"],
            product_id=row["product_id"],
            customer_id=row["customer_id"],
            start_date=to_date(row["start_date"]),
            end_date=to_date(row["end_date"]),
        )

    def insert_contract(
        self,
        contract_id: int,
        product_id: int,
        customer_id: int,
        start_date: date,
        end_date: date,
    ) -> int:
        """Insert a contract and return affected row count."""
        cursor = self._db.execute(
            """
            INSERT INTO contracts (id, product_id, customer_id, start_date, end_date)
            VALUES (?, ?, ?, ?, ?)
            """,
            (contract_id, product_id, customer_id, start_date.isoformat(), end_date.isoformat()),
        )
        return cursor.rowcount
