"""Customer repository."""

from __future__ import annotations

from underwriting_app.core.validation import to_date
from underwriting_app.models.customer import Customer
from underwriting_app.repositories.database import Database


class CustomerRepository:
    """Read access to customers."""

    def __init__(self, database: Database):
        self._db = database

    def exists_customer(self, customer_id: int) -> bool:
        """Return True when the customer exists."""
        return self._db.exists("SELECT 1 FROM customers WHERE id = ? LIMIT 1", (customer_id,))

    def get_customer(self, customer_id: int) -> Customer | None:
        """Fetch a single customer."""
        row = self._db.fetchone(
            """
            SELECT id, name, birth_date
            FROM customers
            WHERE id = ?
            """,
            (customer_id,),
        )
        if not row:
            return None
        return Customer(
            id=row["id"],
            name=row["name"],
            birth_date=to_date(row["birth_date"]),
        )
