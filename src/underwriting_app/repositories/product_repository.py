"""Product repository."""

from __future__ import annotations

from underwriting_app.models.product import Product
from underwriting_app.repositories.database import Database


class ProductRepository:
    """Read access to the product catalogue."""

    def __init__(self, database: Database):
        self._db = database

    def exists_product(self, product_id: int) -> bool:
        """Return True when the product exists."""
        return self._db.exists("SELECT 1 FROM products WHERE id = ? LIMIT 1", (product_id,))

    def list_products(self) -> list[Product]:
        """Return all products in display order."""
        rows = self._db.fetchall(
            """
            SELECT id, short_name, sort_order
            FROM products
            ORDER BY sort_order, id
            """
        )
        return [
            Product(id=row["id"], short_name=row["short_name"], sort_order=row["sort_order"])
            for row in rows
        ]
