"""Database schema management."""

from __future__ import annotations

from underwriting_app.repositories.database import Database


def initialize_schema(database: Database) -> None:
    """Create required tables and indexes if they do not exist."""
    database.execute(
        """
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY,
            short_name TEXT NOT NULL,
            sort_order INTEGER NOT NULL DEFAULT 0
        )
        """
    )

    database.execute(
        """
        CREATE TABLE IF NOT EXISTS customers (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            birth_date TEXT NOT NULL
        )
        """
    )

    database.execute(
        """
        CREATE TABLE IF NOT EXISTS contracts (
            id INTEGER PRIMARY KEY,
            product_id INTEGER NOT NULL,
            customer_id INTEGER NOT NULL,
            start_date TEXT NOT NULL,
            end_date TEXT NOT NULL,
            FOREIGN KEY (product_id) REFERENCES products(id) ON DELETE RESTRICT,
            FOREIGN KEY (customer_id) REFERENCES customers(id) ON DELETE RESTRICT
        )
        """
    )

    database.execute(
        """
        CREATE TABLE IF NOT EXISTS coverage_types (
            id INTEGER PRIMARY KEY,
            product_id INTEGER NOT NULL,
            short_name TEXT NOT NULL DEFAULT '',
            FOREIGN KEY (product_id) REFERENCES products(id) ON DELETE RESTRICT
        )
        """
    )

    database.execute(
        """
        CREATE TABLE IF NOT EXISTS coverage_amounts (
            id INTEGER PRIMARY KEY,
            coverage_type_id INTEGER NOT NULL,
            amount TEXT NOT NULL,
            FOREIGN KEY (coverage_type_id) REFERENCES coverage_types(id) ON DELETE RESTRICT
        )
        """
    )

    database.execute(
        """
        CREATE TABLE IF NOT EXISTS coverage_prices (
            id INTEGER PRIMARY KEY,
            coverage_amount_id INTEGER NOT NULL,
            valid_from TEXT NOT NULL,
            valid_to TEXT NOT NULL,
            price TEXT NOT NULL,
            FOREIGN KEY (coverage_amount_id) REFERENCES coverage_amounts(id) ON DELETE RESTRICT
        )
        """
    )

    database.execute(
        """
        CREATE TABLE IF NOT EXISTS rejection_rules (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            coverage_type_id INTEGER NOT NULL,
            amount_condition TEXT NOT NULL DEFAULT '-',
            age_condition TEXT NOT NULL DEFAULT '-',
            FOREIGN KEY (coverage_type_id) REFERENCES coverage_types(id) ON DELETE RESTRICT
        )
        """
    )

    # Coverages reference their tier by (coverage_type_id, amount), not by id.
    database.execute(
        """
        CREATE TABLE IF NOT EXISTS coverages (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            contract_id INTEGER NOT NULL,
            coverage_type_id INTEGER NOT NULL,
            amount TEXT NOT NULL,
            FOREIGN KEY (contract_id) REFERENCES contracts(id) ON DELETE RESTRICT,
            FOREIGN KEY (coverage_type_id) REFERENCES coverage_types(id) ON DELETE RESTRICT
        )
        """
    )

    database.execute(
        "CREATE INDEX IF NOT EXISTS idx_coverage_amounts_type_amount "
        "ON coverage_amounts(coverage_type_id, amount)"
    )
    database.execute(
        "CREATE INDEX IF NOT EXISTS idx_coverage_prices_amount ON coverage_prices(coverage_amount_id)"
    )
    database.execute(
        "CREATE INDEX IF NOT EXISTS idx_rejection_rules_type ON rejection_rules(coverage_type_id)"
    )
    database.execute("CREATE INDEX IF NOT EXISTS idx_coverages_contract ON coverages(contract_id)")
