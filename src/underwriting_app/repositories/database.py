"""Thread-local SQLite connection with caller-owned transactions."""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from underwriting_app.core.config import DatabaseConfig
from underwriting_app.core.errors import DataError

logger = logging.getLogger(__name__)


class Database:
    """Maintain one connection per thread; statements never commit on their own."""

    def __init__(
        self,
        config: DatabaseConfig | None = None,
        connection: sqlite3.Connection | None = None,
    ):
        self._config = config
        self._local = threading.local()
        self._external = connection

    @classmethod
    def from_connection(cls, connection: sqlite3.Connection) -> "Database":
        """Wrap a connection whose lifecycle is owned by the caller."""
        return cls(connection=connection)

    def _open_connection(self) -> sqlite3.Connection:
        if self._config is None:
            logger.error("Connection not set before use.")
            raise DataError("Connection not set")

        if self._config.path != ":memory:":
            Path(self._config.path).parent.mkdir(parents=True, exist_ok=True)

        try:
            connection = sqlite3.connect(self._config.path, check_same_thread=False)
            if self._config.foreign_keys:
                connection.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as error:
            logger.error("Could not open database %s", self._config.path, exc_info=True)
            raise DataError(f"Could not open database {self._config.path}") from error
        return connection

    def get_connection(self) -> sqlite3.Connection:
        """Return current thread's connection, creating it when needed."""
        if self._external is not None:
            return self._external
        connection = getattr(self._local, "connection", None)
        if connection is None:
            connection = self._open_connection()
            self._local.connection = connection
        return connection

    def close_connection(self) -> None:
        """Close current thread's connection. External connections stay open."""
        connection = getattr(self._local, "connection", None)
        if connection is not None:
            connection.close()
            self._local.connection = None

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Commit when the block succeeds, roll back when it raises."""
        connection = self.get_connection()
        try:
            yield connection
        except BaseException:
            connection.rollback()
            raise
        try:
            connection.commit()
        except sqlite3.Error as error:
            logger.error("Commit failed", exc_info=True)
            raise DataError("Commit failed") from error

    def execute(self, query: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        """Execute a statement inside the caller's transaction."""
        connection = self.get_connection()
        try:
            cursor = connection.cursor()
            cursor.row_factory = sqlite3.Row
            cursor.execute(query, params)
        except sqlite3.Error as error:
            logger.error("Database error executing %s", " ".join(query.split()), exc_info=True)
            raise DataError(f"Database error: {error}") from error
        return cursor

    def fetchall(self, query: str, params: tuple[Any, ...] = ()) -> list[sqlite3.Row]:
        """Fetch all rows for a query."""
        cursor = self.execute(query, params)
        try:
            return cursor.fetchall()
        except sqlite3.Error as error:
            logger.error("Database error fetching %s", " ".join(query.split()), exc_info=True)
            raise DataError(f"Database error: {error}") from error

    def fetchone(self, query: str, params: tuple[Any, ...] = ()) -> sqlite3.Row | None:
        """Fetch first row for a query."""
        cursor = self.execute(query, params)
        try:
            return cursor.fetchone()
        except sqlite3.Error as error:
            logger.error("Database error fetching %s", " ".join(query.split()), exc_info=True)
            raise DataError(f"Database error: {error}") from error

    def exists(self, query: str, params: tuple[Any, ...] = ()) -> bool:
        """Return True when the query yields at least one row."""
        return self.fetchone(query, params) is not None
