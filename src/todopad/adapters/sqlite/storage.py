"""SQLite key-value storage for the local task vault.

Each key maps to one JSON document in a single table. The connection is opened
lazily, uses WAL mode, and new database files are created owner-only.
"""

from __future__ import annotations

import json
import os
import sqlite3
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from platformdirs import user_data_dir

from todopad.models import StorageError
from todopad.repositories import StorageService
from todopad.utils.logger import get_logger

logger = get_logger(__name__)

CREATE_KV_TABLE = """
    CREATE TABLE IF NOT EXISTS kv_store (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
"""


def default_db_path() -> Path:
    """Default database location in the user data directory."""
    return Path(user_data_dir("todopad")) / "todopad.db"


class SqliteStorage(StorageService):
    """SQLite implementation of the key-value storage port."""

    def __init__(self, db_path: str | Path | None = None):
        """Initialize SQLite storage.

        Args:
            db_path: Database file path, ":memory:" for a private in-memory
                database, or None for the default location.
        """
        if db_path is None:
            db_path = default_db_path()
        self.db_path = str(db_path)
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = self._connect()
        return self._connection

    def _connect(self) -> sqlite3.Connection:
        is_memory = self.db_path == ":memory:"
        is_new_database = False
        if not is_memory:
            path = Path(self.db_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            is_new_database = not path.exists()

        try:
            connection = sqlite3.connect(self.db_path, timeout=30.0)
            if not is_memory:
                connection.execute("PRAGMA journal_mode = WAL")
            connection.execute(CREATE_KV_TABLE)
            connection.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to open database {self.db_path}: {e}") from e

        if is_new_database:
            os.chmod(self.db_path, 0o600)
            logger.info("created task database at %s", self.db_path)
        return connection

    def save(self, key: str, value: Any) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Failed to encode value for '{key}': {e}") from e

        try:
            with self.connection:
                self.connection.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, payload, datetime.now(UTC).isoformat()),
                )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to save '{key}': {e}") from e

    def load(self, key: str) -> Any | None:
        try:
            row = self.connection.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to load '{key}': {e}") from e

        if row is None:
            return None
        try:
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            raise StorageError(f"Failed to decode value for '{key}': {e}") from e

    def delete(self, key: str) -> None:
        try:
            with self.connection:
                self.connection.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        except sqlite3.Error as e:
            raise StorageError(f"Failed to delete '{key}': {e}") from e

    def exists(self, key: str) -> bool:
        try:
            row = self.connection.execute(
                "SELECT 1 FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to query '{key}': {e}") from e
        return row is not None

    def close(self) -> None:
        """Close the connection if open."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
