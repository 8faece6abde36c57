"""SQLite adapter module - Local database storage implementation."""

from todopad.adapters.sqlite.storage import SqliteStorage, default_db_path

__all__ = ["SqliteStorage", "default_db_path"]
