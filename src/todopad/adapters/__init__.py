"""Adapters module - Repository and storage implementations.

This package contains concrete implementations (adapters) for the repository interfaces:
- local_repository: task repository on top of any key-value store
- storage: in-memory key-value store
- sqlite: local SQLite key-value store
"""

from .local_repository import TASKS_KEY, LocalTaskRepository
from .sqlite import SqliteStorage
from .storage import InMemoryStorage

__all__ = [
    "LocalTaskRepository",
    "TASKS_KEY",
    "InMemoryStorage",
    "SqliteStorage",
]
