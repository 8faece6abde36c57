"""Repository interfaces for todopad.

This package contains abstract base classes (ABCs) that define the contracts
for data persistence operations. These are the "Ports" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- todopad.adapters.local_repository (task list kept in a key-value store)
- todopad.adapters.storage / todopad.adapters.sqlite (key-value stores)
"""

from .repository import StorageService, TaskRepository

__all__ = [
    "TaskRepository",
    "StorageService",
]
