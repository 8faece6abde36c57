"""Repository abstraction layer for todopad.

This module defines the abstract base classes (interfaces) for task persistence,
following the hexagonal architecture (Ports & Adapters) pattern.

TaskRepository is consumed by the use-case layer; StorageService is the
key-value port consumed by repository adapters only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from todopad.models import Task


class TaskRepository(ABC):
    """Abstract base class for task persistence operations.

    This interface defines the operations the use-case layer relies on, so
    different storage backends implement a consistent contract.
    """

    @abstractmethod
    async def fetch_all(self) -> list[Task]:
        """Return every stored task in storage order.

        Returns:
            List of Task objects

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            TaskError: LOAD_FAILED on underlying I/O error
        """
        raise NotImplementedError(
            "TaskRepository.fetch_all() must be implemented by adapter"
        )

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Append a new task.

        Args:
            task: Task to store

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            TaskError: SAVE_FAILED on underlying I/O error
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")

    @abstractmethod
    async def update(self, task: Task) -> None:
        """Replace the stored task with the same id.

        Args:
            task: Updated task

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            NotFoundError: If task does not exist
            TaskError: UPDATE_FAILED on underlying I/O error
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Remove the stored task with the same id.

        Args:
            task: Task to remove

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            NotFoundError: If task does not exist
            TaskError: DELETE_FAILED on underlying I/O error
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    async def clear_completed(self) -> None:
        """Remove every completed task.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            TaskError: On underlying I/O error
        """
        raise NotImplementedError(
            "TaskRepository.clear_completed() must be implemented by adapter"
        )

    @abstractmethod
    async def clear_all(self) -> None:
        """Remove every task.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            TaskError: On underlying I/O error
        """
        raise NotImplementedError(
            "TaskRepository.clear_all() must be implemented by adapter"
        )


class StorageService(ABC):
    """Abstract key-value store holding JSON-serializable values."""

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """Store a value under key, replacing any previous value.

        Raises:
            StorageError: If the value cannot be encoded or written
        """
        raise NotImplementedError("StorageService.save() must be implemented by adapter")

    @abstractmethod
    def load(self, key: str) -> Any | None:
        """Return the value stored under key, or None when absent.

        Raises:
            StorageError: If the stored value cannot be read or decoded
        """
        raise NotImplementedError("StorageService.load() must be implemented by adapter")

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""
        raise NotImplementedError(
            "StorageService.delete() must be implemented by adapter"
        )

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Return True when a value is stored under key."""
        raise NotImplementedError(
            "StorageService.exists() must be implemented by adapter"
        )

    def close(self) -> None:
        """Release any resources held by the backend."""
