"""Task repository backed by a key-value store.

The whole collection lives under one key as an ordered list of task records.
Every operation loads the list, changes it and writes it back; one
asyncio.Lock serializes those cycles so concurrent calls cannot lose updates.
"""

from __future__ import annotations

import asyncio

from pydantic import TypeAdapter, ValidationError

from todopad.models import (
    NotFoundError,
    StorageError,
    Task,
    TaskError,
    TaskErrorKind,
)
from todopad.repositories import StorageService, TaskRepository
from todopad.utils.logger import get_logger

TASKS_KEY = "saved_tasks"

logger = get_logger(__name__)

_task_list_adapter = TypeAdapter(list[Task])


class LocalTaskRepository(TaskRepository):
    """TaskRepository implementation on top of a StorageService."""

    def __init__(self, storage: StorageService, key: str = TASKS_KEY):
        """Initialize the repository.

        Args:
            storage: Key-value store holding the task list
            key: Storage key for the task list
        """
        self.storage = storage
        self.key = key
        self._lock = asyncio.Lock()

    def _load(self) -> list[Task]:
        try:
            raw = self.storage.load(self.key)
            if raw is None:
                return []
            return _task_list_adapter.validate_python(raw)
        except (StorageError, ValidationError) as e:
            logger.error("failed to load tasks: %s", e)
            raise TaskError(TaskErrorKind.LOAD_FAILED, f"Failed to load tasks: {e}") from e

    def _store(self, tasks: list[Task], failure: TaskErrorKind) -> None:
        try:
            self.storage.save(self.key, _task_list_adapter.dump_python(tasks, mode="json"))
        except StorageError as e:
            logger.error("failed to store tasks (%s): %s", failure.value, e)
            raise TaskError(failure, f"Failed to store tasks: {e}") from e

    @staticmethod
    def _index_of(tasks: list[Task], task_id: str) -> int:
        for index, stored in enumerate(tasks):
            if stored.id == task_id:
                return index
        raise NotFoundError(task_id)

    async def fetch_all(self) -> list[Task]:
        async with self._lock:
            return self._load()

    async def save(self, task: Task) -> None:
        async with self._lock:
            tasks = self._load()
            tasks.append(task)
            self._store(tasks, TaskErrorKind.SAVE_FAILED)
        logger.debug("saved task %s", task.id)

    async def update(self, task: Task) -> None:
        async with self._lock:
            tasks = self._load()
            tasks[self._index_of(tasks, task.id)] = task
            self._store(tasks, TaskErrorKind.UPDATE_FAILED)
        logger.debug("updated task %s", task.id)

    async def delete(self, task: Task) -> None:
        async with self._lock:
            tasks = self._load()
            del tasks[self._index_of(tasks, task.id)]
            self._store(tasks, TaskErrorKind.DELETE_FAILED)
        logger.debug("deleted task %s", task.id)

    async def clear_completed(self) -> None:
        async with self._lock:
            tasks = self._load()
            remaining = [t for t in tasks if not t.completed]
            self._store(remaining, TaskErrorKind.DELETE_FAILED)
        logger.info("cleared %d completed task(s)", len(tasks) - len(remaining))

    async def clear_all(self) -> None:
        async with self._lock:
            self._store([], TaskErrorKind.DELETE_FAILED)
        logger.info("cleared all tasks")
