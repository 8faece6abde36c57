"""Task manager - in-memory state holder for the task list.

The manager owns the authoritative in-memory mirror of the task collection
and the active filter. Every mutation runs as its own asyncio task: it awaits
the task service and then commits the result into the mirror on the same
event loop, so the mirror is only ever touched from that loop.

Mutations are not serialized against each other. Two rapid toggles of the same
task race at the repository and the last writer wins.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Coroutine
from datetime import datetime
from typing import Any, TypeVar

from todopad.models import Task, TaskFilter
from todopad.services import task_filters
from todopad.services.error_handler import ErrorHandler
from todopad.services.task_service import TaskService
from todopad.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TaskManager:
    """Owns the task mirror, the current filter and the derived view."""

    def __init__(
        self,
        task_service: TaskService,
        error_handler: ErrorHandler | None = None,
        initial_filter: TaskFilter = TaskFilter.PENDING,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the manager.

        Args:
            task_service: Use-case layer performing validated persistence
            error_handler: Collaborator receiving failed operations
            initial_filter: View shown before set_filter() is called
            clock: Callable returning the current local time
        """
        self.task_service = task_service
        self.error_handler = error_handler or ErrorHandler()
        self.clock = clock or task_service.clock
        self._tasks: list[Task] = []
        self._current_filter = initial_filter
        self._filtered: list[Task] = []
        self._pending: set[asyncio.Task] = set()
        self._loading = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def tasks(self) -> list[Task]:
        """Copy of the full mirror in storage order."""
        return list(self._tasks)

    @property
    def current_filter(self) -> TaskFilter:
        return self._current_filter

    @property
    def filtered_tasks(self) -> list[Task]:
        """Copy of the active view in display order."""
        return list(self._filtered)

    @property
    def is_loading(self) -> bool:
        return self._loading or bool(self._pending)

    @property
    def pending_tasks(self) -> list[Task]:
        return task_filters.pending_tasks(self._tasks, self.clock())

    @property
    def completed_tasks(self) -> list[Task]:
        return task_filters.completed_tasks(self._tasks, self.clock())

    @property
    def daily_tasks(self) -> list[Task]:
        return task_filters.daily_tasks(self._tasks, self.clock())

    @property
    def completion_percentage(self) -> float:
        return task_filters.completion_percentage(self._tasks, self.clock())

    def get_task(self, task_id: str) -> Task | None:
        """Return the mirrored task with this id, if any."""
        return next((t for t in self._tasks if t.id == task_id), None)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def set_filter(self, task_filter: TaskFilter) -> None:
        self._current_filter = task_filter
        self._apply_filter()

    def _apply_filter(self) -> None:
        self._filtered = task_filters.apply_filter(
            self._tasks, self._current_filter, self.clock()
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> bool:
        """Replace the mirror with the stored collection.

        Returns:
            True on success; on failure the error is reported and the mirror
            keeps its previous contents.
        """
        self._loading = True
        try:
            self._tasks = await self.task_service.fetch_tasks()
        except Exception as e:
            self.error_handler.handle(e)
            return False
        finally:
            self._loading = False
        self._apply_filter()
        logger.debug("loaded %d task(s)", len(self._tasks))
        return True

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_task(self, task: Task) -> asyncio.Task:
        def commit(stored: Task) -> None:
            self._tasks.append(stored)

        return self._spawn("add", self.task_service.add_task(task), commit)

    def update_task(self, task: Task) -> asyncio.Task:
        return self._spawn("update", self.task_service.update_task(task), self._replace)

    def toggle_completion(self, task: Task) -> asyncio.Task:
        return self._spawn(
            "toggle", self.task_service.toggle_completion(task), self._replace
        )

    def delete_task(self, task: Task) -> asyncio.Task:
        def commit(_: None) -> None:
            self._tasks = [t for t in self._tasks if t.id != task.id]

        return self._spawn("delete", self.task_service.delete_task(task), commit)

    def clear_completed(self) -> asyncio.Task:
        def commit(_: None) -> None:
            self._tasks = [t for t in self._tasks if not t.completed]

        return self._spawn(
            "clear_completed", self.task_service.clear_completed_tasks(), commit
        )

    def clear_all(self) -> asyncio.Task:
        def commit(_: None) -> None:
            self._tasks = []

        return self._spawn("clear_all", self.task_service.clear_all_tasks(), commit)

    async def wait_idle(self) -> None:
        """Wait until every in-flight operation has committed or failed."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def _replace(self, updated: Task) -> None:
        for index, existing in enumerate(self._tasks):
            if existing.id == updated.id:
                self._tasks[index] = updated
                return

    def _spawn(
        self,
        name: str,
        operation: Coroutine[Any, Any, T],
        commit: Callable[[T], None],
    ) -> asyncio.Task:
        """Run an operation as an independent task on the running loop."""
        task = asyncio.get_running_loop().create_task(
            self._run(name, operation, commit), name=f"todopad-{name}"
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run(
        self,
        name: str,
        operation: Awaitable[T],
        commit: Callable[[T], None],
    ) -> bool:
        try:
            result = await operation
        except Exception as e:
            # The mirror keeps its last committed state.
            self.error_handler.handle(e)
            logger.debug("%s failed: %s", name, e)
            return False
        commit(result)
        self._apply_filter()
        return True
