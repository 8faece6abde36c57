"""Task service - Business logic for task operations.

This service layer sits between the task manager and the repository. It
enforces the task invariants before every mutation, so a rejected task never
reaches storage.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from todopad.models import Task, TaskError, TaskErrorKind, ValidationFailedError
from todopad.repositories import TaskRepository
from todopad.services.validator import TaskValidator
from todopad.utils.logger import get_logger

logger = get_logger(__name__)


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task operations
    using the task repository.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        validator: TaskValidator | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
            validator: Validator to use (defaults to one sharing this clock)
            clock: Callable returning the current local time
        """
        self.repository = task_repository
        self.clock = clock or (validator.clock if validator else datetime.now)
        self.validator = validator or TaskValidator(clock=self.clock)

    async def fetch_tasks(self) -> list[Task]:
        """Return the full task collection, unfiltered, in storage order."""
        return await self.repository.fetch_all()

    async def add_task(self, task: Task) -> Task:
        """Validate and persist a new task.

        Args:
            task: Task to create

        Returns:
            The stored task

        Raises:
            TaskError: If a business rule is violated
            ValidationFailedError: If validation fails (nothing is persisted)
        """
        await self._validate(task)
        await self.repository.save(task)
        logger.info("task added: %s", task.id)
        return task

    async def update_task(self, task: Task) -> Task:
        """Validate and persist changes to an existing task.

        Args:
            task: Task with updated fields (same id as the stored task)

        Returns:
            The stored task

        Raises:
            TaskError: If a business rule is violated
            ValidationFailedError: If validation fails
            NotFoundError: If the task no longer exists
        """
        await self._validate(task)
        await self.repository.update(task)
        logger.info("task updated: %s", task.id)
        return task

    async def toggle_completion(self, task: Task) -> Task:
        """Flip a task between pending and completed.

        Args:
            task: Task to toggle

        Returns:
            Updated task with completed_at cleared or set to now
        """
        completed_at = None if task.completed else self.clock()
        updated = task.with_completion(completed_at)
        await self.repository.update(updated)
        logger.info(
            "task %s marked %s", task.id, "completed" if updated.completed else "pending"
        )
        return updated

    async def delete_task(self, task: Task) -> None:
        await self.repository.delete(task)
        logger.info("task deleted: %s", task.id)

    async def clear_completed_tasks(self) -> None:
        await self.repository.clear_completed()

    async def clear_all_tasks(self) -> None:
        await self.repository.clear_all()

    async def _validate(self, task: Task) -> None:
        self.check_business_rules(task)
        existing = await self.repository.fetch_all()
        result = self.validator.validate_all(task, existing)
        if not result.is_valid:
            logger.warning("task %s rejected: %s", task.id, [str(e) for e in result.errors])
            raise ValidationFailedError(result)

    @staticmethod
    def check_business_rules(task: Task) -> None:
        """Raise TaskError for tasks whose fields contradict each other."""
        if not task.title.strip():
            raise TaskError(TaskErrorKind.INVALID_TITLE, "Task title cannot be empty")

        if task.is_daily:
            if task.due_date is not None or task.due_time is not None:
                raise TaskError(
                    TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS,
                    "Daily tasks cannot have a due date or due time",
                )
        elif task.daily_time is not None or task.daily_end_date is not None:
            raise TaskError(
                TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS,
                "One-off tasks cannot have a daily time or end date",
            )

        if (
            task.due_date is not None
            and task.daily_end_date is not None
            and task.due_date > task.daily_end_date
        ):
            raise TaskError(
                TaskErrorKind.DUE_DATE_AFTER_DAILY_END,
                "Due date cannot be after the daily end date",
            )
