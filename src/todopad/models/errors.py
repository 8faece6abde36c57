"""Domain and storage exceptions."""

from __future__ import annotations

from enum import Enum

from todopad.models.validation import ValidationResult


class TaskErrorKind(str, Enum):
    """Kinds of domain errors raised by the use-case and repository layers."""

    INVALID_TITLE = "invalid_title"
    CONFLICTING_SCHEDULE_FIELDS = "conflicting_schedule_fields"
    DUE_DATE_AFTER_DAILY_END = "due_date_after_daily_end"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    SAVE_FAILED = "save_failed"
    LOAD_FAILED = "load_failed"
    DELETE_FAILED = "delete_failed"
    UPDATE_FAILED = "update_failed"
    UNEXPECTED = "unexpected"


class TaskError(Exception):
    """Recoverable domain error carrying a kind."""

    def __init__(self, kind: TaskErrorKind, message: str | None = None):
        super().__init__(message or kind.value.replace("_", " "))
        self.kind = kind


class ValidationFailedError(TaskError):
    """Raised when a task fails validation; nothing was persisted."""

    def __init__(self, result: ValidationResult):
        details = ", ".join(str(issue) for issue in result.errors)
        super().__init__(TaskErrorKind.VALIDATION_FAILED, f"Validation failed: {details}")
        self.result = result


class NotFoundError(TaskError):
    """Raised when a task id is not present in the store."""

    def __init__(self, task_id: str):
        super().__init__(TaskErrorKind.NOT_FOUND, f"Task not found: {task_id}")
        self.task_id = task_id


class StorageError(Exception):
    """Raised by storage backends on I/O or encoding failures."""
