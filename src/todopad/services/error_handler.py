"""Error reporting for failed task operations.

The handler keeps the most recent error (its kind, message and a recovery
hint) until the user acknowledges it.
"""

from __future__ import annotations

from todopad.models import TaskError, TaskErrorKind, ValidationErrorKind, ValidationFailedError
from todopad.utils.logger import get_logger

logger = get_logger(__name__)

RECOVERY_HINTS: dict[TaskErrorKind, str] = {
    TaskErrorKind.INVALID_TITLE: "Enter a non-empty task title",
    TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS: (
        "Use either a due date/time or daily settings, not both"
    ),
    TaskErrorKind.DUE_DATE_AFTER_DAILY_END: "Pick a due date on or before the daily end date",
    TaskErrorKind.VALIDATION_FAILED: "Correct the highlighted fields and try again",
    TaskErrorKind.NOT_FOUND: "Refresh the task list and try again",
    TaskErrorKind.SAVE_FAILED: "Check available storage and try again",
    TaskErrorKind.LOAD_FAILED: "Check available storage and try again",
    TaskErrorKind.DELETE_FAILED: "Check available storage and try again",
    TaskErrorKind.UPDATE_FAILED: "Check available storage and try again",
    TaskErrorKind.UNEXPECTED: "Please try again later",
}

VALIDATION_HINTS: dict[ValidationErrorKind, str] = {
    ValidationErrorKind.EMPTY_TITLE: "Enter a task title",
    ValidationErrorKind.TITLE_TOO_LONG: "Shorten the title",
    ValidationErrorKind.DESCRIPTION_TOO_LONG: "Shorten the description",
    ValidationErrorKind.INVALID_TIME_FORMAT: "Use the HH:MM time format",
    ValidationErrorKind.PAST_DATE: "Choose a date in the future",
    ValidationErrorKind.PAST_TIME: "Choose a time in the future",
    ValidationErrorKind.DAILY_END_DATE_BEFORE_START: (
        "Choose an end date after the start date"
    ),
    ValidationErrorKind.INVALID_DAILY_END_DATE: "Choose a valid end date",
    ValidationErrorKind.TIME_WITHOUT_DATE: "Set a date first, or remove the time",
    ValidationErrorKind.DUPLICATE_TITLE: "Use a different title",
    ValidationErrorKind.INVALID_PRIORITY: "Choose low, medium or high",
    ValidationErrorKind.CONFLICTING_SCHEDULE_FIELDS: (
        "Use either a due date/time or daily settings, not both"
    ),
    ValidationErrorKind.DUE_DATE_AFTER_DAILY_END: (
        "Pick a due date on or before the daily end date"
    ),
}


def recovery_hint_for(error: BaseException) -> str:
    """Return the recovery hint matching an error."""
    if isinstance(error, ValidationFailedError) and error.result.first_error:
        return VALIDATION_HINTS[error.result.first_error.kind]
    if isinstance(error, TaskError):
        return RECOVERY_HINTS[error.kind]
    return RECOVERY_HINTS[TaskErrorKind.UNEXPECTED]


class ErrorHandler:
    """Tracks the error currently shown to the user."""

    def __init__(self):
        self.error_kind: TaskErrorKind | None = None
        self.error_message: str | None = None
        self.recovery_hint: str | None = None
        self.showing_error = False
        self.last_error: BaseException | None = None

    def handle(self, error: BaseException, recovery_hint: str | None = None) -> None:
        """Record an error for display.

        Args:
            error: The failure to report
            recovery_hint: Overrides the default hint for the error kind
        """
        if isinstance(error, TaskError):
            self.error_kind = error.kind
            logger.warning("operation failed (%s): %s", error.kind.value, error)
        else:
            self.error_kind = TaskErrorKind.UNEXPECTED
            logger.error("unexpected error: %r", error)
        self.error_message = str(error)
        self.recovery_hint = recovery_hint or recovery_hint_for(error)
        self.last_error = error
        self.showing_error = True

    def clear_error(self) -> None:
        """Acknowledge the current error."""
        self.error_kind = None
        self.error_message = None
        self.recovery_hint = None
        self.last_error = None
        self.showing_error = False
