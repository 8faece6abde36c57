"""Task validator - pure consistency checks for task fields.

Every check returns a ValidationResult; none of them raise or touch storage.
The current time comes from an injectable clock so callers (and tests) decide
what "today" means.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import datetime, time

from todopad.models import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    MIN_TITLE_LENGTH,
    TIME_FORMAT_PATTERN,
    Priority,
    Task,
    ValidationErrorKind,
    ValidationIssue,
    ValidationResult,
)

_TIME_RE = re.compile(TIME_FORMAT_PATTERN)
_PRIORITY_VALUES = frozenset(p.value for p in Priority)


def normalize_title(title: str) -> str:
    """Trimmed, lowercased title used for duplicate detection."""
    return title.strip().lower()


class TaskValidator:
    """Validates task fields and whole tasks against business rules."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """Initialize the validator.

        Args:
            clock: Callable returning the current local time
        """
        self.clock = clock

    def validate_all(self, task: Task, existing_tasks: Iterable[Task]) -> ValidationResult:
        """Run every check for a task and collect the errors in order.

        Args:
            task: Task to validate
            existing_tasks: Tasks already stored; the task's own id is excluded
                from duplicate-title detection

        Returns:
            ValidationResult with all errors found
        """
        result = self.validate_title(task.title, existing_tasks, exclude_id=task.id)
        result = result.merge(
            self.validate_description(task.description),
            self.validate_due_date_time(task.due_date, task.due_time),
        )
        if task.is_daily:
            result = result.merge(
                self.validate_daily_task(
                    task.daily_time, task.daily_end_date, start_date=task.created_at
                )
            )
        return result.merge(self.validate_schedule(task))

    def validate_title(
        self,
        title: str,
        existing_tasks: Iterable[Task],
        exclude_id: str | None = None,
    ) -> ValidationResult:
        """Check emptiness, length and case-insensitive uniqueness.

        An empty title short-circuits: only EMPTY_TITLE is reported.
        """
        trimmed = title.strip()
        if len(trimmed) < MIN_TITLE_LENGTH:
            return ValidationResult.from_errors(
                [ValidationIssue(ValidationErrorKind.EMPTY_TITLE)]
            )

        errors: list[ValidationIssue] = []
        if len(trimmed) > MAX_TITLE_LENGTH:
            errors.append(
                ValidationIssue(
                    ValidationErrorKind.TITLE_TOO_LONG,
                    {"max_length": MAX_TITLE_LENGTH},
                )
            )

        normalized = trimmed.lower()
        if any(
            existing.id != exclude_id and normalize_title(existing.title) == normalized
            for existing in existing_tasks
        ):
            errors.append(ValidationIssue(ValidationErrorKind.DUPLICATE_TITLE))

        return ValidationResult.from_errors(errors)

    def validate_description(self, description: str | None) -> ValidationResult:
        trimmed = (description or "").strip()
        if len(trimmed) > MAX_DESCRIPTION_LENGTH:
            return ValidationResult.from_errors(
                [
                    ValidationIssue(
                        ValidationErrorKind.DESCRIPTION_TOO_LONG,
                        {"max_length": MAX_DESCRIPTION_LENGTH},
                    )
                ]
            )
        return ValidationResult.ok()

    def validate_time_format(self, value: str | None) -> ValidationResult:
        """Check an "HH:MM" string and reject times already elapsed today.

        The elapsed-time check does not look at any date; a valid time earlier
        than the current time of day is always reported as PAST_TIME.
        """
        if not value:
            return ValidationResult.ok()

        if not _TIME_RE.match(value):
            return ValidationResult.from_errors(
                [ValidationIssue(ValidationErrorKind.INVALID_TIME_FORMAT)]
            )

        hours, minutes = (int(part) for part in value.split(":"))
        now = self.clock()
        if datetime.combine(now.date(), time(hours, minutes)) < now:
            return ValidationResult.from_errors(
                [ValidationIssue(ValidationErrorKind.PAST_TIME)]
            )
        return ValidationResult.ok()

    def validate_date(
        self, value: datetime | None, is_required: bool = False
    ) -> ValidationResult:
        """Reject dates before today (day granularity).

        A missing required date is reported as PAST_DATE, the generic
        invalid-date kind.
        """
        if value is None:
            if is_required:
                return ValidationResult.from_errors(
                    [ValidationIssue(ValidationErrorKind.PAST_DATE)]
                )
            return ValidationResult.ok()

        if value.date() < self.clock().date():
            return ValidationResult.from_errors(
                [ValidationIssue(ValidationErrorKind.PAST_DATE)]
            )
        return ValidationResult.ok()

    def validate_due_date_time(
        self, due_date: datetime | None, due_time: str | None
    ) -> ValidationResult:
        errors: list[ValidationIssue] = []
        if due_time is not None and due_date is None:
            errors.append(ValidationIssue(ValidationErrorKind.TIME_WITHOUT_DATE))

        return ValidationResult.from_errors(errors).merge(
            self.validate_date(due_date, is_required=False),
            self.validate_time_format(due_time),
        )

    def validate_daily_task(
        self,
        daily_time: str | None,
        daily_end_date: datetime | None,
        start_date: datetime,
    ) -> ValidationResult:
        """Check a daily task's time and end date.

        Args:
            daily_time: Optional "HH:MM" time of day
            daily_end_date: Optional last day of the recurrence
            start_date: Day the recurrence starts (the task's creation time)

        Returns:
            ValidationResult with time-format and end-date errors
        """
        result = self.validate_time_format(daily_time)
        if daily_end_date is None:
            return result

        errors: list[ValidationIssue] = []
        end_day = daily_end_date.date()
        if end_day < start_date.date():
            errors.append(ValidationIssue(ValidationErrorKind.DAILY_END_DATE_BEFORE_START))
        if end_day < self.clock().date():
            errors.append(ValidationIssue(ValidationErrorKind.INVALID_DAILY_END_DATE))
        return result.merge(ValidationResult.from_errors(errors))

    def validate_schedule(self, task: Task) -> ValidationResult:
        """Check that a task is either one-off or daily, never both."""
        errors: list[ValidationIssue] = []
        if task.is_daily:
            if task.due_date is not None or task.due_time is not None:
                errors.append(
                    ValidationIssue(ValidationErrorKind.CONFLICTING_SCHEDULE_FIELDS)
                )
        elif task.daily_time is not None or task.daily_end_date is not None:
            errors.append(ValidationIssue(ValidationErrorKind.CONFLICTING_SCHEDULE_FIELDS))

        if (
            task.due_date is not None
            and task.daily_end_date is not None
            and task.due_date > task.daily_end_date
        ):
            errors.append(ValidationIssue(ValidationErrorKind.DUE_DATE_AFTER_DAILY_END))
        return ValidationResult.from_errors(errors)

    def validate_priority(self, value: Priority | str | None) -> ValidationResult:
        """Accept a Priority or its (case-insensitive) string value."""
        if isinstance(value, Priority):
            return ValidationResult.ok()
        if isinstance(value, str) and value.strip().lower() in _PRIORITY_VALUES:
            return ValidationResult.ok()
        return ValidationResult.from_errors(
            [ValidationIssue(ValidationErrorKind.INVALID_PRIORITY)]
        )
