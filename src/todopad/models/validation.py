"""Validation result types and constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MAX_TITLE_LENGTH = 100
MIN_TITLE_LENGTH = 1
MAX_DESCRIPTION_LENGTH = 500
TIME_FORMAT_PATTERN = r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$"


class ValidationErrorKind(str, Enum):
    """Kinds of field-level and cross-field validation failures."""

    EMPTY_TITLE = "empty_title"
    TITLE_TOO_LONG = "title_too_long"
    DESCRIPTION_TOO_LONG = "description_too_long"
    INVALID_TIME_FORMAT = "invalid_time_format"
    PAST_DATE = "past_date"
    PAST_TIME = "past_time"
    DAILY_END_DATE_BEFORE_START = "daily_end_date_before_start"
    INVALID_DAILY_END_DATE = "invalid_daily_end_date"
    TIME_WITHOUT_DATE = "time_without_date"
    DUPLICATE_TITLE = "duplicate_title"
    INVALID_PRIORITY = "invalid_priority"
    CONFLICTING_SCHEDULE_FIELDS = "conflicting_schedule_fields"
    DUE_DATE_AFTER_DAILY_END = "due_date_after_daily_end"


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation error: its kind plus optional parameters."""

    kind: ValidationErrorKind
    params: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if not self.params:
            return self.kind.value
        args = ", ".join(f"{k}={v}" for k, v in self.params.items())
        return f"{self.kind.value}({args})"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a task or a field against business rules."""

    errors: tuple[ValidationIssue, ...] = ()

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls()

    @classmethod
    def from_errors(cls, errors: list[ValidationIssue]) -> ValidationResult:
        return cls(tuple(errors))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> ValidationIssue | None:
        return self.errors[0] if self.errors else None

    @property
    def kinds(self) -> list[ValidationErrorKind]:
        return [issue.kind for issue in self.errors]

    def merge(self, *others: ValidationResult) -> ValidationResult:
        """Return the ordered union of this result's errors and others'."""
        errors = list(self.errors)
        for other in others:
            errors.extend(other.errors)
        return ValidationResult(tuple(errors))
