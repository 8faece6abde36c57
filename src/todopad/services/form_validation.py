"""Live validation for a task editing form.

TaskForm holds the field values a user is editing. Every setter triggers the
validation for the fields it affects; title and description checks can be
debounced so fast typing only validates once the user pauses.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from todopad.models import Priority, Task, ValidationIssue, ValidationResult
from todopad.services.validator import TaskValidator
from todopad.utils.debounce import Debouncer


class TaskForm:
    """Form state with per-field errors for creating or editing a task."""

    def __init__(
        self,
        existing_tasks: Iterable[Task] = (),
        validator: TaskValidator | None = None,
        *,
        title_delay: float = 0.0,
        description_delay: float = 0.0,
        editing: Task | None = None,
    ):
        """Initialize the form.

        Args:
            existing_tasks: Tasks used for duplicate-title detection
            validator: Validator to use
            title_delay: Debounce delay in seconds for title validation
            description_delay: Debounce delay in seconds for description validation
            editing: Task being edited; its values prefill the form and its id
                is excluded from duplicate detection
        """
        self.validator = validator or TaskValidator()
        self._existing = list(existing_tasks)
        self._editing = editing

        self._title = ""
        self._description = ""
        self._priority = Priority.MEDIUM
        self._due_date: datetime | None = None
        self._due_time: str | None = None
        self._is_daily = False
        self._daily_time: str | None = None
        self._daily_end_date: datetime | None = None

        self.title_error: ValidationIssue | None = None
        self.description_error: ValidationIssue | None = None
        self.time_error: ValidationIssue | None = None
        self.date_error: ValidationIssue | None = None
        self.daily_error: ValidationIssue | None = None

        self._title_debouncer = Debouncer(self.validate_title, title_delay)
        self._description_debouncer = Debouncer(
            self.validate_description, description_delay
        )

        if editing is not None:
            self._load(editing)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value
        self._title_debouncer.call()

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = value
        self._description_debouncer.call()

    @property
    def priority(self) -> Priority:
        return self._priority

    @priority.setter
    def priority(self, value: Priority) -> None:
        self._priority = value

    @property
    def due_date(self) -> datetime | None:
        return self._due_date

    @due_date.setter
    def due_date(self, value: datetime | None) -> None:
        self._due_date = value
        self.validate_date()
        # the time check depends on whether a date is set
        self.validate_time()

    @property
    def due_time(self) -> str | None:
        return self._due_time

    @due_time.setter
    def due_time(self, value: str | None) -> None:
        self._due_time = value
        self.validate_time()

    @property
    def is_daily(self) -> bool:
        return self._is_daily

    @is_daily.setter
    def is_daily(self, value: bool) -> None:
        self._is_daily = value
        self.validate_daily_task()

    @property
    def daily_time(self) -> str | None:
        return self._daily_time

    @daily_time.setter
    def daily_time(self, value: str | None) -> None:
        self._daily_time = value
        self.validate_daily_task()

    @property
    def daily_end_date(self) -> datetime | None:
        return self._daily_end_date

    @daily_end_date.setter
    def daily_end_date(self, value: datetime | None) -> None:
        self._daily_end_date = value
        self.validate_daily_task()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def has_validation_errors(self) -> bool:
        return any(
            error is not None
            for error in (
                self.title_error,
                self.description_error,
                self.time_error,
                self.date_error,
                self.daily_error,
            )
        )

    @property
    def is_form_valid(self) -> bool:
        return not self.has_validation_errors and bool(self._title.strip())

    # ------------------------------------------------------------------
    # Per-field validation
    # ------------------------------------------------------------------

    def validate_title(self) -> None:
        exclude_id = self._editing.id if self._editing else None
        result = self.validator.validate_title(self._title, self._existing, exclude_id)
        self.title_error = result.first_error

    def validate_description(self) -> None:
        self.description_error = self.validator.validate_description(
            self._description
        ).first_error

    def validate_time(self) -> None:
        self.time_error = self.validator.validate_due_date_time(
            self._due_date, self._due_time
        ).first_error

    def validate_date(self) -> None:
        self.date_error = self.validator.validate_date(
            self._due_date, is_required=False
        ).first_error

    def validate_daily_task(self) -> None:
        if not self._is_daily:
            self.daily_error = None
            return
        start = self._editing.created_at if self._editing else self.validator.clock()
        self.daily_error = self.validator.validate_daily_task(
            self._daily_time, self._daily_end_date, start_date=start
        ).first_error

    # ------------------------------------------------------------------
    # Whole-form operations
    # ------------------------------------------------------------------

    def update_existing_tasks(self, tasks: Iterable[Task]) -> None:
        """Replace the duplicate-detection set and re-check the title."""
        self._existing = list(tasks)
        self.validate_title()

    def flush(self) -> None:
        """Run any debounced validation immediately."""
        self._title_debouncer.flush()
        self._description_debouncer.flush()

    def build_task(self) -> Task:
        """Build the task described by the form.

        Fields belonging to the other schedule kind are dropped, so a daily
        form never produces a due date and vice versa.
        """
        daily = self._is_daily
        fields = {
            "title": self._title.strip(),
            "description": self._description.strip(),
            "priority": self._priority,
            "due_date": None if daily else self._due_date,
            "due_time": None if daily else self._due_time,
            "is_daily": daily,
            "daily_time": self._daily_time if daily else None,
            "daily_end_date": self._daily_end_date if daily else None,
        }
        if self._editing is not None:
            return Task.model_validate({**self._editing.model_dump(), **fields})
        return Task.create(now=self.validator.clock(), **fields)

    def validate_all(self) -> ValidationResult:
        """Validate the task the form would produce."""
        return self.validator.validate_all(self.build_task(), self._existing)

    def clear_validation_errors(self) -> None:
        self.title_error = None
        self.description_error = None
        self.time_error = None
        self.date_error = None
        self.daily_error = None

    def reset(self) -> None:
        """Return every field to its default and drop all errors."""
        self._title_debouncer.cancel()
        self._description_debouncer.cancel()
        self._title = ""
        self._description = ""
        self._priority = Priority.MEDIUM
        self._due_date = None
        self._due_time = None
        self._is_daily = False
        self._daily_time = None
        self._daily_end_date = None
        self._editing = None
        self.clear_validation_errors()

    def _load(self, task: Task) -> None:
        self._title = task.title
        self._description = task.description
        self._priority = task.priority
        self._due_date = task.due_date
        self._due_time = task.due_time
        self._is_daily = task.is_daily
        self._daily_time = task.daily_time
        self._daily_end_date = task.daily_end_date
