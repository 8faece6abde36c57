"""Task data models."""

from __future__ import annotations

import re
import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .validation import TIME_FORMAT_PATTERN

_TIME_RE = re.compile(TIME_FORMAT_PATTERN)


class Priority(str, Enum):
    """Task priority level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskFilter(str, Enum):
    """Named views over the task collection."""

    PENDING = "pending"
    COMPLETED = "completed"
    DAILY = "daily"


def generate_task_id() -> str:
    """Generate a new task ID as string."""
    return str(uuid.uuid4())


class Task(BaseModel):
    """Task model representing a complete task entity.

    Attributes:
        id: Unique identifier for the task, never reused
        title: Short task title, unique among tasks (case-insensitive)
        description: Optional detailed description
        priority: Priority level
        created_at: Creation timestamp
        completed_at: Completion timestamp; its presence means completed
        is_completed: Legacy flag, always derived from completed_at
        due_date: Optional due date for one-off tasks
        due_time: Optional "HH:MM" due time, requires due_date
        is_daily: Whether this is a recurring daily task
        daily_time: Optional "HH:MM" time of day for daily tasks
        daily_end_date: Optional last day a daily task repeats
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=generate_task_id)
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    created_at: datetime = Field(default_factory=datetime.now)
    completed_at: datetime | None = None
    is_completed: bool = False
    due_date: datetime | None = None
    due_time: str | None = None
    is_daily: bool = False
    daily_time: str | None = None
    daily_end_date: datetime | None = None

    @field_validator("due_time", "daily_time")
    @classmethod
    def _zero_pad_hour(cls, value: str | None) -> str | None:
        # Stored times are "HH:MM" so that they order correctly as strings.
        if value and _TIME_RE.match(value):
            hours, minutes = value.split(":")
            return f"{int(hours):02d}:{minutes}"
        return value

    @model_validator(mode="after")
    def _sync_completion_flag(self) -> Task:
        # completed_at is authoritative; the legacy flag just mirrors it.
        object.__setattr__(self, "is_completed", self.completed_at is not None)
        return self

    @classmethod
    def create(
        cls,
        title: str,
        *,
        description: str = "",
        priority: Priority = Priority.MEDIUM,
        due_date: datetime | None = None,
        due_time: str | None = None,
        is_daily: bool = False,
        daily_time: str | None = None,
        daily_end_date: datetime | None = None,
        now: datetime | None = None,
    ) -> Task:
        """Build a new pending task with a fresh id and creation time."""
        return cls(
            id=generate_task_id(),
            title=title,
            description=description,
            priority=priority,
            created_at=now or datetime.now(),
            due_date=due_date,
            due_time=due_time,
            is_daily=is_daily,
            daily_time=daily_time,
            daily_end_date=daily_end_date,
        )

    @property
    def completed(self) -> bool:
        return self.completed_at is not None

    def is_daily_expired(self, now: datetime | None = None) -> bool:
        """Return True when a daily task's end date is strictly before today."""
        if not self.is_daily or self.daily_end_date is None:
            return False
        today = (now or datetime.now()).date()
        return today > self.daily_end_date.date()

    def with_completion(self, completed_at: datetime | None) -> Task:
        """Return a copy with completed_at replaced and the flag re-derived."""
        return Task.model_validate(
            {**self.model_dump(), "completed_at": completed_at}
        )
