"""Filtering and ordering of task collections into views.

All functions here are pure: the same tasks, filter and clock always produce
the same output, and input collections are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from todopad.models import Priority, Task, TaskFilter

# Tasks without a due time sort after every real "HH:MM" value. Comparison is
# lexical; Task pads single-digit hours so stored times are always "HH:MM".
NO_DUE_TIME_SENTINEL = "24:00"

PRIORITY_ORDER: tuple[Priority, ...] = (Priority.HIGH, Priority.MEDIUM, Priority.LOW)
_PRIORITY_RANK = {priority: rank for rank, priority in enumerate(PRIORITY_ORDER)}


def matches_filter(task: Task, task_filter: TaskFilter, now: datetime | None = None) -> bool:
    """Return True when the task belongs in the given view."""
    if task.is_daily_expired(now):
        return False
    if task_filter is TaskFilter.PENDING:
        return not task.completed
    if task_filter is TaskFilter.COMPLETED:
        return task.completed
    if task_filter is TaskFilter.DAILY:
        return task.is_daily
    raise ValueError(f"Unknown task filter: {task_filter}")


def sort_key(task: Task) -> tuple:
    """Sort key: due date (missing last), due time, then priority (high first)."""
    has_no_due_date = task.due_date is None
    return (
        has_no_due_date,
        task.due_date or datetime.min,
        task.due_time or NO_DUE_TIME_SENTINEL,
        _PRIORITY_RANK[task.priority],
    )


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Return tasks in view order. Full ties keep their input order."""
    return sorted(tasks, key=sort_key)


def apply_filter(
    tasks: Iterable[Task], task_filter: TaskFilter, now: datetime | None = None
) -> list[Task]:
    """Filter tasks into a view and sort it.

    Args:
        tasks: Task collection in storage order
        task_filter: View to compute
        now: Current time used for daily-expiry checks (defaults to now)

    Returns:
        New list containing the view in display order
    """
    now = now or datetime.now()
    return sort_tasks(task for task in tasks if matches_filter(task, task_filter, now))


def pending_tasks(tasks: Iterable[Task], now: datetime | None = None) -> list[Task]:
    return [t for t in tasks if matches_filter(t, TaskFilter.PENDING, now)]


def completed_tasks(tasks: Iterable[Task], now: datetime | None = None) -> list[Task]:
    return [t for t in tasks if matches_filter(t, TaskFilter.COMPLETED, now)]


def daily_tasks(tasks: Iterable[Task], now: datetime | None = None) -> list[Task]:
    return [t for t in tasks if matches_filter(t, TaskFilter.DAILY, now)]


def completion_percentage(tasks: Iterable[Task], now: datetime | None = None) -> float:
    """Share of all tasks that are in the completed view, 0.0 when empty."""
    tasks = list(tasks)
    if not tasks:
        return 0.0
    return len(completed_tasks(tasks, now)) / len(tasks)
