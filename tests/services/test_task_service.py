"""Unit tests for TaskService.

The repository is an AsyncMock so each test can assert exactly what reached
storage; validation runs for real against a fixed clock.
"""

from __future__ import annotations

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from todopad.models import (
    NotFoundError,
    Task,
    TaskError,
    TaskErrorKind,
    ValidationErrorKind,
    ValidationFailedError,
)
from todopad.repositories import TaskRepository
from todopad.services.task_service import TaskService

NOW = datetime(2024, 6, 1, 8, 0)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock(spec=TaskRepository)
    repo.fetch_all = AsyncMock(return_value=[])
    repo.save = AsyncMock()
    repo.update = AsyncMock()
    repo.delete = AsyncMock()
    repo.clear_completed = AsyncMock()
    repo.clear_all = AsyncMock()
    return repo


@pytest.fixture()
def service(mock_repo, validator):
    return TaskService(mock_repo, validator=validator)


# ---------------------------------------------------------------------------
# add / update
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_add_task_persists_valid_task(service, mock_repo, make_task):
    task = make_task("Buy milk", due_date=datetime(2024, 6, 2), due_time="09:00")

    result = await service.add_task(task)

    assert result is task
    mock_repo.save.assert_awaited_once_with(task)


@pytest.mark.asyncio
async def test_add_duplicate_title_is_rejected(service, mock_repo, make_task):
    mock_repo.fetch_all.return_value = [make_task("Buy milk")]

    with pytest.raises(ValidationFailedError) as exc_info:
        await service.add_task(make_task("buy MILK"))

    assert exc_info.value.kind is TaskErrorKind.VALIDATION_FAILED
    assert exc_info.value.result.kinds == [ValidationErrorKind.DUPLICATE_TITLE]
    mock_repo.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_past_due_date_is_rejected(service, mock_repo, make_task):
    with pytest.raises(ValidationFailedError):
        await service.add_task(make_task("Late", due_date=datetime(2024, 5, 31)))
    mock_repo.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_title_fails_business_rules_before_fetching(service, mock_repo):
    with pytest.raises(TaskError) as exc_info:
        await service.add_task(Task(title="   "))

    assert exc_info.value.kind is TaskErrorKind.INVALID_TITLE
    mock_repo.fetch_all.assert_not_awaited()
    mock_repo.save.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields",
    [
        {"is_daily": True, "due_date": datetime(2024, 6, 2)},
        {"is_daily": True, "due_time": "09:00"},
        {"daily_time": "09:00"},
        {"daily_end_date": datetime(2024, 6, 30)},
    ],
)
async def test_conflicting_schedule_fields(service, mock_repo, fields):
    with pytest.raises(TaskError) as exc_info:
        await service.add_task(Task(title="Mixed", **fields))

    assert exc_info.value.kind is TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS
    mock_repo.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_excludes_own_title(service, mock_repo, make_task):
    task = make_task("Buy milk")
    mock_repo.fetch_all.return_value = [task]
    edited = task.model_copy(update={"title": "BUY MILK", "description": "2 litres"})

    result = await service.update_task(edited)

    assert result is edited
    mock_repo.update.assert_awaited_once_with(edited)


@pytest.mark.asyncio
async def test_update_missing_task_propagates_not_found(service, mock_repo, make_task):
    task = make_task("Gone")
    mock_repo.update.side_effect = NotFoundError(task.id)

    with pytest.raises(NotFoundError):
        await service.update_task(task)


# ---------------------------------------------------------------------------
# toggle
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_toggle_completes_with_clock_time(service, mock_repo, make_task):
    task = make_task("Buy milk")

    updated = await service.toggle_completion(task)

    assert updated.completed_at == NOW
    assert updated.is_completed is True
    assert task.completed_at is None
    mock_repo.update.assert_awaited_once_with(updated)


@pytest.mark.asyncio
async def test_toggle_twice_restores_pending(service, make_task):
    task = make_task("Buy milk")

    reopened = await service.toggle_completion(await service.toggle_completion(task))

    assert reopened.completed_at is None
    assert reopened.is_completed is False
    assert reopened.model_dump() == task.model_dump()


@pytest.mark.asyncio
async def test_toggle_skips_validation(service, mock_repo, make_task):
    # An overdue task can still be completed.
    task = make_task("Overdue", due_date=datetime(2024, 5, 1))

    await service.toggle_completion(task)

    mock_repo.fetch_all.assert_not_awaited()
    mock_repo.update.assert_awaited_once()


# ---------------------------------------------------------------------------
# delete / clear / fetch
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_delete_and_clear_delegate(service, mock_repo, make_task):
    task = make_task("x")

    await service.delete_task(task)
    await service.clear_completed_tasks()
    await service.clear_all_tasks()

    mock_repo.delete.assert_awaited_once_with(task)
    mock_repo.clear_completed.assert_awaited_once()
    mock_repo.clear_all.assert_awaited_once()


@pytest.mark.asyncio
async def test_fetch_tasks_returns_repository_order(service, mock_repo, make_task):
    tasks = [make_task("b"), make_task("a")]
    mock_repo.fetch_all.return_value = tasks

    assert await service.fetch_tasks() == tasks


def test_conflicting_fields_win_over_due_after_daily_end():
    # A daily end date on a one-off task is itself a conflict.
    task = Task.model_construct(
        title="x",
        is_daily=False,
        due_date=datetime(2024, 6, 10),
        due_time=None,
        daily_time=None,
        daily_end_date=datetime(2024, 6, 5),
    )
    with pytest.raises(TaskError) as exc_info:
        TaskService.check_business_rules(task)
    assert exc_info.value.kind is TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS


def test_clock_defaults_to_validator_clock(mock_repo, validator):
    service = TaskService(mock_repo, validator=validator)
    assert service.clock is validator.clock
