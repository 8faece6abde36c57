"""Shared test fixtures and configuration.

Provides a fixed clock, in-memory storage and the wired service stack, plus
infrastructure to isolate tests from the real config, data and log dirs.
"""

from __future__ import annotations

from contextlib import ExitStack
from datetime import datetime
from unittest.mock import patch

import pytest

from todopad.adapters import InMemoryStorage, LocalTaskRepository
from todopad.bootstrap import build_app
from todopad.models import AppConfig, Task
from todopad.services.task_manager import TaskManager
from todopad.services.task_service import TaskService
from todopad.services.validator import TaskValidator

# Early in the day so that same-day due times are still in the future.
FIXED_NOW = datetime(2024, 6, 1, 8, 0)

COMMAND_MODULES = (
    "add_command",
    "list_command",
    "edit_command",
    "toggle_command",
    "delete_command",
    "clear_command",
    "stats_command",
)


class FixedClock:
    """Callable clock returning a settable time."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


# ---------------------------------------------------------------------------
# Domain stack
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def validator(clock) -> TaskValidator:
    return TaskValidator(clock=clock)


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def repository(storage) -> LocalTaskRepository:
    return LocalTaskRepository(storage)


@pytest.fixture()
def task_service(repository, validator) -> TaskService:
    return TaskService(repository, validator=validator)


@pytest.fixture()
def manager(task_service) -> TaskManager:
    return TaskManager(task_service)


@pytest.fixture()
def make_task():
    """Factory building tasks created at FIXED_NOW."""

    def _make(title: str = "Task", **fields) -> Task:
        fields.setdefault("now", FIXED_NOW)
        return Task.create(title, **fields)

    return _make


# ---------------------------------------------------------------------------
# Config / filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from todopad.services.config_service import ConfigService, get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    with patch("todopad.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("todopad.services.config_service.user_data_dir", return_value=tmpdir):
            yield ConfigService()
    get_config_service.cache_clear()


@pytest.fixture()
def cli_context(storage, clock):
    """Point every task command at one shared in-memory store.

    Each invocation gets a freshly built AppContext over the same storage,
    just like separate CLI processes sharing one database.
    """

    def _build():
        return build_app(AppConfig(), storage=storage, clock=clock)

    with ExitStack() as stack:
        for module in COMMAND_MODULES:
            stack.enter_context(
                patch(f"todopad.commands.{module}.get_app_context", side_effect=_build)
            )
        yield storage
