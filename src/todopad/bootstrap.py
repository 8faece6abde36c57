"""Composition root: wires storage, repository, service and manager.

Nothing in the package looks dependencies up globally; callers build an
AppContext once and pass its parts down.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from todopad.adapters.local_repository import LocalTaskRepository
from todopad.adapters.sqlite import SqliteStorage
from todopad.adapters.storage import InMemoryStorage
from todopad.models import AppConfig
from todopad.repositories import StorageService, TaskRepository
from todopad.services.config_service import get_config_service
from todopad.services.error_handler import ErrorHandler
from todopad.services.task_manager import TaskManager
from todopad.services.task_service import TaskService
from todopad.services.validator import TaskValidator
from todopad.utils.logger import setup_logging
from todopad.utils.ui.formatters import apply_output_config


@dataclass
class AppContext:
    """The object graph for one running application."""

    config: AppConfig
    storage: StorageService
    repository: TaskRepository
    validator: TaskValidator
    task_service: TaskService
    error_handler: ErrorHandler
    manager: TaskManager

    def close(self) -> None:
        self.storage.close()


def build_storage(config: AppConfig, db_path: str | Path | None = None) -> StorageService:
    """Create the storage backend selected by the configuration."""
    if config.storage.backend == "memory":
        return InMemoryStorage()
    return SqliteStorage(db_path or config.storage.path)


def build_app(
    config: AppConfig | None = None,
    *,
    storage: StorageService | None = None,
    db_path: str | Path | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> AppContext:
    """Build Storage -> Repository -> TaskService -> TaskManager.

    Args:
        config: Application configuration (defaults apply when omitted)
        storage: Storage to use instead of the configured backend
        db_path: Database path overriding the configured one (sqlite only)
        clock: Callable returning the current local time

    Returns:
        AppContext holding every constructed component
    """
    config = config or AppConfig()
    storage = storage or build_storage(config, db_path)
    repository = LocalTaskRepository(storage)
    validator = TaskValidator(clock=clock)
    task_service = TaskService(repository, validator=validator, clock=clock)
    error_handler = ErrorHandler()
    manager = TaskManager(
        task_service,
        error_handler=error_handler,
        initial_filter=config.default_filter,
        clock=clock,
    )
    return AppContext(
        config=config,
        storage=storage,
        repository=repository,
        validator=validator,
        task_service=task_service,
        error_handler=error_handler,
        manager=manager,
    )


def get_app_context() -> AppContext:
    """Build the application from the user's saved configuration.

    Also configures file logging and console colour from the config.
    """
    config_service = get_config_service()
    config = config_service.config
    setup_logging(config.logging.level)
    apply_output_config(config.output)
    db_path = config_service.storage_path() if config.storage.backend == "sqlite" else None
    return build_app(config, db_path=db_path)
