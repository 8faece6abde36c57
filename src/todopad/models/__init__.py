"""todopad domain models.

This package contains the Pydantic models and result types that represent the
core domain entities of todopad.
"""

from .config_models import AppConfig, LoggingConfig, OutputConfig, StorageConfig
from .core import Priority, Task, TaskFilter, generate_task_id
from .errors import (
    NotFoundError,
    StorageError,
    TaskError,
    TaskErrorKind,
    ValidationFailedError,
)
from .validation import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    MIN_TITLE_LENGTH,
    TIME_FORMAT_PATTERN,
    ValidationErrorKind,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    # Task models
    "Task",
    "Priority",
    "TaskFilter",
    "generate_task_id",
    # Validation
    "ValidationErrorKind",
    "ValidationIssue",
    "ValidationResult",
    "MAX_TITLE_LENGTH",
    "MIN_TITLE_LENGTH",
    "MAX_DESCRIPTION_LENGTH",
    "TIME_FORMAT_PATTERN",
    # Errors
    "TaskError",
    "TaskErrorKind",
    "ValidationFailedError",
    "NotFoundError",
    "StorageError",
    # Config models
    "AppConfig",
    "StorageConfig",
    "OutputConfig",
    "LoggingConfig",
]
