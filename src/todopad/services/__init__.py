"""Service layer for todopad.

The services hold the business rules: validation, filtering and sorting, the
use-case layer over the repository, and the in-memory task manager.
"""

from .error_handler import ErrorHandler
from .task_manager import TaskManager
from .task_service import TaskService
from .validator import TaskValidator

__all__ = [
    "ErrorHandler",
    "TaskManager",
    "TaskService",
    "TaskValidator",
]
