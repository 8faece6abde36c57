"""
Exit codes for todopad.

Scripts can use these semantic codes to tell what kind of failure happened.
"""

from todopad.models import TaskErrorKind

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Storage could not be read or written
ERROR_STORAGE = 3

# Resource not found
ERROR_NOT_FOUND = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_STORAGE: "ERROR_STORAGE",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    }
    return code_names.get(code, f"UNKNOWN({code})")


_KIND_EXIT_CODES = {
    TaskErrorKind.INVALID_TITLE: ERROR_INVALID_ARGS,
    TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS: ERROR_INVALID_ARGS,
    TaskErrorKind.DUE_DATE_AFTER_DAILY_END: ERROR_INVALID_ARGS,
    TaskErrorKind.VALIDATION_FAILED: ERROR_INVALID_ARGS,
    TaskErrorKind.NOT_FOUND: ERROR_NOT_FOUND,
    TaskErrorKind.SAVE_FAILED: ERROR_STORAGE,
    TaskErrorKind.LOAD_FAILED: ERROR_STORAGE,
    TaskErrorKind.DELETE_FAILED: ERROR_STORAGE,
    TaskErrorKind.UPDATE_FAILED: ERROR_STORAGE,
    TaskErrorKind.UNEXPECTED: ERROR_GENERAL,
}


def exit_code_for(kind: TaskErrorKind) -> int:
    """Map a task error kind to the exit code the CLI returns for it."""
    return _KIND_EXIT_CODES.get(kind, ERROR_GENERAL)
