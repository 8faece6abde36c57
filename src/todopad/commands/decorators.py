"""Decorators for command functions."""

import asyncio
import functools
import time
import traceback
from collections.abc import Callable

import typer

from todopad.models import TaskError, ValidationFailedError
from todopad.services.error_handler import VALIDATION_HINTS, recovery_hint_for
from todopad.utils.exit_codes import ERROR_GENERAL, exit_code_for
from todopad.utils.logger import get_logger
from todopad.utils.ui.console import get_console
from todopad.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _report_task_error(error: TaskError) -> None:
    console = get_console()
    if isinstance(error, ValidationFailedError):
        format_error("Task is invalid")
        for issue in error.result.errors:
            console.print(f"  [red]•[/red] {issue}: {VALIDATION_HINTS[issue.kind]}")
        return
    format_error(str(error))
    console.print(f"[dim]{recovery_hint_for(error)}[/dim]")


def command_wrapper(func: Callable):
    """Wrap a command: run it (async or not), log it and map errors to exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if asyncio.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except TaskError as e:
            elapsed = time.monotonic() - start
            logger.warning(
                "command failed: %s (%.3fs) - %s: %s", cmd, elapsed, e.kind.value, e
            )
            _report_task_error(e)
            raise typer.Exit(code=exit_code_for(e.kind)) from e

        except (typer.Exit, typer.Abort):
            # Typer's own exits (--help, explicit Exit, declined confirmations)
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
