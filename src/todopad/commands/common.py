"""Helpers shared by the task commands."""

import asyncio

from todopad.bootstrap import AppContext
from todopad.models import Task
from todopad.utils.exit_codes import ERROR_INVALID_ARGS
from todopad.utils.task_helpers import resolve_task

from .decorators import AppError


async def load_tasks(ctx: AppContext) -> list[Task]:
    """Load the stored tasks into the manager, raising the failure if any."""
    if not await ctx.manager.load():
        raise ctx.error_handler.last_error
    return ctx.manager.tasks


async def run_operation(ctx: AppContext, operation: asyncio.Task) -> None:
    """Wait for a manager operation and raise the error it reported."""
    if not await operation:
        raise ctx.error_handler.last_error


def find_task(ctx: AppContext, task_ref: str) -> Task:
    """Look up a loaded task by id or unique id suffix."""
    try:
        return resolve_task(ctx.manager.tasks, task_ref)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
