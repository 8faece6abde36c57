"""Command 'delete' of todopad"""

from typing import Annotated

import typer

from todopad.bootstrap import get_app_context
from todopad.utils.ui.formatters import format_success

from .common import find_task, load_tasks, run_operation
from .decorators import command_wrapper

app = typer.Typer()


@app.command("delete")
@command_wrapper
async def delete(
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Delete a task permanently."""
    ctx = get_app_context()
    try:
        await load_tasks(ctx)
        task = find_task(ctx, task_id)
        if not yes:
            typer.confirm(f"Delete '{task.title}'?", abort=True)
        await run_operation(ctx, ctx.manager.delete_task(task))
    finally:
        ctx.close()

    format_success(f"Deleted: {task.title}")
