"""Command 'toggle' of todopad"""

from typing import Annotated

import typer

from todopad.bootstrap import get_app_context
from todopad.utils.ui.console import get_console
from todopad.utils.ui.formatters import format_success

from .common import find_task, load_tasks, run_operation
from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("toggle")
@command_wrapper
async def toggle(
    task_ids: Annotated[
        list[str], typer.Argument(help="Task ID(s) or suffix(es) - can specify multiple")
    ],
) -> None:
    """Mark tasks completed, or reopen tasks that are already completed."""
    ctx = get_app_context()
    try:
        await load_tasks(ctx)
        for task_ref in task_ids:
            task = find_task(ctx, task_ref)
            await run_operation(ctx, ctx.manager.toggle_completion(task))
            toggled = ctx.manager.get_task(task.id)

            title = toggled.title
            if len(title) > 60:
                title = title[:57] + "..."
            if toggled.completed:
                format_success(f"✓ Completed: {title}")
                console.print(f"[dim]To undo: todopad toggle {task_ref}[/dim]")
            else:
                format_success(f"Reopened: {title}")
    finally:
        ctx.close()
