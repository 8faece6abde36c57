"""Command 'clear' of todopad"""

from typing import Annotated

import typer

from todopad.bootstrap import get_app_context
from todopad.utils.ui.formatters import format_info, format_success

from .common import load_tasks, run_operation
from .decorators import command_wrapper

app = typer.Typer()


@app.command("clear")
@command_wrapper
async def clear(
    all_tasks: Annotated[
        bool,
        typer.Option("--all/--completed", help="Remove every task, or only completed ones"),
    ] = False,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Remove completed tasks (default) or every task."""
    ctx = get_app_context()
    try:
        tasks = await load_tasks(ctx)
        doomed = tasks if all_tasks else [t for t in tasks if t.completed]
        if not doomed:
            format_info("Nothing to clear")
            return

        what = "all" if all_tasks else "completed"
        if not yes:
            typer.confirm(f"Remove {len(doomed)} {what} task(s)?", abort=True)

        if all_tasks:
            operation = ctx.manager.clear_all()
        else:
            operation = ctx.manager.clear_completed()
        await run_operation(ctx, operation)
    finally:
        ctx.close()

    format_success(f"Removed {len(doomed)} {what} task(s)")
