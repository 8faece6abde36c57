"""Command 'list' of todopad"""

from typing import Annotated

import typer

from todopad.bootstrap import get_app_context
from todopad.models import TaskFilter
from todopad.services.task_filters import sort_tasks
from todopad.utils.ui.formatters import format_tasks

from .common import load_tasks
from .decorators import command_wrapper

app = typer.Typer()


@app.command("list")
@command_wrapper
async def list_tasks(
    task_filter: Annotated[
        TaskFilter | None,
        typer.Option(
            "--filter",
            "-f",
            case_sensitive=False,
            help="Which tasks to show (defaults to the configured filter)",
        ),
    ] = None,
    show_all: Annotated[
        bool, typer.Option("--all", "-a", help="Show every task regardless of filter")
    ] = False,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Output format (pretty/table/json/yaml)"),
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
    compact: Annotated[
        bool | None, typer.Option("--compact/--full", help="One line per task")
    ] = None,
) -> None:
    """List tasks sorted by due date, due time and priority."""
    ctx = get_app_context()
    try:
        tasks = await load_tasks(ctx)
        if show_all:
            visible = sort_tasks(tasks)
        else:
            ctx.manager.set_filter(task_filter or ctx.config.default_filter)
            visible = ctx.manager.filtered_tasks
    finally:
        ctx.close()

    output_config = ctx.config.output
    if json_opt:
        output = "json"
    format_tasks(
        visible,
        output or output_config.format,
        compact=output_config.compact if compact is None else compact,
        all_task_ids=[t.id for t in tasks],
    )
