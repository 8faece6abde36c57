"""Command 'stats' of todopad"""

from typing import Annotated

import typer
from rich.panel import Panel
from rich.table import Table

from todopad.bootstrap import get_app_context
from todopad.utils.ui.console import get_console
from todopad.utils.ui.formatters import (
    format_output,
    get_completion_color,
    get_progress_bar,
)

from .common import load_tasks
from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("stats")
@command_wrapper
async def stats(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format (pretty/json/yaml)")
    ] = "pretty",
) -> None:
    """Show task counts and the completion percentage."""
    ctx = get_app_context()
    try:
        tasks = await load_tasks(ctx)
        manager = ctx.manager
        data = {
            "total": len(tasks),
            "pending": len(manager.pending_tasks),
            "completed": len(manager.completed_tasks),
            "daily": len(manager.daily_tasks),
            "completion_percentage": round(manager.completion_percentage * 100, 1),
        }
    finally:
        ctx.close()

    if output in ("json", "yaml"):
        format_output(data, output)
        return

    percentage = data["completion_percentage"]
    color = get_completion_color(percentage)

    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Total", str(data["total"]))
    table.add_row("Pending", str(data["pending"]))
    table.add_row("Completed", str(data["completed"]))
    table.add_row("Daily", str(data["daily"]))
    table.add_row(
        "Done",
        f"[{color}]{get_progress_bar(percentage)} {percentage:.1f}%[/{color}]",
    )
    console.print(Panel(table, title="📊 Task Stats", expand=False))
