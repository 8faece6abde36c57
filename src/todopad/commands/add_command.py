"""Command 'add' of todopad"""

from datetime import datetime
from typing import Annotated

import typer

from todopad.bootstrap import get_app_context
from todopad.models import Priority, TaskError, TaskErrorKind, ValidationFailedError
from todopad.services.form_validation import TaskForm
from todopad.utils.ui.console import get_console
from todopad.utils.ui.formatters import format_output, format_success

from .common import load_tasks, run_operation
from .decorators import command_wrapper

app = typer.Typer()
console = get_console()

DATE_FORMATS = ["%Y-%m-%d"]


@app.command("add")
@command_wrapper
async def add(
    title: Annotated[str, typer.Argument(help="Task title")],
    description: Annotated[
        str, typer.Option("--description", "-d", help="Longer description")
    ] = "",
    priority: Annotated[
        Priority,
        typer.Option("--priority", "-p", case_sensitive=False, help="Task priority"),
    ] = Priority.MEDIUM,
    due: Annotated[
        datetime | None,
        typer.Option("--due", formats=DATE_FORMATS, help="Due date (YYYY-MM-DD)"),
    ] = None,
    at: Annotated[
        str | None, typer.Option("--at", help="Due time (HH:MM), needs --due")
    ] = None,
    daily: Annotated[bool, typer.Option("--daily", help="Repeat every day")] = False,
    daily_time: Annotated[
        str | None, typer.Option("--daily-time", help="Time of day for a daily task")
    ] = None,
    until: Annotated[
        datetime | None,
        typer.Option("--until", formats=DATE_FORMATS, help="Last day of a daily task"),
    ] = None,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format (pretty/json/yaml)")
    ] = "pretty",
) -> None:
    """
    Add a task.

    Examples:
      todopad add "Buy milk"
      todopad add "Send report" --due 2024-06-03 --at 17:00 -p high
      todopad add "Stretch" --daily --daily-time 07:30 --until 2024-12-31
    """
    is_daily = daily or daily_time is not None or until is not None
    if is_daily and (due is not None or at is not None):
        raise TaskError(
            TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS,
            "A task is either daily or has a due date, not both",
        )

    ctx = get_app_context()
    try:
        tasks = await load_tasks(ctx)

        form = TaskForm(existing_tasks=tasks, validator=ctx.validator)
        form.title = title
        form.description = description
        form.priority = priority
        if is_daily:
            form.is_daily = True
            form.daily_time = daily_time
            form.daily_end_date = until
        else:
            form.due_date = due
            form.due_time = at

        if not form.is_form_valid:
            raise ValidationFailedError(form.validate_all())

        task = form.build_task()
        await run_operation(ctx, ctx.manager.add_task(task))
    finally:
        ctx.close()

    if output in ("json", "yaml"):
        format_output(task.model_dump(mode="json"), output)
        return
    format_success(f"Created: {task.title}")
    console.print(f"[dim]ID: {task.id}[/dim]")
