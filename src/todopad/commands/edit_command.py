"""Command 'edit' of todopad"""

from datetime import datetime
from typing import Annotated

import typer

from todopad.bootstrap import get_app_context
from todopad.models import Priority, TaskError, TaskErrorKind, ValidationFailedError
from todopad.services.form_validation import TaskForm
from todopad.utils.ui.formatters import format_output, format_success

from .add_command import DATE_FORMATS
from .common import find_task, load_tasks, run_operation
from .decorators import command_wrapper

app = typer.Typer()


def _target_schedule(
    current_daily: bool,
    daily: bool | None,
    due_given: bool,
    daily_given: bool,
) -> bool:
    """Decide whether the edited task is daily."""
    if due_given and (daily_given or daily is True):
        raise TaskError(
            TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS,
            "A task is either daily or has a due date, not both",
        )
    if daily is not None:
        return daily
    if daily_given:
        return True
    if due_given:
        return False
    return current_daily


@app.command("edit")
@command_wrapper
async def edit(
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="New title")] = None,
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="New description")
    ] = None,
    priority: Annotated[
        Priority | None,
        typer.Option("--priority", "-p", case_sensitive=False, help="New priority"),
    ] = None,
    due: Annotated[
        datetime | None,
        typer.Option("--due", formats=DATE_FORMATS, help="Due date (YYYY-MM-DD)"),
    ] = None,
    at: Annotated[str | None, typer.Option("--at", help="Due time (HH:MM)")] = None,
    no_due: Annotated[
        bool, typer.Option("--no-due", help="Remove the due date and time")
    ] = False,
    daily: Annotated[
        bool | None, typer.Option("--daily/--no-daily", help="Make the task (not) daily")
    ] = None,
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
    """Edit a task's fields. Options that are not given keep their value."""
    ctx = get_app_context()
    try:
        tasks = await load_tasks(ctx)
        task = find_task(ctx, task_id)

        form = TaskForm(
            existing_tasks=tasks, validator=ctx.validator, editing=task
        )
        if title is not None:
            form.title = title
        if description is not None:
            form.description = description
        if priority is not None:
            form.priority = priority

        is_daily = _target_schedule(
            task.is_daily,
            daily,
            due_given=due is not None or at is not None,
            daily_given=daily_time is not None or until is not None,
        )
        if is_daily != task.is_daily:
            form.is_daily = is_daily
        if no_due:
            form.due_time = None
            form.due_date = None
        if due is not None:
            form.due_date = due
        if at is not None:
            form.due_time = at
        if daily_time is not None:
            form.daily_time = daily_time
        if until is not None:
            form.daily_end_date = until

        if form.has_validation_errors:
            raise ValidationFailedError(form.validate_all())

        updated = form.build_task()
        await run_operation(ctx, ctx.manager.update_task(updated))
    finally:
        ctx.close()

    if output in ("json", "yaml"):
        format_output(updated.model_dump(mode="json"), output)
        return
    format_success(f"Updated: {updated.title}")
