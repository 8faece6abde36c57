"""Output formatters for different formats."""

import json
from datetime import datetime
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from todopad.models import OutputConfig, Priority, Task
from todopad.utils.ui.console import get_console

console = get_console()


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """
    Calculate minimum unique suffix length for each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> required suffix length
    """
    result = {}
    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]
            if not any(tid != task_id and tid.endswith(suffix) for tid in task_ids):
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)
    return result


def short_id(task_id: str, suffix_map: dict[str, int] | None = None) -> str:
    """Shortest displayed form of a task id."""
    if suffix_map and task_id in suffix_map:
        return task_id[-suffix_map[task_id] :]
    return task_id[-6:]


def tasks_to_data(tasks: list[Task]) -> list[dict]:
    """Dump tasks to JSON-compatible dicts."""
    return [task.model_dump(mode="json") for task in tasks]


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display plain data (dicts, lists, scalars)."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_tasks(
    tasks: list[Task],
    output_format: str = "pretty",
    compact: bool = False,
    all_task_ids: list[str] | None = None,
) -> None:
    """Display tasks in the requested format.

    Args:
        tasks: Tasks in display order
        output_format: One of pretty, table, json or yaml
        compact: One line per task in pretty mode
        all_task_ids: Ids used to compute unique suffixes (defaults to the
            displayed ids)
    """
    if output_format in ("json", "yaml"):
        format_output(tasks_to_data(tasks), output_format)
        return

    suffix_map = calculate_unique_suffixes(
        all_task_ids if all_task_ids is not None else [t.id for t in tasks]
    )
    if output_format == "table":
        format_task_table(tasks, suffix_map)
    else:
        format_tasks_pretty(tasks, compact=compact, suffix_map=suffix_map)


def format_task_table(tasks: list[Task], suffix_map: dict[str, int]) -> None:
    """Format tasks as a table."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("Done")
    table.add_column("Title")
    table.add_column("Priority")
    table.add_column("Schedule", style="cyan")

    for task in tasks:
        table.add_row(
            short_id(task.id, suffix_map),
            "✓" if task.completed else "",
            task.title,
            Text(task.priority.value, style=PRIORITY_COLORS[task.priority]),
            describe_schedule(task),
        )
    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted_key = key.replace("_", " ").title()
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif isinstance(value, dict):
            formatted_value = ", ".join(f"{k}={v}" for k, v in value.items())
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(formatted_key, formatted_value)

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================

PRIORITY_ICONS = {
    Priority.HIGH: "🔴",
    Priority.MEDIUM: "🟡",
    Priority.LOW: "🟢",
}

PRIORITY_COLORS = {
    Priority.HIGH: "bold red",
    Priority.MEDIUM: "bold yellow",
    Priority.LOW: "green",
}

STATUS_ICONS = {
    "open": "⬜",
    "completed": "☑️",
    "daily": "🔄",
}


def format_tasks_pretty(
    tasks: list[Task],
    compact: bool = False,
    suffix_map: dict[str, int] | None = None,
) -> None:
    """Format tasks in pretty format, keeping their order."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    active = [t for t in tasks if not t.completed]
    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(active)} active, {len(tasks) - len(active)} done)", style="dim")
    console.print(header)
    console.print()

    for task in tasks:
        format_task_item(task, compact=compact, indent="  ", suffix_map=suffix_map)


def format_task_item(
    task: Task,
    compact: bool = False,
    indent: str = "",
    suffix_map: dict[str, int] | None = None,
) -> None:
    """Format a single task item."""
    if task.completed:
        status_icon = STATUS_ICONS["completed"]
    elif task.is_daily:
        status_icon = STATUS_ICONS["daily"]
    else:
        status_icon = STATUS_ICONS["open"]

    title = Text(task.title, style="dim" if task.completed else "")
    line = Text(f"{indent}{status_icon} {PRIORITY_ICONS[task.priority]} ")
    line.append_text(title)

    schedule = describe_schedule(task)
    if compact:
        if schedule:
            line.append(f" • {schedule}", style="cyan")
        line.append(f" #{short_id(task.id, suffix_map)}", style="dim")
        console.print(line)
        return

    console.print(line)
    if task.description:
        console.print(Text(f"{indent}   {task.description}", style="italic"))

    meta: list[tuple[str, str]] = []
    if schedule:
        meta.append((schedule, "cyan"))
    if task.completed_at is not None:
        meta.append((f"Completed {format_timestamp(task.completed_at)}", "dim green"))
    meta.append((f"#{short_id(task.id, suffix_map)}", "dim"))

    meta_line = Text()
    meta_line.append(f"{indent}   └─ ", style="dim")
    for i, (text, style) in enumerate(meta):
        if i > 0:
            meta_line.append(" • ", style="dim")
        meta_line.append(text, style=style)
    console.print(meta_line)


def describe_schedule(task: Task) -> str:
    """Human readable schedule: due date/time or daily time/end date."""
    if task.is_daily:
        text = f"daily at {task.daily_time}" if task.daily_time else "daily"
        if task.daily_end_date is not None:
            text += f" until {task.daily_end_date.strftime('%d/%m/%Y')}"
        return text
    if task.due_date is not None:
        text = f"due {task.due_date.strftime('%d/%m/%Y %a')}"
        if task.due_time:
            text += f" {task.due_time}"
        return text
    return ""


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as HH:MM DD/MM/YYYY."""
    return value.strftime("%H:%M %d/%m/%Y")


def get_progress_bar(percentage: float) -> str:
    """Get a progress bar representation."""
    filled = int(percentage / 10)
    empty = 10 - filled
    return "▓" * filled + "░" * empty


def get_completion_color(percentage: float) -> str:
    """Get color based on completion percentage."""
    if percentage >= 80:
        return "green"
    if percentage >= 40:
        return "yellow"
    return "red"


def apply_output_config(output_config: OutputConfig) -> None:
    """Apply the configured colour setting to the shared consoles."""
    for highlight in (True, False):
        get_console(highlight).no_color = not output_config.color
