"""Configuration management commands."""

from enum import Enum
from typing import Annotated

import typer
from pydantic import BaseModel

from todopad.services.config_service import get_config_service
from todopad.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from todopad.utils.ui.console import get_console
from todopad.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | bool | None:
    """Convert a command-line string to the closest JSON scalar."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("null", "none"):
        return None
    if value.isdigit():
        return int(value)
    return value


@app.command("show")
@command_wrapper
def show_config(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format (pretty/json/yaml)")
    ] = "yaml",
) -> None:
    """Show the current configuration."""
    config_svc = get_config_service()
    format_output(config_svc.config.model_dump(mode="json"), output)
    console.print(f"[dim]{config_svc.config_path}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., output.format)")],
) -> None:
    """Get a configuration value."""
    config_svc = get_config_service()
    if not config_svc.is_known_key(key):
        raise AppError(f"Configuration key '{key}' not found", exit_code=ERROR_NOT_FOUND)
    value = config_svc.get(key)
    if isinstance(value, BaseModel):
        format_output(value.model_dump(mode="json"), "yaml")
    elif isinstance(value, Enum):
        console.print(value.value)
    else:
        console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., output.format)")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError as e:
        raise AppError(e.args[0], exit_code=ERROR_NOT_FOUND) from e
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Annotated[
        str | None, typer.Argument(help="Configuration key to reset (all if omitted)")
    ] = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all configuration"
        typer.confirm(f"Reset {target} to defaults?", abort=True)
    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(e.args[0], exit_code=ERROR_NOT_FOUND) from e
    format_success(f"Reset {key or 'configuration'} to defaults")
