"""Main entry point for todopad."""

import typer

from todopad.commands import (
    add_command,
    clear_command,
    config_command,
    delete_command,
    edit_command,
    list_command,
    stats_command,
    toggle_command,
    version_command,
)
from todopad.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="todopad",
    cls=SuggestingGroup,
    help="A small personal task tracker for the terminal",
    no_args_is_help=True,
)

# Top-level verbs
app.add_typer(add_command.app)
app.add_typer(list_command.app)
app.add_typer(edit_command.app)
app.add_typer(toggle_command.app)
app.add_typer(delete_command.app)
app.add_typer(clear_command.app)
app.add_typer(stats_command.app)
app.add_typer(version_command.app)

app.add_typer(config_command.app, name="config", help="Configuration management")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
