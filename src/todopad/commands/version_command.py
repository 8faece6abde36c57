"""Command 'version' of todopad"""

import typer

from todopad import __version__
from todopad.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command("version")
def version() -> None:
    """Show version information"""
    console.print(f"todopad {__version__}")
