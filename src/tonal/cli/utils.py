"""
tonal CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from tonal._version import get_version

console = Console()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        try:
            import tonal

            install_location = Path(tonal.__file__).parent
        except Exception:
            install_location = Path.cwd()

        typer.echo(f"tonal version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def fail(message: str) -> typer.Exit:
    """Print an error in red and return the exit to raise."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(code=1)
