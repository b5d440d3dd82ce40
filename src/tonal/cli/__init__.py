"""
tonal CLI package.

- palette.py: generate, contrast
- project.py: init, build (palettespec.yaml)
- utils.py: Shared utilities
"""

import typer

from tonal.cli.palette import contrast_command, generate_command
from tonal.cli.project import build_command, init_command
from tonal.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""tonal – perceptual color scales for design tokens

Command Types:
  • Palette: generate, contrast
    → Work directly on colors given on the command line

  • Project: init, build
    → Operate on palettespec.yaml in the project directory
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """tonal CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="generate")(generate_command)
app.command(name="contrast")(contrast_command)
app.command(name="init")(init_command)
app.command(name="build")(build_command)


def main() -> None:
    app()


__all__ = ["app", "main", "version_callback"]
