"""
Project commands for the tonal CLI.

Commands operating on a project directory holding palettespec.yaml:
- init: Scaffold palettespec.yaml
- build: Render the configured palette to a CSS file
"""

from __future__ import annotations

from pathlib import Path

import typer

from tonal.core.colors import parse_color
from tonal.core.errors import TonalError
from tonal.core.palettespec_loader import (
    PALETTESPEC_FILE,
    load_palettespec,
    scaffold_palettespec,
)
from tonal.core.theme_css import write_theme_css

from .utils import console, fail


def init_command(
    project: Path = typer.Option(
        Path("."), "--project", "-p", help="Project directory (defaults to current directory)"
    ),
    primary: str | None = typer.Option(None, "--primary", help="Brand color"),
    surface: str | None = typer.Option(None, "--surface", help="Surface base color"),
    light: bool = typer.Option(False, "--light", help="Light mode"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing palettespec.yaml"),
) -> None:
    """
    Create palettespec.yaml with default colors.

    The stock semantic colors are filled in so every status scale is
    generated out of the box.

    Examples:
        tonal init                              # Scaffold in current dir
        tonal init --primary '#ed0707' --light  # Custom brand, light theme
        tonal init --force                      # Replace an existing file
    """
    try:
        for value in (primary, surface):
            if value:
                parse_color(value)
        path = scaffold_palettespec(
            project, primary=primary, surface=surface, light_mode=light, overwrite=force
        )
    except TonalError as e:
        raise fail(e.message) from e

    if path is None:
        console.print(
            f"[yellow]{PALETTESPEC_FILE} already exists[/yellow] in {project}"
            " (use --force to overwrite)"
        )
        raise typer.Exit(code=1)
    console.print(f"[green]✓[/green] Created {path}")


def build_command(
    project: Path = typer.Option(
        Path("."), "--project", "-p", help="Project directory (defaults to current directory)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output CSS file (overrides export.output)"
    ),
) -> None:
    """Render palettespec.yaml to a :root CSS file, alias scales included."""
    try:
        spec = load_palettespec(project, use_defaults=False)
        palette = spec.palette
        for value in (palette.primary, palette.surface, *palette.semantics.provided().values()):
            if value:
                parse_color(value)
        path = write_theme_css(project, spec, output)
    except TonalError as e:
        raise fail(e.message) from e

    console.print(f"[green]✓[/green] Wrote {path}")
