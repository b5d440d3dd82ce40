"""
Palette commands: generate, contrast.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table
from rich.text import Text

from tonal.core.colors import parse_color, try_parse_color
from tonal.core.contrast import choose_text_color, contrast_ratio, wcag_level
from tonal.core.css_export import generate_css_variables
from tonal.core.dtcg_export import generate_dtcg_tokens
from tonal.core.errors import TonalError
from tonal.core.ir import CssVariableOptions, PaletteRequest, PaletteResult, SemanticColors
from tonal.core.palette import generate_palette

from .utils import console, fail


class OutputFormat(str, Enum):
    css = "css"
    json = "json"
    dtcg = "dtcg"
    table = "table"


def _swatch_cell(color: str) -> Text:
    parsed = try_parse_color(color)
    if parsed is None:
        return Text("??")
    c = parsed.rounded()
    return Text("    ", style=f"on rgb({int(c.r)},{int(c.g)},{int(c.b)})")


def _render_table(result: PaletteResult, options: CssVariableOptions) -> Table:
    table = Table(title="Palette")
    table.add_column("Scale")
    table.add_column("Label", style="dim")
    table.add_column("")
    table.add_column("Color")
    table.add_column("Text")
    table.add_column("Contrast", justify="right")

    for scale_name, swatches in result.scales(options.primary_name, options.surface_name).items():
        for swatch in swatches:
            ratio = ""
            bg = try_parse_color(swatch.color)
            fg = try_parse_color(swatch.text_color) if swatch.text_color else None
            if bg is not None and fg is not None:
                r = contrast_ratio(bg, fg)
                ratio = f"{r:.2f} {wcag_level(r)}"
            table.add_row(
                scale_name,
                swatch.label,
                _swatch_cell(swatch.color),
                swatch.color,
                swatch.text_color or "",
                ratio,
            )
    return table


def _render(result: PaletteResult, fmt: OutputFormat, options: CssVariableOptions) -> str:
    if fmt == OutputFormat.css:
        return generate_css_variables(result, options) + "\n"
    if fmt == OutputFormat.dtcg:
        return json.dumps(generate_dtcg_tokens(result, options), indent=2) + "\n"
    return json.dumps(result.model_dump(mode="json", exclude_none=True), indent=2) + "\n"


def generate_command(
    primary: Annotated[str, typer.Argument(help="Brand color, e.g. '#ed0707'")],
    surface: Annotated[
        str | None, typer.Option("--surface", "-s", help="Surface (background) base color")
    ] = None,
    light: Annotated[bool, typer.Option("--light", help="Light mode (darkening ramps)")] = False,
    mix: Annotated[
        float,
        typer.Option("--mix", min=0.0, max=1.0, help="Tonality mix of surface toward primary"),
    ] = 0.0,
    success: Annotated[str | None, typer.Option("--success", help="Success base color")] = None,
    warning: Annotated[str | None, typer.Option("--warning", help="Warning base color")] = None,
    danger: Annotated[str | None, typer.Option("--danger", help="Danger base color")] = None,
    info: Annotated[str | None, typer.Option("--info", help="Info base color")] = None,
    fmt: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.css,
    prefix: Annotated[str, typer.Option("--prefix", help="CSS variable prefix")] = "clr",
    no_prefix: Annotated[bool, typer.Option("--no-prefix", help="Drop the prefix")] = False,
    no_text: Annotated[
        bool, typer.Option("--no-text", help="Omit the on-* text color variables")
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write to file instead of stdout")
    ] = None,
) -> None:
    """Generate a palette and print it as CSS, JSON, DTCG tokens or a table."""
    semantics = SemanticColors(success=success, warning=warning, danger=danger, info=info)
    request = PaletteRequest(
        primary=primary,
        surface=surface,
        light_mode=light,
        tonality_mix=mix,
        semantics=semantics if semantics.provided() else None,
    )
    options = CssVariableOptions(prefix=None if no_prefix else prefix, include_text=not no_text)

    try:
        for value in (primary, surface, *semantics.provided().values()):
            if value:
                parse_color(value)
        result = generate_palette(request)
    except TonalError as e:
        raise fail(e.message) from e

    if fmt == OutputFormat.table:
        if output is not None:
            raise fail("--output is not supported with --format table")
        console.print(_render_table(result, options))
        return

    rendered = _render(result, fmt, options)
    if output is None:
        typer.echo(rendered, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    console.print(f"[green]✓[/green] Wrote {fmt.value} palette to {output}")


def contrast_command(
    background: Annotated[str, typer.Argument(help="Background color")],
    foreground: Annotated[
        str | None, typer.Argument(help="Foreground color; omitted = pick one")
    ] = None,
) -> None:
    """Report the WCAG contrast ratio, or pick an accessible text color."""
    try:
        bg = parse_color(background)
        if foreground is None:
            text = choose_text_color(bg)
            fg = parse_color(text)
        else:
            text = None
            fg = parse_color(foreground)
    except TonalError as e:
        raise fail(e.message) from e

    ratio = contrast_ratio(bg, fg)
    level = wcag_level(ratio)
    if text is not None:
        typer.echo(f"Text color: {text}")
    style = "green" if level in ("AAA", "AA") else "yellow" if level == "AA Large" else "red"
    console.print(f"Contrast: {ratio:.2f}:1 [{style}]{level}[/{style}]")
