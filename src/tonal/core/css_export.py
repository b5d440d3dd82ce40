"""
CSS custom property export for generated palettes.

Naming mirrors common design token patterns:
 - ``--clr-primary-a0`` for a primary scale swatch
 - ``--clr-on-primary-a0`` for its accessible text color ("on-" as in
   Material Design)
 - ``--clr-surface-a0`` / ``--clr-on-surface-a0`` for the surface scale
 - semantic scales under their own names (``--clr-success-a30``)

The root prefix can be changed or dropped, the primary/surface display
names renamed, text variables left out, or the whole scheme replaced by
a formatter.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .ir.palette import CssVariableOptions, PaletteResult, Swatch, TokenRecord, VariableParts

Scales = PaletteResult | Mapping[str, list[Swatch]]


def _resolve_scales(scales: Scales, options: CssVariableOptions) -> dict[str, list[Swatch]]:
    if isinstance(scales, PaletteResult):
        return scales.scales(options.primary_name, options.surface_name)
    return {name: swatches for name, swatches in scales.items() if swatches}


def variable_name(parts: VariableParts, options: CssVariableOptions) -> str:
    """Full variable name (with leading ``--``) for one swatch entry."""
    if options.formatter is not None:
        return options.formatter(parts)
    root = f"{parts.prefix}-" if parts.prefix else ""
    on = "on-" if parts.is_text else ""
    return f"--{root}{on}{parts.scale}-{parts.label}"


def _entries(
    scales: Scales, options: CssVariableOptions
) -> Iterable[tuple[str, Swatch, str, str | None]]:
    """Yield (scale name, swatch, background var, text var or None)."""
    for scale_name, swatches in _resolve_scales(scales, options).items():
        for swatch in swatches:
            bg = variable_name(
                VariableParts(
                    scale=scale_name, label=swatch.label, is_text=False, prefix=options.prefix
                ),
                options,
            )
            text = None
            if options.include_text and swatch.text_color:
                text = variable_name(
                    VariableParts(
                        scale=scale_name, label=swatch.label, is_text=True, prefix=options.prefix
                    ),
                    options,
                )
            yield scale_name, swatch, bg, text


def generate_css_variables(scales: Scales, options: CssVariableOptions | None = None) -> str:
    """Render scales as ``--name: value;`` declaration lines.

    Args:
        scales: A PaletteResult, or scales keyed by name.
        options: Naming options.

    Returns:
        Declarations joined by newlines, primary then surface then
        semantic scales.
    """
    options = options or CssVariableOptions()
    lines: list[str] = []
    for _scale, swatch, bg, text in _entries(scales, options):
        lines.append(f"{bg}: {swatch.color};")
        if text is not None:
            lines.append(f"{text}: {swatch.text_color};")
    return "\n".join(lines)


def generate_css_variables_data(
    scales: Scales, options: CssVariableOptions | None = None
) -> dict[str, list[TokenRecord]]:
    """Same naming as ``generate_css_variables`` as a table of records.

    Variable names are stripped of the leading ``--``.
    """
    options = options or CssVariableOptions()
    data: dict[str, list[TokenRecord]] = {}
    for scale_name, swatch, bg, text in _entries(scales, options):
        data.setdefault(scale_name, []).append(
            TokenRecord(
                background=bg.removeprefix("--"),
                background_value=swatch.color,
                text=text.removeprefix("--") if text is not None else None,
                text_value=swatch.text_color if text is not None else None,
                label=swatch.label,
                scale=scale_name,
                prefix=options.prefix,
            )
        )
    return data


def generate_alias_variables(
    records: list[TokenRecord],
    alias: str,
    *,
    namespace: str,
    steps: int = 12,
    reverse: bool = True,
) -> str:
    """Map a scale onto an external N-step alias scale.

    Generated scales run from the base (a0) toward the light/dark end;
    alias scales usually expect lightest first, hence ``reverse``. When
    the alias scale has more steps than the source, the last entry is
    repeated.

    Example:
        ``--puck-color-rose-01: var(--clr-primary-a90);``
    """
    if not records or steps <= 0:
        return ""
    ordered = list(reversed(records)) if reverse else list(records)
    ordered = ordered[:steps]
    ordered += [ordered[-1]] * (steps - len(ordered))
    width = max(2, len(str(steps)))
    return "\n".join(
        f"--{namespace}-{alias}-{str(i + 1).zfill(width)}: var(--{record.background});"
        for i, record in enumerate(ordered)
    )


def render_root_block(*blocks: str, comment: str | None = None) -> str:
    """Wrap declaration blocks in a ``:root { ... }`` rule."""
    lines = [":root {"]
    if comment:
        lines.append(f"  /* {comment} */")
    for block in blocks:
        for line in block.splitlines():
            if line.strip():
                lines.append(f"  {line}")
    lines.append("}")
    return "\n".join(lines) + "\n"
