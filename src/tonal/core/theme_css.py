"""
Theme stylesheet assembly.

Turns a PaletteSpec into a ready-to-serve ``:root`` block: the generated
palette variables followed by any alias scales mapped onto them.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .css_export import (
    generate_alias_variables,
    generate_css_variables,
    generate_css_variables_data,
    render_root_block,
)
from .ir.palettespec import PaletteSpecYAML
from .palette import generate_palette

logger = logging.getLogger(__name__)

GENERATED_COMMENT = "AUTOMATED - regenerate with `tonal build`"


def build_theme_css(spec: PaletteSpecYAML) -> str:
    """Render the full theme stylesheet for ``spec``."""
    result = generate_palette(spec.palette.to_request())
    options = spec.export.to_options()

    blocks = [generate_css_variables(result, options)]
    if spec.export.aliases:
        data = generate_css_variables_data(result, options)
        for alias in spec.export.aliases:
            records = data.get(alias.scale)
            if not records:
                logger.warning(f"Alias '{alias.alias}' refers to unknown scale '{alias.scale}'")
                continue
            blocks.append(
                generate_alias_variables(
                    records,
                    alias.alias,
                    namespace=alias.namespace,
                    steps=alias.steps,
                    reverse=alias.reverse,
                )
            )
    return render_root_block(*blocks, comment=GENERATED_COMMENT)


def write_theme_css(
    project_root: Path, spec: PaletteSpecYAML, output: Path | None = None
) -> Path:
    """Build the stylesheet and write it (default: ``export.output``).

    Returns:
        Path to the written file.
    """
    path = output or Path(spec.export.output)
    if not path.is_absolute():
        path = project_root / path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_theme_css(spec), encoding="utf-8")
    logger.info(f"theme css written to {path}")
    return path
