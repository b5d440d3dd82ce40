"""
W3C Design Token Community Group (DTCG) tokens.json export.

See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .css_export import Scales, generate_css_variables_data
from .ir.palette import CssVariableOptions

logger = logging.getLogger(__name__)


def generate_dtcg_tokens(
    scales: Scales, options: CssVariableOptions | None = None
) -> dict[str, Any]:
    """Generate DTCG format color tokens.

    Scales nest under ``color.{scale}.{label}``; text colors under
    ``color.on-{scale}.{label}``. Each token also records the CSS variable
    it corresponds to in ``$extensions``.

    Args:
        scales: A PaletteResult, or scales keyed by name.
        options: Naming options (text inclusion, scale names, prefix).

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    options = options or CssVariableOptions()
    color_group: dict[str, Any] = {}

    for scale_name, records in generate_css_variables_data(scales, options).items():
        group = color_group.setdefault(scale_name, {})
        for record in records:
            group[record.label] = {
                "$type": "color",
                "$value": record.background_value,
                "$extensions": {"css-variable": f"--{record.background}"},
            }
            if record.text is not None:
                on_group = color_group.setdefault(f"on-{scale_name}", {})
                on_group[record.label] = {
                    "$type": "color",
                    "$value": record.text_value,
                    "$extensions": {"css-variable": f"--{record.text}"},
                }

    return {"color": color_group}


def export_dtcg_file(
    scales: Scales, output_path: Path, options: CssVariableOptions | None = None
) -> Path:
    """Generate DTCG tokens and write them to a JSON file.

    Returns:
        Path to the written file.
    """
    tokens = generate_dtcg_tokens(scales, options)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(tokens, indent=2),
        encoding="utf-8",
    )
    logger.info(f"Wrote DTCG tokens to {output_path}")
    return output_path
