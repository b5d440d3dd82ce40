"""
Semantic (status) scales: success, warning, danger, info.

Each supplied slot gets a moderated primary ramp; slots that were not
supplied are simply absent from the result.
"""

from __future__ import annotations

from collections.abc import Mapping

from .ir.palette import SEMANTIC_NAMES, SemanticColors, Swatch
from .primary import make_primary_swatches

# Used when scaffolding a configuration; never injected by the generator.
SEMANTIC_DEFAULTS: dict[str, str] = {
    "success": "#22946E",
    "warning": "#A87A2A",
    "danger": "#9C2121",
    "info": "#21498A",
}


def make_semantic_swatches(
    semantics: SemanticColors | Mapping[str, str | None] | None,
    light_mode: bool = False,
    *,
    hue_shift_scale: float | None = None,
    endcap_lightness_dark: float | None = None,
    endcap_lightness_light: float | None = None,
) -> dict[str, list[Swatch]]:
    """Generate a semantic-mode ramp for every supplied status color.

    Args:
        semantics: Status colors by slot name. Missing, None or empty
            values produce no entry.
        light_mode: Darken toward the moderated dark end.
        hue_shift_scale: Override for the semantic hue drift multiplier.
        endcap_lightness_dark: Override for the lightening end (dark mode).
        endcap_lightness_light: Override for the darkening end (light mode).

    Returns:
        Scales keyed by slot name, in success/warning/danger/info order.
    """
    if semantics is None:
        return {}
    if isinstance(semantics, SemanticColors):
        provided = semantics.provided()
    else:
        provided = {name: value for name in SEMANTIC_NAMES if (value := semantics.get(name))}

    return {
        name: make_primary_swatches(
            color,
            light_mode,
            semantic=True,
            hue_shift_scale=hue_shift_scale,
            endcap_lightness_dark=endcap_lightness_dark,
            endcap_lightness_light=endcap_lightness_light,
        )
        for name, color in provided.items()
    }
