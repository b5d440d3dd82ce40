"""
Surface (neutral background) scale generation.

Dark mode progressively lightens the base, light mode progressively
darkens it, each step sized by an eased curve that front-loads change.
Every swatch in a scale renders differently: a swatch that rounds to an
already emitted color is nudged until it is unique.
"""

from __future__ import annotations

import logging

from .colors import BLACK, RGBA, darken, hsl_lightness, lighten, nudge, try_parse_color
from .ir.palette import DARK_MODE_LIGHTEN_SPAN, LIGHT_MODE_DARKEN_SPAN, Swatch
from .labels import make_scale_labels

logger = logging.getLogger(__name__)

SURFACE_SCALE_SIZE = 10

# Extra push applied when two steps collide after rounding.
LIGHT_MODE_DUPLICATE_NUDGE = 0.02
DARK_MODE_DUPLICATE_NUDGE = 0.1

# Retry budget, in accumulated nudge amount
DUPLICATE_NUDGE_BUDGET = 5.0


def step_progress(i: int, count: int) -> float:
    """Eased 0..1 position of step ``i``: heavy early change, gentle tail."""
    if count <= 1:
        return 0.0
    t = i / (count - 1)
    eased = (t / 0.6) ** 0.85 * 0.6 if t < 0.6 else 0.6 + (t - 0.6) * 0.4
    return min(1.0, eased)


def _dedupe(color: RGBA, seen: set[str], light_mode: bool) -> str:
    """Nudge ``color`` until its rounded form is not in ``seen``."""
    css = color.to_css()
    step = LIGHT_MODE_DUPLICATE_NUDGE if light_mode else DARK_MODE_DUPLICATE_NUDGE
    lighter = not light_mode
    spent = 0.0
    while css in seen and spent < DUPLICATE_NUDGE_BUDGET:
        # Saturated in the preferred direction: turn around.
        lightness = hsl_lightness(color)
        if lighter and lightness >= 1.0:
            lighter = False
        elif not lighter and lightness <= 0.0:
            lighter = True
        spent += step
        color = nudge(color, step, lighter=lighter)
        css = color.to_css()
    if css in seen:
        logger.debug(f"Duplicate surface swatch {css} after exhausting nudge budget")
    return css


def make_surface_swatches(
    color: str,
    light_mode: bool = False,
    *,
    light_mode_darken_span: float = LIGHT_MODE_DARKEN_SPAN,
    dark_mode_lighten_span: float = DARK_MODE_LIGHTEN_SPAN,
    count: int = SURFACE_SCALE_SIZE,
) -> list[Swatch]:
    """Generate the neutral surface ramp.

    Args:
        color: Base color string. Unparsable input falls back to black.
        light_mode: Darken the base instead of lightening it.
        light_mode_darken_span: Total darkening across the ramp.
        dark_mode_lighten_span: Total lightening across the ramp.
        count: Number of swatches.

    Returns:
        ``count`` swatches with pairwise distinct colors.
    """
    parsed = try_parse_color(color)
    if parsed is None:
        logger.warning(f"Unparsable surface color {color!r}, falling back to black")
        parsed = BLACK

    span = light_mode_darken_span if light_mode else dark_mode_lighten_span
    swatches: list[Swatch] = []
    seen: set[str] = set()
    for i, label in enumerate(make_scale_labels(count)):
        if i == 0:
            c = parsed
        else:
            f = step_progress(i, count) * span
            c = darken(parsed, f) if light_mode else lighten(parsed, f)
        css = _dedupe(c.rounded(), seen, light_mode)
        seen.add(css)
        swatches.append(Swatch(label=label, color=css))
    return swatches
