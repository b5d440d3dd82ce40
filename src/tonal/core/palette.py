"""
Palette generation entry point.

request -> primary / surface / semantic ramps -> tonality mix on the
surface -> accessible text color on every swatch.
"""

from __future__ import annotations

import logging

from .colors import RGBA, WHITE, try_parse_color
from .contrast import choose_text_color
from .ir.palette import PaletteRequest, PaletteResult, Swatch
from .primary import make_primary_swatches
from .semantic import make_semantic_swatches
from .surface import make_surface_swatches
from .tonality import mix_surface_with_primary

logger = logging.getLogger(__name__)


def _with_text(swatches: list[Swatch], fallback: RGBA) -> list[Swatch]:
    return [
        s.model_copy(update={"text_color": choose_text_color(s.color, fallback)})
        for s in swatches
    ]


def generate_palette(request: PaletteRequest) -> PaletteResult:
    """Generate every requested scale with text colors attached.

    Args:
        request: Palette request. Only ``primary`` is required.

    Returns:
        PaletteResult; ``surface`` and ``semantics`` are None when their
        inputs were not supplied.
    """
    light_mode = request.light_mode
    primary = make_primary_swatches(request.primary, light_mode)

    surface: list[Swatch] | None = None
    if request.surface:
        opts = request.surface_options
        surface = make_surface_swatches(
            request.surface,
            light_mode,
            light_mode_darken_span=opts.light_mode_darken_span,
            dark_mode_lighten_span=opts.dark_mode_lighten_span,
        )
        surface = mix_surface_with_primary(surface, primary, request.tonality_mix)

    semantics = make_semantic_swatches(request.semantics, light_mode) or None

    # Brand color offered as text when neither white nor black reaches AA
    fallback = try_parse_color(request.primary) or WHITE

    logger.debug(
        f"Generated palette: primary={len(primary)} surface={len(surface or [])} "
        f"semantics={sorted(semantics or {})}"
    )
    return PaletteResult(
        primary=_with_text(primary, fallback),
        surface=_with_text(surface, fallback) if surface is not None else None,
        semantics=(
            {name: _with_text(scale, fallback) for name, scale in semantics.items()}
            if semantics
            else None
        ),
    )
