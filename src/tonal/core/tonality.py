"""
Tonality mixing: tint the surface ramp toward the primary ramp.

The blend happens in linear light and is capped, so even a full user mix
only moves a surface swatch part of the way toward its primary partner.
"""

from __future__ import annotations

import logging

from .colors import RGBA, clamp01, try_parse_color
from .ir.palette import Swatch
from .oklab import linear_to_srgb, srgb_to_linear

logger = logging.getLogger(__name__)

# A user mix of 1.0 becomes an internal blend factor of this value.
TONALITY_MAX_BLEND = 0.3


def effective_mix(mix: float) -> float:
    return clamp01(mix) * TONALITY_MAX_BLEND


def mix_linear(a: RGBA, b: RGBA, weight: float) -> RGBA:
    """Move ``a`` toward ``b`` by ``weight`` in linear RGB; keeps a's alpha.

    Channels are returned unrounded.
    """
    out = []
    for ca, cb in zip(a.unit(), b.unit(), strict=True):
        la = srgb_to_linear(ca)
        lb = srgb_to_linear(cb)
        out.append(clamp01(linear_to_srgb(la + (lb - la) * weight)))
    return RGBA.from_unit(*out, alpha=a.alpha)


def mix_surface_with_primary(
    surface: list[Swatch], primary: list[Swatch], mix: float
) -> list[Swatch]:
    """Blend each surface swatch toward the primary swatch at the same index.

    Args:
        surface: Surface scale.
        primary: Primary scale; only the overlapping indices are used.
        mix: User mix in [0, 1] (clamped), scaled by TONALITY_MAX_BLEND.

    Returns:
        A new surface scale. With ``mix == 0`` the input swatches are
        returned unchanged.
    """
    weight = effective_mix(mix)
    if weight <= 0:
        return list(surface)

    mixed: list[Swatch] = []
    for i, swatch in enumerate(surface):
        if i >= len(primary):
            mixed.append(swatch)
            continue
        s = try_parse_color(swatch.color)
        p = try_parse_color(primary[i].color)
        if s is None or p is None:
            logger.debug(f"Skipping tonality mix for unparsable swatch {swatch.label}")
            mixed.append(swatch)
            continue
        mixed.append(swatch.model_copy(update={"color": mix_linear(s, p, weight).to_css()}))
    return mixed
