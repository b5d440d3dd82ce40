"""
Primary (brand) scale generation in OKLCH.

Approach:
1. Convert the base color to OKLCH.
2. For every intermediate step, blend the hue calibration anchors at the
   step's ramp position.
3. Move lightness toward the target (near white in dark mode, near black
   in light mode) by the blended progress, scale chroma by the blended
   retention and rotate hue by the blended shift.
4. Convert back to sRGB and clamp.
5. The first swatch is the exact base; in non-semantic mode the last is
   pure white (dark mode) or pure black (light mode).

Semantic mode keeps the endpoints moderate so status colors stay
recognizable at every step.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .anchors import ANCHOR_STEPS, BlendedStep, blend_anchor_step, blend_anchors
from .colors import BLACK, WHITE, RGBA, clamp01, format_rgba, try_parse_color
from .ir.palette import Swatch
from .labels import make_scale_labels
from .oklab import OKLCH, oklch_to_rgb, rgb_to_oklch

logger = logging.getLogger(__name__)

PRIMARY_SCALE_SIZE = 10
SEMANTIC_SCALE_SIZE = 4

# Anchor steps used for the three moderated semantic steps
SEMANTIC_STEP_INDICES: tuple[float, ...] = (1, 3, 6)

# Lightening aims near this lightness; < 1 keeps some hue.
PRIMARY_LIGHT_TARGET = 0.98
# Darkening (light mode) aims at this floor instead of pure black.
PRIMARY_DARK_TARGET = 0.02

# Semantic scales avoid extreme ends so they stay usable for badges/pills.
PRIMARY_SEMANTIC_LIGHT_END = 0.92
PRIMARY_SEMANTIC_DARK_END = 0.3

# Hue drift allowed on semantic scales.
PRIMARY_SEMANTIC_HUE_SHIFT_SCALE = 0.3

# Anchor progress arrays peak below 1; dividing maps them onto 0..1.
PRIMARY_PROGRESS_NORMALIZATION = 0.88

# Chroma lost while darkening in light mode; higher = faster greying.
PRIMARY_LIGHT_MODE_CHROMA_DROP = 0.85

# Semantic chroma retention
PRIMARY_SEMANTIC_CHROMA_RET_LIGHT = 0.6  # during darkening
PRIMARY_SEMANTIC_CHROMA_RET_DARK = 0.9  # during lightening

# Hue shift strength in light mode.
PRIMARY_HUE_SHIFT_LIGHT_MODE_SCALE = 0.5


def _wrap_hue(h: float) -> float:
    return (h + 360.0) % 360.0


def _fallback_scale(color: str, count: int, light_mode: bool) -> list[Swatch]:
    """Pass-through scale for input that could not be parsed."""
    labels = make_scale_labels(count)
    terminal = (BLACK if light_mode else WHITE).to_css()
    return [
        Swatch(label=label, color=terminal if i == count - 1 and count > 1 else color)
        for i, label in enumerate(labels)
    ]


def _tint(base: OKLCH, blended: BlendedStep, light_mode: bool) -> OKLCH:
    p = blended.progress
    if not light_mode:
        return OKLCH(
            base.l + (PRIMARY_LIGHT_TARGET - base.l) * p,
            base.c * blended.chroma_ret,
            _wrap_hue(base.h + blended.hue_shift),
        )
    return OKLCH(
        base.l * (1 - p) + PRIMARY_DARK_TARGET * p,
        base.c * (1 - p * PRIMARY_LIGHT_MODE_CHROMA_DROP),
        _wrap_hue(base.h + blended.hue_shift * PRIMARY_HUE_SHIFT_LIGHT_MODE_SCALE),
    )


def _semantic_tint(
    base: OKLCH,
    blended: BlendedStep,
    light_mode: bool,
    hue_scale: float,
    end_dark: float,
    end_light: float,
) -> OKLCH:
    p = blended.progress / PRIMARY_PROGRESS_NORMALIZATION
    hue = _wrap_hue(base.h + blended.hue_shift * hue_scale)
    if not light_mode:
        return OKLCH(
            base.l + (end_dark - base.l) * p,
            base.c * (PRIMARY_SEMANTIC_CHROMA_RET_DARK * blended.chroma_ret),
            hue,
        )
    return OKLCH(
        base.l * (1 - p) + end_light * p,
        base.c * (1 - p * PRIMARY_SEMANTIC_CHROMA_RET_LIGHT),
        hue,
    )


def _spread_semantic_indices(steps: int) -> tuple[float, ...]:
    """Evenly spread ``steps`` anchor positions over 1..K-2."""
    first, last = 1.0, float(ANCHOR_STEPS - 2)
    if steps <= 0:
        return ()
    if steps == 1:
        return (first,)
    return tuple(first + j * (last - first) / (steps - 1) for j in range(steps))


def _to_css(lch: OKLCH, alpha: float) -> str:
    rgb = oklch_to_rgb(OKLCH(clamp01(lch.l), max(0.0, lch.c), lch.h))
    return RGBA.from_unit(*rgb, alpha=alpha).to_css()


def make_primary_swatches(
    color: str,
    light_mode: bool = False,
    *,
    semantic: bool = False,
    count: int | None = None,
    hue_shift_scale: float | None = None,
    endcap_lightness_dark: float | None = None,
    endcap_lightness_light: float | None = None,
    semantic_step_indices: Sequence[float] | None = None,
) -> list[Swatch]:
    """Generate a tonal ramp from one base color.

    Args:
        color: Base color string (hex or rgba).
        light_mode: Darken toward black instead of lightening toward white.
        semantic: Use moderated endpoints (status colors).
        count: Number of swatches. Defaults to 10, or 4 in semantic mode.
        hue_shift_scale: Semantic only; hue drift multiplier (default 0.3).
        endcap_lightness_dark: Semantic only; lightness reached when
            lightening (dark mode), default 0.92.
        endcap_lightness_light: Semantic only; lightness reached when
            darkening (light mode), default 0.3.
        semantic_step_indices: Semantic only; anchor step positions of the
            non-base swatches. Length defines the count when ``count`` is
            not given.

    Returns:
        Swatches labeled a0..a90. Labels always come from the generic
        evenly spaced formula, so a 4-swatch semantic scale is labeled
        a0, a30, a60, a90 and not a0, a10, a20, a30 as in the scheme
        status scales are often documented with. Exported variable names
        follow these labels. Never raises on a malformed color string;
        a pass-through scale is returned instead.

    Raises:
        ValueError: If ``semantic_step_indices`` disagrees with ``count``.
    """
    if semantic and semantic_step_indices is not None and count is None:
        count = len(semantic_step_indices) + 1
    if count is None:
        count = SEMANTIC_SCALE_SIZE if semantic else PRIMARY_SCALE_SIZE
    if count <= 0:
        return []

    parsed = try_parse_color(color)
    if parsed is None:
        logger.warning(f"Unparsable color {color!r}, returning pass-through scale")
        return _fallback_scale(color, count, light_mode)

    alpha = parsed.alpha
    base = rgb_to_oklch(*parsed.unit())
    base = OKLCH(base.l, base.c, base.h % 360.0)
    labels = make_scale_labels(count)

    colors: list[str] = [format_rgba(int(parsed.r), int(parsed.g), int(parsed.b), alpha)]

    if not semantic:
        tint_count = max(0, count - 2)
        for k in range(tint_count):
            t = k / (tint_count - 1) if tint_count > 1 else 0.0
            colors.append(_to_css(_tint(base, blend_anchors(base.h, t), light_mode), alpha))
        if count > 1:
            colors.append((BLACK if light_mode else WHITE).with_alpha(alpha).to_css())
    else:
        hue_scale = (
            hue_shift_scale if hue_shift_scale is not None else PRIMARY_SEMANTIC_HUE_SHIFT_SCALE
        )
        end_dark = clamp01(
            endcap_lightness_dark
            if endcap_lightness_dark is not None
            else PRIMARY_SEMANTIC_LIGHT_END
        )
        end_light = clamp01(
            endcap_lightness_light
            if endcap_lightness_light is not None
            else PRIMARY_SEMANTIC_DARK_END
        )
        if semantic_step_indices is not None:
            indices = tuple(semantic_step_indices)
            if len(indices) != count - 1:
                raise ValueError(
                    f"semantic_step_indices has {len(indices)} entries, expected {count - 1}"
                )
        elif count == SEMANTIC_SCALE_SIZE:
            indices = SEMANTIC_STEP_INDICES
        else:
            indices = _spread_semantic_indices(count - 1)

        for index in indices:
            blended = blend_anchor_step(base.h, index)
            lch = _semantic_tint(base, blended, light_mode, hue_scale, end_dark, end_light)
            colors.append(_to_css(lch, alpha))

    return [Swatch(label=label, color=c) for label, c in zip(labels, colors, strict=True)]
