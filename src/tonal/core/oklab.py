"""
Pure-Python OKLab / OKLCH conversions.

sRGB (gamma encoded, 0-1 floats) <-> linear light <-> OKLab <-> OKLCH,
using the coefficients of Björn Ottosson's reference OKLab transform.
No external color libraries required.
"""

from __future__ import annotations

import math
from typing import NamedTuple


class OKLab(NamedTuple):
    L: float
    a: float
    b: float


class OKLCH(NamedTuple):
    """OKLCH color: lightness 0-1, chroma >= 0, hue in degrees [0, 360)."""

    l: float  # noqa: E741
    c: float
    h: float


def srgb_to_linear(x: float) -> float:
    """Decode one gamma-encoded sRGB channel (0-1) to linear light."""
    return x / 12.92 if x <= 0.04045 else ((x + 0.055) / 1.055) ** 2.4


def linear_to_srgb(x: float) -> float:
    """Encode one linear-light channel back to gamma-encoded sRGB."""
    if x <= 0.0031308:
        return 12.92 * x
    return 1.055 * x ** (1 / 2.4) - 0.055


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def rgb_to_oklab(r: float, g: float, b: float) -> OKLab:
    """Convert sRGB channels in 0..1 to OKLab."""
    rl = srgb_to_linear(r)
    gl = srgb_to_linear(g)
    bl = srgb_to_linear(b)

    lms_l = 0.4122214708 * rl + 0.5363325363 * gl + 0.0514459929 * bl
    lms_m = 0.2119034982 * rl + 0.6806995451 * gl + 0.1073969566 * bl
    lms_s = 0.0883024619 * rl + 0.2817188376 * gl + 0.6309787005 * bl

    l_ = math.cbrt(lms_l)
    m_ = math.cbrt(lms_m)
    s_ = math.cbrt(lms_s)

    return OKLab(
        0.2104542553 * l_ + 0.793617785 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.428592205 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.808675766 * s_,
    )


def oklab_to_rgb(lab: OKLab) -> tuple[float, float, float]:
    """Convert OKLab to sRGB channels, clamped to 0..1."""
    L, a, b = lab
    l_ = (L + 0.3963377774 * a + 0.2158037573 * b) ** 3
    m_ = (L - 0.1055613458 * a - 0.0638541728 * b) ** 3
    s_ = (L - 0.0894841775 * a - 1.291485548 * b) ** 3

    rl = 4.0767416621 * l_ - 3.3077115913 * m_ + 0.2309699292 * s_
    gl = -1.2684380046 * l_ + 2.6097574011 * m_ - 0.3413193965 * s_
    bl = -0.0041960863 * l_ - 0.7034186147 * m_ + 1.707614701 * s_

    return (
        _clamp01(linear_to_srgb(rl)),
        _clamp01(linear_to_srgb(gl)),
        _clamp01(linear_to_srgb(bl)),
    )


def oklab_to_oklch(lab: OKLab) -> OKLCH:
    L, a, b = lab
    c = math.sqrt(a * a + b * b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360.0
    return OKLCH(L, c, h)


def oklch_to_oklab(lch: OKLCH) -> OKLab:
    hr = math.radians(lch.h)
    return OKLab(lch.l, lch.c * math.cos(hr), lch.c * math.sin(hr))


def rgb_to_oklch(r: float, g: float, b: float) -> OKLCH:
    """Convert sRGB channels in 0..1 to OKLCH."""
    return oklab_to_oklch(rgb_to_oklab(r, g, b))


def oklch_to_rgb(lch: OKLCH) -> tuple[float, float, float]:
    """Convert OKLCH to sRGB channels in 0..1 (clamped, not rounded)."""
    return oklab_to_rgb(oklch_to_oklab(lch))
