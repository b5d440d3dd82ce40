"""
Hue calibration anchors and the Gaussian anchor blender.

Each anchor describes how a color family near ``hue`` behaves while it is
pushed toward white (or black): how far along the lightness path each step
travels (``progress``), how much chroma survives (``chroma_ret``) and how
many degrees the hue drifts (``hue_shift``). The table is fitted to seven
reference ramps in dark mode: inverting the lightening formula gives each
ramp's per-step targets, and the rows are the solution of the normalized
Gaussian weight system, so the blend lands on every reference ramp.
Treat the numbers like a golden fixture.

An arbitrary base hue is served by a hue-distance weighted blend of all
anchors, and an arbitrary position along the ramp by linear interpolation
between an anchor's neighbouring steps.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Controls how quickly anchor influence fades with hue distance.
# Smaller = sharper cutoff between hue families.
PRIMARY_GAUSSIAN_DENOMINATOR = 40.0


@dataclass(frozen=True)
class Anchor:
    hue: float
    progress: tuple[float, ...]
    chroma_ret: tuple[float, ...]
    hue_shift: tuple[float, ...]


@dataclass(frozen=True)
class BlendedStep:
    progress: float
    chroma_ret: float
    hue_shift: float


# One anchor per reference ramp (#ed0707, #edbb07, #3BAB31, #07edcb,
# #0482DE, #5407ed, #db07ed), placed at the base color's OKLCH hue.
# Each row is the per-anchor value that makes the normalized blend at every
# reference hue reproduce that ramp's steps a10..a80 exactly.
ANCHORS: tuple[Anchor, ...] = (
    Anchor(  # red
        hue=29.029328,
        progress=(0.106471, 0.223890, 0.325179, 0.427188, 0.532934, 0.645125, 0.761209, 0.876290),
        chroma_ret=(0.899850, 0.808593, 0.704496, 0.575366, 0.455259, 0.330374, 0.215110, 0.108931),
        hue_shift=(2.5686, 4.5116, 5.4281, 6.7339, 8.1256, 10.2227, 11.0820, 9.8452),
    ),
    Anchor(  # yellow
        hue=89.029430,
        progress=(0.113709, 0.229083, 0.324170, 0.440766, 0.551808, 0.667460, 0.763787, 0.875049),
        chroma_ret=(0.933312, 0.849808, 0.748047, 0.640294, 0.521797, 0.405239, 0.274381, 0.132397),
        hue_shift=(-0.0818, -0.6102, -1.7057, -2.3731, -3.0319, -3.7259, -5.8767, -4.8203),
    ),
    Anchor(  # green
        hue=141.947114,
        progress=(0.104965, 0.212401, 0.335256, 0.443947, 0.562632, 0.666289, 0.776517, 0.887205),
        chroma_ret=(0.897120, 0.791242, 0.690090, 0.578419, 0.472528, 0.355954, 0.231651, 0.105957),
        hue_shift=(-0.8789, -1.1958, -1.4942, -3.0892, -2.3255, -2.3619, -2.3071, -4.1227),
    ),
    Anchor(  # teal
        hue=177.285887,
        progress=(0.116821, 0.231578, 0.324468, 0.448296, 0.548264, 0.665161, 0.775172, 0.890261),
        chroma_ret=(0.892227, 0.793481, 0.670149, 0.570472, 0.454453, 0.336830, 0.232531, 0.128429),
        hue_shift=(0.2593, -0.6618, -0.3140, 1.1143, 1.0718, -1.1756, 1.0279, 1.0797),
    ),
    Anchor(  # blue
        hue=250.062018,
        progress=(0.109605, 0.216805, 0.331698, 0.446247, 0.553195, 0.662784, 0.777455, 0.888151),
        chroma_ret=(0.878696, 0.750502, 0.638724, 0.517374, 0.409434, 0.300629, 0.197668, 0.105614),
        hue_shift=(3.4721, 5.9421, 7.9741, 10.3830, 12.4314, 10.5947, 15.9713, 19.1175),
    ),
    Anchor(  # violet
        hue=281.729147,
        progress=(0.105332, 0.213818, 0.323839, 0.427092, 0.537864, 0.655783, 0.770469, 0.887500),
        chroma_ret=(0.919226, 0.837934, 0.731931, 0.635581, 0.511871, 0.387716, 0.255436, 0.119073),
        hue_shift=(7.6239, 12.4604, 16.0735, 18.5638, 20.0533, 24.8257, 20.5283, 22.5963),
    ),
    Anchor(  # magenta
        hue=324.036738,
        progress=(0.113587, 0.217708, 0.322606, 0.439897, 0.551316, 0.658621, 0.776679, 0.881435),
        chroma_ret=(0.899925, 0.784159, 0.675832, 0.557016, 0.449415, 0.343292, 0.221901, 0.120623),
        hue_shift=(0.3494, 1.0137, 1.0391, 0.9083, 1.0679, 0.2195, 3.7039, 1.7063),
    ),
)

ANCHOR_STEPS = len(ANCHORS[0].progress)


def hue_distance(a: float, b: float) -> float:
    """Shortest distance between two hues on the 360° circle."""
    d = a - b
    return min(abs(d), abs(d + 360.0), abs(d - 360.0))


def _lerp(values: tuple[float, ...], i0: int, i1: int, frac: float) -> float:
    return values[i0] + (values[i1] - values[i0]) * frac


def blend_anchor_step(
    hue: float,
    index: float,
    anchors: tuple[Anchor, ...] = ANCHORS,
    sigma: float = PRIMARY_GAUSSIAN_DENOMINATOR,
) -> BlendedStep:
    """Blend all anchors for ``hue`` at a (possibly fractional) step index.

    Args:
        hue: Base hue in degrees.
        index: Position in the anchors' step space, 0..K-1. Clamped.
        anchors: Calibration table.
        sigma: Gaussian denominator for the hue-distance weighting.

    Returns:
        Weighted progress / chroma retention / hue shift triple.
    """
    steps = len(anchors[0].progress)
    index = max(0.0, min(float(steps - 1), index))
    i0 = math.floor(index)
    i1 = min(i0 + 1, steps - 1)
    frac = index - i0

    w_sum = 0.0
    progress = 0.0
    chroma_ret = 0.0
    hue_shift = 0.0
    for anchor in anchors:
        d = hue_distance(hue, anchor.hue)
        w = math.exp(-((d / sigma) ** 2))
        w_sum += w
        progress += _lerp(anchor.progress, i0, i1, frac) * w
        chroma_ret += _lerp(anchor.chroma_ret, i0, i1, frac) * w
        hue_shift += _lerp(anchor.hue_shift, i0, i1, frac) * w

    return BlendedStep(progress / w_sum, chroma_ret / w_sum, hue_shift / w_sum)


def blend_anchors(
    hue: float,
    t: float,
    anchors: tuple[Anchor, ...] = ANCHORS,
    sigma: float = PRIMARY_GAUSSIAN_DENOMINATOR,
) -> BlendedStep:
    """Blend anchors at fractional ramp position ``t`` in [0, 1]."""
    steps = len(anchors[0].progress)
    t = max(0.0, min(1.0, t))
    return blend_anchor_step(hue, t * (steps - 1), anchors, sigma)
