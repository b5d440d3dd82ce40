"""Step labels for color scales (a0, a10, ... a90)."""

from __future__ import annotations

from .colors import round_half_up


def make_scale_labels(count: int) -> list[str]:
    """Labels for a scale of ``count`` swatches, spread over a0..a90.

    A single-swatch scale is just ``["a0"]``.
    """
    if count <= 0:
        return []
    if count == 1:
        return ["a0"]
    return ["a0"] + [f"a{round_half_up(i * 90 / (count - 1))}" for i in range(1, count)]
