"""
WCAG 2.1 contrast utilities and accessible text color selection.

Public API:
- relative_luminance(color) -> float
- contrast_ratio(a, b) -> float
- wcag_level(ratio) -> str
- choose_text_color(background, fallback=None) -> str
"""

from __future__ import annotations

import logging

from .colors import BLACK, RGBA, WHITE, format_rgba, try_parse_color

logger = logging.getLogger(__name__)

AAA_NORMAL = 7.0
AA_NORMAL = 4.5
AA_LARGE = 3.0

_UNPARSABLE_BACKGROUND_TEXT = "rgba(0,0,0,1)"


def _linear_channel(c: float) -> float:
    c = c / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: RGBA) -> float:
    c = color.rounded()
    # Rec. 709 coefficients used by WCAG
    return (
        0.2126 * _linear_channel(c.r)
        + 0.7152 * _linear_channel(c.g)
        + 0.0722 * _linear_channel(c.b)
    )


def contrast_ratio(a: RGBA, b: RGBA) -> float:
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float) -> str:
    """Highest WCAG conformance level reached for normal text."""
    if ratio >= AAA_NORMAL:
        return "AAA"
    if ratio >= AA_NORMAL:
        return "AA"
    if ratio >= AA_LARGE:
        return "AA Large"
    return "fail"


def _pick(background: RGBA, fallback: RGBA | None) -> RGBA:
    c_white = contrast_ratio(WHITE, background)
    c_black = contrast_ratio(BLACK, background)
    best = WHITE if c_white >= c_black else BLACK

    if c_white >= AAA_NORMAL or c_black >= AAA_NORMAL:
        return best
    if c_white >= AA_NORMAL or c_black >= AA_NORMAL:
        return best
    if fallback is not None and contrast_ratio(fallback, background) > max(c_white, c_black):
        return fallback
    return best


def choose_text_color(background: str | RGBA, fallback: RGBA | None = None) -> str:
    """Pick the most legible foreground for ``background``.

    Preference: AAA (7:1), then AA (4.5:1) between white and black. Below
    that, whichever of white/black is stronger, unless ``fallback`` (a
    brand color) beats it.

    Returns:
        Opaque ``rgba(r,g,b,1)`` string regardless of the background alpha.
    """
    bg = background if isinstance(background, RGBA) else try_parse_color(background)
    if bg is None:
        logger.debug(f"Unparsable background {background!r}, defaulting text to black")
        return _UNPARSABLE_BACKGROUND_TEXT
    chosen = _pick(bg, fallback).rounded()
    return format_rgba(int(chosen.r), int(chosen.g), int(chosen.b), 1)
