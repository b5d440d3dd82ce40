"""
Color values, parsing and sRGB helpers.

Colors are exchanged as ``rgba(r,g,b,a)`` strings; internally they are
``RGBA`` values whose channels may stay fractional until the moment they
are serialized. Rounding is half-up, so serialized output matches the
pinned reference palettes exactly.
"""

from __future__ import annotations

import colorsys
import math
import re
from collections.abc import Callable
from dataclasses import dataclass

from .errors import ColorParseError

_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNC_RE = re.compile(r"^(rgba?)\(\s*([^)]*?)\s*\)$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

# One 8-bit step expressed as HSL lightness
_MIN_LIGHTNESS_STEP = 1 / 255


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positive values (Math.round semantics)."""
    return math.floor(x + 0.5)


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def format_alpha(alpha: float) -> str:
    """Shortest decimal form: 1 -> "1", 0.8 -> "0.8"."""
    alpha = float(alpha)
    if alpha.is_integer():
        return str(int(alpha))
    return repr(alpha)


def format_rgba(r: int, g: int, b: int, alpha: float = 1.0) -> str:
    return f"rgba({r},{g},{b},{format_alpha(alpha)})"


@dataclass(frozen=True)
class RGBA:
    """sRGB color with 0-255 channels (possibly fractional) and alpha in [0, 1]."""

    r: float
    g: float
    b: float
    alpha: float = 1.0

    def rounded(self) -> RGBA:
        return RGBA(
            round_half_up(_clamp_channel(self.r)),
            round_half_up(_clamp_channel(self.g)),
            round_half_up(_clamp_channel(self.b)),
            self.alpha,
        )

    def unit(self) -> tuple[float, float, float]:
        """Channels normalized to 0..1."""
        return (self.r / 255, self.g / 255, self.b / 255)

    def with_alpha(self, alpha: float) -> RGBA:
        return RGBA(self.r, self.g, self.b, clamp01(alpha))

    def to_css(self) -> str:
        c = self.rounded()
        return format_rgba(int(c.r), int(c.g), int(c.b), self.alpha)

    @classmethod
    def from_unit(cls, r: float, g: float, b: float, alpha: float = 1.0) -> RGBA:
        return cls(r * 255, g * 255, b * 255, alpha)


WHITE = RGBA(255, 255, 255, 1.0)
BLACK = RGBA(0, 0, 0, 1.0)


def _clamp_channel(v: float) -> float:
    return max(0.0, min(255.0, v))


def _parse_number(token: str) -> float:
    token = token.strip()
    if token.endswith("%"):
        inner = token[:-1].strip()
        if not _NUMBER_RE.match(inner):
            raise ValueError(token)
        return float(inner) / 100
    if not _NUMBER_RE.match(token):
        raise ValueError(token)
    return float(token)


def _parse_hex(digits: str) -> RGBA:
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    alpha = 1.0
    if len(digits) == 8:
        alpha = round(int(digits[6:8], 16) / 255, 2)
    return RGBA(r, g, b, alpha)


def _parse_function(body: str, original: str) -> RGBA:
    parts = [p for p in re.split(r"\s*,\s*|\s+/\s+|\s+", body) if p]
    if len(parts) not in (3, 4):
        raise ColorParseError(original)
    try:
        channels = []
        for part in parts[:3]:
            value = _parse_number(part)
            if part.strip().endswith("%"):
                value *= 255
            channels.append(round_half_up(_clamp_channel(value)))
        alpha = clamp01(_parse_number(parts[3])) if len(parts) == 4 else 1.0
    except ValueError as e:
        raise ColorParseError(original) from e
    return RGBA(channels[0], channels[1], channels[2], alpha)


def parse_color(value: str) -> RGBA:
    """Parse a hex or rgb()/rgba() color string.

    Args:
        value: ``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``rgb(r,g,b)`` or
            ``rgba(r,g,b,a)``. Channels are clamped to 0-255 and rounded,
            alpha is clamped to [0, 1] and defaults to 1.

    Returns:
        Parsed RGBA with integer channels.

    Raises:
        ColorParseError: If the string is not a recognized color.
    """
    if not isinstance(value, str):
        raise ColorParseError(value)
    text = value.strip().lower()

    if match := _HEX_RE.match(text):
        return _parse_hex(match.group(1))
    if match := _FUNC_RE.match(text):
        return _parse_function(match.group(2), value)
    raise ColorParseError(value)


def try_parse_color(value: str | None) -> RGBA | None:
    """Like ``parse_color`` but returns None instead of raising."""
    if value is None:
        return None
    try:
        return parse_color(value)
    except ColorParseError:
        return None


# =============================================================================
# HSL lightness adjustment
# =============================================================================


def _adjust_lightness(color: RGBA, new_lightness: Callable[[float], float]) -> RGBA:
    r, g, b = (clamp01(v) for v in color.unit())
    h, lightness, s = colorsys.rgb_to_hls(r, g, b)
    lightness = clamp01(new_lightness(lightness))
    return RGBA.from_unit(*colorsys.hls_to_rgb(h, lightness, s), alpha=color.alpha)


def lighten(color: RGBA, ratio: float) -> RGBA:
    """Raise HSL lightness relative to itself: ``l + l * ratio``."""
    return _adjust_lightness(color, lambda lightness: lightness + lightness * ratio)


def darken(color: RGBA, ratio: float) -> RGBA:
    """Lower HSL lightness relative to itself: ``l - l * ratio``."""
    return _adjust_lightness(color, lambda lightness: lightness - lightness * ratio)


def hsl_lightness(color: RGBA) -> float:
    r, g, b = (clamp01(v) for v in color.unit())
    return colorsys.rgb_to_hls(r, g, b)[1]


def nudge(color: RGBA, ratio: float, *, lighter: bool) -> RGBA:
    """Small relative lightness step with a floor of one 8-bit level.

    Unlike ``lighten``, this moves pure black as well.
    """

    def step(lightness: float) -> float:
        delta = max(lightness * ratio, _MIN_LIGHTNESS_STEP)
        return lightness + delta if lighter else lightness - delta

    return _adjust_lightness(color, step)
