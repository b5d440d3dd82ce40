"""
tonal - perceptual color scales for design-token systems.

Turns a brand color, a surface color and optional status colors into
tonal ramps with accessible text colors, exportable as CSS custom
properties or design tokens.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ColorParseError, TonalError
from .core.ir import PaletteRequest, PaletteResult, Swatch
from .core.palette import generate_palette

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TonalError",
    "ColorParseError",
    "PaletteRequest",
    "PaletteResult",
    "Swatch",
    "generate_palette",
]
