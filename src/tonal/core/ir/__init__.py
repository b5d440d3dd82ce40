"""
tonal IR package.

Re-exports the palette request/result, exporter and configuration types.
"""

from .palette import (
    DARK_MODE_LIGHTEN_SPAN,
    LIGHT_MODE_DARKEN_SPAN,
    SEMANTIC_NAMES,
    CssVariableOptions,
    PaletteRequest,
    PaletteResult,
    SemanticColors,
    SurfaceOptions,
    Swatch,
    TokenRecord,
    VariableParts,
)
from .palettespec import AliasSpec, ExportSpec, PaletteSettings, PaletteSpecYAML

__all__ = [
    "DARK_MODE_LIGHTEN_SPAN",
    "LIGHT_MODE_DARKEN_SPAN",
    "SEMANTIC_NAMES",
    "AliasSpec",
    "CssVariableOptions",
    "ExportSpec",
    "PaletteRequest",
    "PaletteResult",
    "PaletteSettings",
    "PaletteSpecYAML",
    "SemanticColors",
    "SurfaceOptions",
    "Swatch",
    "TokenRecord",
    "VariableParts",
]
