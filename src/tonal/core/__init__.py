"""Core tonal functionality: color math, scale generators, contrast, export, configuration."""

from . import ir
from .contrast import choose_text_color, contrast_ratio, relative_luminance, wcag_level
from .css_export import (
    generate_alias_variables,
    generate_css_variables,
    generate_css_variables_data,
    render_root_block,
)
from .dtcg_export import export_dtcg_file, generate_dtcg_tokens
from .errors import ColorParseError, TonalError
from .palette import generate_palette
from .palettespec_loader import (
    PaletteSpecError,
    load_palettespec,
    save_palettespec,
    scaffold_palettespec,
)
from .primary import make_primary_swatches
from .semantic import SEMANTIC_DEFAULTS, make_semantic_swatches
from .surface import make_surface_swatches
from .tonality import mix_surface_with_primary

__all__ = [
    "ir",
    "TonalError",
    "ColorParseError",
    "PaletteSpecError",
    "generate_palette",
    "make_primary_swatches",
    "make_surface_swatches",
    "make_semantic_swatches",
    "SEMANTIC_DEFAULTS",
    "mix_surface_with_primary",
    "choose_text_color",
    "contrast_ratio",
    "relative_luminance",
    "wcag_level",
    "generate_css_variables",
    "generate_css_variables_data",
    "generate_alias_variables",
    "render_root_block",
    "generate_dtcg_tokens",
    "export_dtcg_file",
    "load_palettespec",
    "save_palettespec",
    "scaffold_palettespec",
]
