"""
Palette IR types.

Requests, swatches and results exchanged with the palette engine, plus
the exporter option and record types. All models are frozen: every value
is created fresh per generation call and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Display order of the semantic slots
SEMANTIC_NAMES: tuple[str, ...] = ("success", "warning", "danger", "info")

# Dark mode: progressively lighten the base (HSL lightness, relative).
DARK_MODE_LIGHTEN_SPAN = 1.65
# Light mode: progressively darken the base. Smaller = gentler darkening.
LIGHT_MODE_DARKEN_SPAN = 0.65


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


# =============================================================================
# Swatches
# =============================================================================


class Swatch(BaseModel):
    """One step of a color ramp."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Step label: a0, a10, ... a90")
    color: str = Field(description="Background color as rgba(r,g,b,a)")
    text_color: str | None = Field(
        default=None, description="Accessible foreground color, always opaque"
    )


# =============================================================================
# Request
# =============================================================================


class SemanticColors(BaseModel):
    """Optional base colors for the status scales."""

    model_config = ConfigDict(frozen=True)

    success: str | None = None
    warning: str | None = None
    danger: str | None = None
    info: str | None = None

    def provided(self) -> dict[str, str]:
        """Supplied slots in display order; empty strings count as absent."""
        return {name: value for name in SEMANTIC_NAMES if (value := getattr(self, name))}


class SurfaceOptions(BaseModel):
    """Total lighten/darken span of the surface ramp."""

    model_config = ConfigDict(frozen=True)

    light_mode_darken_span: float = Field(default=LIGHT_MODE_DARKEN_SPAN, ge=0.0)
    dark_mode_lighten_span: float = Field(default=DARK_MODE_LIGHTEN_SPAN, ge=0.0)


class PaletteRequest(BaseModel):
    """Input of a palette generation call."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field(description="Brand color (hex or rgba)")
    surface: str | None = Field(default=None, description="Background/neutral base color")
    light_mode: bool = Field(default=False, description="Darken toward black instead of white")
    tonality_mix: float = Field(
        default=0.0, description="Blend of the surface ramp toward the primary ramp (0-1)"
    )
    semantics: SemanticColors | None = None
    surface_options: SurfaceOptions = Field(default_factory=SurfaceOptions)

    @field_validator("tonality_mix", mode="before")
    @classmethod
    def _clamp_mix(cls, value: float | None) -> float:
        if value is None:
            return 0.0
        return _clamp01(value)


# =============================================================================
# Result
# =============================================================================


class PaletteResult(BaseModel):
    """Generated scales. Absent inputs produce absent scales."""

    model_config = ConfigDict(frozen=True)

    primary: list[Swatch]
    surface: list[Swatch] | None = None
    semantics: dict[str, list[Swatch]] | None = None

    def scales(
        self, primary_name: str = "primary", surface_name: str = "surface"
    ) -> dict[str, list[Swatch]]:
        """All non-empty scales keyed by display name, in export order."""
        out: dict[str, list[Swatch]] = {}
        if self.primary:
            out[primary_name] = self.primary
        if self.surface:
            out[surface_name] = self.surface
        for name, swatches in (self.semantics or {}).items():
            if swatches:
                out[name] = swatches
        return out


# =============================================================================
# Export
# =============================================================================


class VariableParts(BaseModel):
    """Parts handed to a custom variable-name formatter."""

    model_config = ConfigDict(frozen=True)

    scale: str
    label: str
    is_text: bool
    prefix: str | None


class CssVariableOptions(BaseModel):
    """Naming options shared by every export form."""

    model_config = ConfigDict(frozen=True)

    prefix: str | None = Field(default="clr", description="Root prefix; None drops it")
    primary_name: str = "primary"
    surface_name: str = "surface"
    include_text: bool = Field(default=True, description="Emit paired on-* text variables")
    formatter: Callable[[VariableParts], str] | None = Field(
        default=None, description="Replaces the default naming scheme entirely"
    )


class TokenRecord(BaseModel):
    """Flattened token row; variable names carry no leading ``--``."""

    model_config = ConfigDict(frozen=True)

    background: str
    background_value: str
    text: str | None = None
    text_value: str | None = None
    label: str
    scale: str
    prefix: str | None
