"""
PaletteSpec YAML IR types for declarative palette configuration.

palettespec.yaml has two sections: ``palette`` (what to generate) and
``export`` (how to name and where to write it).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .palette import CssVariableOptions, PaletteRequest, SemanticColors, SurfaceOptions

# =============================================================================
# Section 1: Palette
# =============================================================================


class PaletteSettings(BaseModel):
    """Base colors and generation switches."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field(default="#0B164D", description="Brand color")
    surface: str | None = Field(default="#0F0D16", description="Background base color")
    light_mode: bool = Field(default=False, description="Light theme (darkening ramps)")
    tonality_mix: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Surface tint toward primary (0-1)"
    )
    semantics: SemanticColors = Field(default_factory=SemanticColors)
    surface_options: SurfaceOptions = Field(default_factory=SurfaceOptions)

    def to_request(self) -> PaletteRequest:
        return PaletteRequest(
            primary=self.primary,
            surface=self.surface,
            light_mode=self.light_mode,
            tonality_mix=self.tonality_mix,
            semantics=self.semantics,
            surface_options=self.surface_options,
        )


# =============================================================================
# Section 2: Export
# =============================================================================


class AliasSpec(BaseModel):
    """Map one generated scale onto an external N-step variable scale."""

    model_config = ConfigDict(frozen=True)

    alias: str = Field(description="Alias scale name, e.g. 'rose'")
    scale: str = Field(description="Generated scale display name, e.g. 'primary'")
    namespace: str = Field(default="alias-color", description="Alias variable namespace")
    steps: int = Field(default=12, ge=1, le=99)
    reverse: bool = Field(default=True, description="Lightest first")


class ExportSpec(BaseModel):
    """Variable naming and output location."""

    model_config = ConfigDict(frozen=True)

    prefix: str | None = Field(default="clr", description="Variable prefix; null drops it")
    primary_name: str = "primary"
    surface_name: str = "surface"
    include_text: bool = True
    output: str = Field(default="theme.css", description="CSS output path, project relative")
    aliases: list[AliasSpec] = Field(default_factory=list)

    def to_options(self) -> CssVariableOptions:
        return CssVariableOptions(
            prefix=self.prefix,
            primary_name=self.primary_name,
            surface_name=self.surface_name,
            include_text=self.include_text,
        )


# =============================================================================
# Root
# =============================================================================


class PaletteSpecYAML(BaseModel):
    """Root of palettespec.yaml."""

    model_config = ConfigDict(frozen=True)

    palette: PaletteSettings = Field(default_factory=PaletteSettings)
    export: ExportSpec = Field(default_factory=ExportSpec)
    version: int = Field(default=1, description="Schema version")
