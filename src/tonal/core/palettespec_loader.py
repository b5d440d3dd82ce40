"""
PaletteSpec persistence layer.

Handles reading and writing palette configurations to palettespec.yaml
in the project root.

Default location: {project_root}/palettespec.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import TonalError
from .ir.palette import SemanticColors
from .ir.palettespec import PaletteSettings, PaletteSpecYAML
from .semantic import SEMANTIC_DEFAULTS

logger = logging.getLogger(__name__)

PALETTESPEC_FILE = "palettespec.yaml"


class PaletteSpecError(TonalError):
    """Error loading or validating a PaletteSpec."""

    pass


# =============================================================================
# Path helpers
# =============================================================================


def get_palettespec_path(project_root: Path) -> Path:
    """Get the palettespec.yaml file path."""
    return project_root / PALETTESPEC_FILE


def palettespec_exists(project_root: Path) -> bool:
    return get_palettespec_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def parse_palettespec_data(data: dict[str, Any]) -> PaletteSpecYAML:
    """Build a PaletteSpecYAML from raw YAML data.

    Raises:
        PaletteSpecError: If the data does not match the schema.
    """
    if not isinstance(data, dict):
        raise PaletteSpecError(f"Expected a mapping at the top level, got {type(data).__name__}")
    try:
        return PaletteSpecYAML.model_validate(data)
    except ValidationError as e:
        raise PaletteSpecError(f"Invalid PaletteSpec schema: {e}") from e


def load_palettespec(project_root: Path, *, use_defaults: bool = True) -> PaletteSpecYAML:
    """Load PaletteSpec from palettespec.yaml.

    Args:
        project_root: Directory containing palettespec.yaml.
        use_defaults: If True, return a default PaletteSpec when the file
            doesn't exist or is empty.

    Returns:
        PaletteSpecYAML instance.

    Raises:
        PaletteSpecError: If the file is missing (when use_defaults=False)
            or invalid.
    """
    path = get_palettespec_path(project_root)

    if not path.exists():
        if use_defaults:
            logger.debug("No palettespec.yaml found, using defaults")
            return create_default_palettespec()
        raise PaletteSpecError(f"PaletteSpec not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise PaletteSpecError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty palettespec.yaml at {path}, using defaults")
            return create_default_palettespec()
        raise PaletteSpecError(f"Empty or invalid YAML in {path}")

    return parse_palettespec_data(data)


def save_palettespec(project_root: Path, spec: PaletteSpecYAML) -> Path:
    """Save PaletteSpec to palettespec.yaml.

    Returns:
        Path to the saved file.
    """
    path = get_palettespec_path(project_root)
    data = spec.model_dump(mode="json")

    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved PaletteSpec to {path}")
    return path


# =============================================================================
# Scaffolding
# =============================================================================


def create_default_palettespec(
    primary: str | None = None,
    surface: str | None = None,
    *,
    light_mode: bool = False,
) -> PaletteSpecYAML:
    """Default PaletteSpec with the stock semantic colors filled in."""
    defaults = PaletteSettings()
    return PaletteSpecYAML(
        palette=PaletteSettings(
            primary=primary or defaults.primary,
            surface=surface or defaults.surface,
            light_mode=light_mode,
            semantics=SemanticColors(**SEMANTIC_DEFAULTS),
        )
    )


def scaffold_palettespec(
    project_root: Path,
    *,
    primary: str | None = None,
    surface: str | None = None,
    light_mode: bool = False,
    overwrite: bool = False,
) -> Path | None:
    """Create a default palettespec.yaml file.

    Returns:
        Path to the created file, or None if an existing file was kept.
    """
    path = get_palettespec_path(project_root)

    if path.exists() and not overwrite:
        logger.debug(f"Skipping existing palettespec: {path}")
        return None

    project_root.mkdir(parents=True, exist_ok=True)
    spec = create_default_palettespec(primary, surface, light_mode=light_mode)
    return save_palettespec(project_root, spec)
