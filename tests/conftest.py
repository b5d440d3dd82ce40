"""Shared pytest fixtures for tonal tests."""

from pathlib import Path

import pytest

from tonal.core.ir import PaletteRequest, SemanticColors, Swatch


@pytest.fixture
def red_request() -> PaletteRequest:
    """Request with every input populated."""
    return PaletteRequest(
        primary="#ed0707",
        surface="#121212",
        semantics=SemanticColors(success="#22946E", danger="#9C2121"),
    )


@pytest.fixture
def tiny_scales() -> dict[str, list[Swatch]]:
    """Hand-written scales with known values for exporter tests."""
    return {
        "primary": [
            Swatch(label="a0", color="rgba(1,2,3,1)", text_color="rgba(255,255,255,1)"),
            Swatch(label="a90", color="rgba(250,250,250,1)", text_color="rgba(0,0,0,1)"),
        ],
        "surface": [
            Swatch(label="a0", color="rgba(10,10,10,1)"),
        ],
    }


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path
