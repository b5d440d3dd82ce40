"""Package version lookup."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _source_checkout_version() -> str | None:
    if not PYPROJECT.is_file():
        return None
    with PYPROJECT.open("rb") as f:
        project = tomllib.load(f).get("project", {})
    if project.get("name") != "tonal":
        return None
    return project.get("version")


def get_version() -> str:
    """Version from the source checkout's pyproject.toml, else the installed distribution."""
    found = _source_checkout_version()
    if found:
        return found
    try:
        return _distribution_version("tonal")
    except PackageNotFoundError:
        return "0.0.0"
