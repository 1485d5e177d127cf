"""Package version, read from pyproject.toml in a source checkout."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Version of the checkout if pyproject.toml is beside src/, else of the installed distribution."""
    if PYPROJECT.is_file():
        with open(PYPROJECT, "rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "tessera" and "version" in project:
            return project["version"]
    try:
        return distribution_version("tessera")
    except PackageNotFoundError:
        return "0.0.0"
