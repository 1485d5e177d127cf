"""
Project configuration models.

Parses tessera.toml and provides typed configuration for the compiler.

Example tessera.toml:

    [project]
    name = "palette"
    graph = "design/graph.yaml"

    [compiler]
    target = "web"
    output = "build"
    sdk_version = "1.2.0"

    [compiler.options]
    deployment_target = "13.0"
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

CONFIG_FILENAME = "tessera.toml"


class ProjectSection(BaseModel):
    """The [project] section."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    graph: Path = Path("graph.yaml")


class CompilerSection(BaseModel):
    """The [compiler] section."""

    model_config = ConfigDict(frozen=True)

    target: str = "web"
    output: Path = Path("build")
    sdk_version: str = "0.1.0"
    hot_port: int = Field(default=8081, ge=1, le=65535)
    options: dict[str, Any] = Field(default_factory=dict)


class ProjectConfig(BaseModel):
    """Complete project configuration."""

    model_config = ConfigDict(frozen=True)

    root: Path
    project: ProjectSection
    compiler: CompilerSection = Field(default_factory=CompilerSection)

    @property
    def graph_path(self) -> Path:
        """Absolute path of the graph document."""
        return self.root / self.project.graph


def load_project_config(path: Path) -> ProjectConfig:
    """
    Load tessera.toml.

    Args:
        path: Path to tessera.toml, or to the directory containing it

    Returns:
        ProjectConfig

    Raises:
        ConfigError: If the file is missing or invalid
    """
    if path.is_dir():
        path = path / CONFIG_FILENAME

    if not path.exists():
        raise ConfigError(f"No {CONFIG_FILENAME} found at {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    try:
        return ProjectConfig(
            root=path.parent.resolve(),
            project=data.get("project", {}),
            compiler=data.get("compiler", {}),
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
