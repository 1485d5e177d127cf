"""
Program IR: a component graph submitted for compilation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .graph import ComponentGraph


class CompilerOptions(BaseModel):
    """Options shared by every target."""

    model_config = ConfigDict(frozen=True)

    target: str = "web"
    sdk_version: str = "0.1.0"
    output_path: Path = Path("build")
    hot_port: int = Field(default=8081, ge=1, le=65535)
    target_options: dict[str, Any] = Field(default_factory=dict)


class Program(BaseModel):
    """
    The immutable program under compilation.

    Attributes:
        project_name: Logical project name, used for module names
        project_root: Directory that relative asset paths resolve against
        graph: Component types and instances
        roots: Local component name -> root instance id, in declaration order
        options: Compiler options
        hot: Whether the program is compiled for hot serving
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    project_root: Path = Path(".")
    graph: ComponentGraph
    roots: dict[str, str] = Field(default_factory=dict)
    options: CompilerOptions = Field(default_factory=CompilerOptions)
    hot: bool = False

    @model_validator(mode="after")
    def _check_roots(self) -> "Program":
        for name, instance_id in self.roots.items():
            instance = self.graph.instances.get(instance_id)
            if instance is None:
                raise ValueError(f"Root '{name}' references unknown instance '{instance_id}'")
            if instance.type != name:
                raise ValueError(
                    f"Root '{name}' references an instance of type '{instance.type}'"
                )
        return self

    @property
    def local_component_names(self) -> list[str]:
        """Names of the components defined by the project, in order."""
        return list(self.roots)