"""
Target bindings.

A binding augments a component type for one target with native sources,
declarations, imports and dependencies, and may take over rendering the
initializer of its instances or materializing their assets.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSet
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..core.ir import ComponentInstance, Program
    from .output import TargetOutput
    from .spec import PropertyReference, TargetComponentSpec


class Dependency(Protocol):
    """A package dependency; identity is its name."""

    @property
    def name(self) -> str: ...


AssetsBinder = Callable[
    ["ComponentInstance", "Program", Any, "TargetComponentSpec", "PropertyReference | None"],
    None,
]


@dataclass(frozen=True)
class AssetBinding:
    """
    A static asset to materialize under the static root.

    When ``copy`` is set, ``contents`` is the path of the file to copy.
    """

    contents: str | bytes
    copy: bool = False


@dataclass(frozen=True)
class Binding:
    """
    Native augmentation of a component type for one target.

    Attributes:
        sources: Extra source files added to the package
        declarations: Type declaration files replacing the generated ones
        dependencies: Package dependencies required by the sources
        imports: Modules the sources import (targets with module imports)
        updatable: Whether properties of this type are live-bindable
        initializer: Renders the initializer of an instance
        assets_binder: Registers static assets for an instance
    """

    sources: tuple[Path, ...] = ()
    declarations: tuple[Path, ...] = ()
    dependencies: tuple[Any, ...] = ()
    imports: tuple[str, ...] = ()
    updatable: bool = False
    initializer: Callable[[ComponentInstance], str] | None = None
    assets_binder: AssetsBinder | None = None


def merge_dependency(dependencies: MutableSet[Any], new_dependency: Dependency) -> None:
    """
    Merge a dependency into a set of dependencies.

    A dependency with the same name already present wins; the new one is
    dropped without comparing versions.
    """
    for dependency in dependencies:
        if dependency.name == new_dependency.name:
            return

    dependencies.add(new_dependency)
