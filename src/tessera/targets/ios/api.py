"""
Types specific to the iOS target.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from ...compiler.output import TargetOutput
from ...core.ordered import OrderedSet
from .. import SOURCES_PATH

CORE_IOS = SOURCES_PATH / "ios"


class SwiftPackageDependency(BaseModel):
    """A Swift Package Manager dependency entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    version_constraint: str


class IosDependency(BaseModel):
    """A dependency contributed by an iOS binding."""

    model_config = ConfigDict(frozen=True)

    swift_package: SwiftPackageDependency

    @property
    def name(self) -> str:
        return self.swift_package.name


@dataclass
class IosOutput(TargetOutput):
    """Output of the iOS target."""

    imports: OrderedSet[str] = field(default_factory=OrderedSet)

    def seed(self) -> None:
        self.sources.add(CORE_IOS / "core" / "Tessera.swift")
        self.imports.add("Foundation")

    def clear(self) -> None:
        self.imports.clear()
        super().clear()
