"""
Types specific to the web target.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ...compiler.output import TargetOutput
from ...core.ordered import OrderedSet
from .. import SOURCES_PATH

CORE_WEB = SOURCES_PATH / "web"


class PackageJsonDependency(BaseModel):
    """An npm dependency entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    version_constraint: str


class WebDependency(BaseModel):
    """A dependency contributed by a web binding."""

    model_config = ConfigDict(frozen=True)

    package_json: PackageJsonDependency

    @property
    def name(self) -> str:
        return self.package_json.name


@dataclass
class WebStyles:
    """Style buckets filled by style promotion and asset binders."""

    variables: dict[str, str] = field(default_factory=dict)
    rule_groups: dict[str, dict[str, str]] = field(default_factory=dict)
    fonts: dict[str, dict[str, str]] = field(default_factory=dict)

    def clear(self) -> None:
        self.variables.clear()
        self.rule_groups.clear()
        self.fonts.clear()


@dataclass
class WebOutput(TargetOutput):
    """Output of the web target."""

    declarations: OrderedSet[Path] = field(default_factory=OrderedSet)
    declaration_imports: OrderedSet[str] = field(default_factory=OrderedSet)
    styles: WebStyles = field(default_factory=WebStyles)

    def seed(self) -> None:
        self.sources.add(CORE_WEB / "core" / "Tessera.js")
        self.declarations.add(CORE_WEB / "core" / "Tessera.d.ts")

    def clear(self) -> None:
        self.declarations.clear()
        self.declaration_imports.clear()
        self.styles.clear()
        super().clear()


@dataclass(frozen=True)
class StyleVariable:
    name: str
    value: str
    is_number: bool = False


@dataclass(frozen=True)
class StyleRuleGroup:
    name: str
    rules: list[tuple[str, str]]


@dataclass(frozen=True)
class StyleTokens:
    """Read-only projection of the style buckets used by the style sheet templates."""

    style_variables: list[StyleVariable]
    style_rule_groups: list[StyleRuleGroup]
    style_fonts: list[list[tuple[str, str]]]
