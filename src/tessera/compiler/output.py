"""
Per-run output accumulator shared by every target.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core.ordered import OrderedSet
from .binding import AssetBinding
from .spec import ProcessedComponent


@dataclass
class TargetOutput:
    """
    Mutable aggregate of everything one compilation run produces.

    Created once per compiler and reset with clear() before every run.
    clear() empties each container in place and re-seeds the entries a
    fresh output starts with; sdk_root, project_name and hot_url survive.
    """

    sdk_root: Path
    project_name: str
    processed_components: dict[str, ProcessedComponent] = field(default_factory=dict)
    sources: OrderedSet[Path] = field(default_factory=OrderedSet)
    dependencies: OrderedSet[Any] = field(default_factory=OrderedSet)
    asset_bindings: dict[str, AssetBinding] = field(default_factory=dict)
    hot_url: str | None = None

    def __post_init__(self) -> None:
        self.seed()

    def seed(self) -> None:
        """Add the entries every fresh output starts with."""
        pass

    def clear(self) -> None:
        """Drop everything accumulated by previous runs."""
        self.processed_components.clear()
        self.sources.clear()
        self.dependencies.clear()
        self.asset_bindings.clear()
        self.seed()
