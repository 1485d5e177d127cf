"""
Records produced while resolving a program for a target.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..core.ordered import OrderedSet

if TYPE_CHECKING:
    from .binding import Binding


@dataclass
class TargetComponentProperty:
    """
    A property resolved for a target.

    Attributes:
        type: Target type name (e.g. "string", "Color", "number[]")
        initializer: Target expression producing the value
        updatable: Whether the property is live-bindable in emitted code
    """

    type: str
    initializer: str
    updatable: bool = False


@dataclass
class TargetComponentSpec:
    """Resolved properties of one component instance."""

    component_name: str
    properties: dict[str, TargetComponentProperty] = field(default_factory=dict)
    public: bool = False


@dataclass
class ProcessedComponent:
    """
    Everything the compiler knows about one component type.

    Attributes:
        spec: Resolved spec of the first instance encountered
        instances: Ids of every instance of the type seen in the program
        binding: Target binding for the type, if any
    """

    spec: TargetComponentSpec
    instances: OrderedSet[str] = field(default_factory=OrderedSet)
    binding: Binding | None = None


@dataclass(frozen=True)
class PropertyReference:
    """The parent property through which an instance was reached."""

    parent_type: str
    name: str
