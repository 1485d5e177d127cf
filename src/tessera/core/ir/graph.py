"""
Component graph IR types.

A component graph is the immutable, already-resolved representation of a
design system: every component type with its declared properties, and
every component instance reachable from the program roots.

Nested component values are stored as instance ids, so an instance that
is reused by several parents appears exactly once in the graph.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..errors import GraphError

# =============================================================================
# Primitive kinds
# =============================================================================


class PrimitiveType(StrEnum):
    """Primitive property kinds understood by every target."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    NUMBER = "number"
    BOOLEAN = "boolean"


# =============================================================================
# Types and instances
# =============================================================================


class PropertyDeclaration(BaseModel):
    """A named property of a component type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = Field(description="Primitive kind or component type name")
    depth: int = Field(default=0, ge=0, description="Collection nesting depth (0 = scalar)")


class ComponentType(BaseModel):
    """A component type and its ordered property declarations."""

    model_config = ConfigDict(frozen=True)

    name: str
    properties: list[PropertyDeclaration] = Field(default_factory=list)

    def get_property(self, name: str) -> PropertyDeclaration | None:
        """Get a property declaration by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


class ComponentInstance(BaseModel):
    """
    A concrete value of a component type.

    Values are primitive literals, ids of nested instances, or lists of
    either (matching the declared depth).
    """

    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    values: dict[str, Any] = Field(default_factory=dict)


class ComponentGraph(BaseModel):
    """All component types and instances of a program."""

    model_config = ConfigDict(frozen=True)

    types: dict[str, ComponentType] = Field(default_factory=dict)
    instances: dict[str, ComponentInstance] = Field(default_factory=dict)

    def is_component(self, type_name: str) -> bool:
        """Whether a declared property type names a component type."""
        return type_name in self.types

    def get_type(self, name: str) -> ComponentType:
        """Get a component type by name."""
        try:
            return self.types[name]
        except KeyError:
            raise GraphError(f"Unknown component type '{name}'") from None

    def get_instance(self, instance_id: str) -> ComponentInstance:
        """Get a component instance by id."""
        try:
            return self.instances[instance_id]
        except (KeyError, TypeError):
            raise GraphError(f"Unknown component instance '{instance_id}'") from None
