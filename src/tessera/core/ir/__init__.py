"""
Tessera Internal Representation (IR).

Re-exports the graph and program types so callers can write
``from tessera.core import ir`` and ``ir.ComponentType``.
"""

from .graph import (
    ComponentGraph,
    ComponentInstance,
    ComponentType,
    PrimitiveType,
    PropertyDeclaration,
)
from .program import CompilerOptions, Program

__all__ = [
    "PrimitiveType",
    "PropertyDeclaration",
    "ComponentType",
    "ComponentInstance",
    "ComponentGraph",
    "CompilerOptions",
    "Program",
]
