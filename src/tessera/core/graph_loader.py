"""
Graph document loader.

Reads a component graph from YAML or JSON and builds the immutable
Program handed to a target compiler.

Document shape:

    design_system: true          # merge built-in prefab types (default)
    types:
      Palette:
        primary: Color
        spacing: float[]         # "[]" suffix per collection level
        caption: {type: string}
    instances:
      palette:
        type: Palette
        values:
          primary: brand-blue    # nested values are instance ids
          spacing: [4, 8, 16]
    roots:
      Palette: palette           # local component -> root instance
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .config import ProjectConfig
from .designsystem import PREFAB_TYPES
from .errors import GraphError
from .ir import (
    CompilerOptions,
    ComponentGraph,
    ComponentInstance,
    ComponentType,
    Program,
    PropertyDeclaration,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphDocument:
    """A loaded graph and the roots it declares."""

    graph: ComponentGraph
    roots: dict[str, str]


def parse_property_declaration(name: str, raw: Any) -> PropertyDeclaration:
    """
    Parse one property declaration.

    Accepts ``"Color"``, ``"float[][]"`` or ``{"type": "float", "depth": 1}``.
    """
    if isinstance(raw, str):
        type_name = raw.strip()
        depth = 0
        while type_name.endswith("[]"):
            type_name = type_name[:-2].rstrip()
            depth += 1
        return PropertyDeclaration(name=name, type=type_name, depth=depth)

    if isinstance(raw, dict):
        try:
            return PropertyDeclaration(name=name, **raw)
        except (TypeError, ValidationError) as e:
            raise GraphError(f"Invalid declaration for property '{name}': {e}") from e

    raise GraphError(f"Invalid declaration for property '{name}': {raw!r}")


def _instance_references(
    instance: ComponentInstance,
    types: dict[str, ComponentType],
    instances: dict[str, ComponentInstance],
) -> set[str]:
    """Ids of the instances held by the component-typed properties of an instance."""
    references: set[str] = set()
    for declaration in types[instance.type].properties:
        if declaration.type not in types or declaration.name not in instance.values:
            continue
        values = [instance.values[declaration.name]]
        for _ in range(declaration.depth):
            values = [child for value in values if isinstance(value, (list, tuple)) for child in value]
        references.update(value for value in values if isinstance(value, str) and value in instances)
    return references


def detect_instance_cycles(
    types: dict[str, ComponentType],
    instances: dict[str, ComponentInstance],
) -> None:
    """
    Reject instances that reach themselves through component-typed properties.

    Raises:
        GraphError: With the first cycle found, e.g. ``a -> b -> a``
    """
    ref_graph = {
        instance_id: _instance_references(instance, types, instances)
        for instance_id, instance in instances.items()
    }
    visited: set[str] = set()
    path: list[str] = []

    def dfs(node: str) -> list[str] | None:
        if node in path:
            return path[path.index(node) :] + [node]
        if node in visited:
            return None
        visited.add(node)
        path.append(node)
        for neighbor in sorted(ref_graph[node]):
            cycle = dfs(neighbor)
            if cycle:
                return cycle
        path.pop()
        return None

    for instance_id in instances:
        cycle = dfs(instance_id)
        if cycle:
            raise GraphError(f"Circular reference between instances: {' -> '.join(cycle)}")


def parse_graph_document(data: dict[str, Any]) -> GraphDocument:
    """Build a GraphDocument from already-decoded data."""
    if not isinstance(data, dict):
        raise GraphError("Graph document must be a mapping")

    types: dict[str, ComponentType] = {}
    if data.get("design_system", True):
        types.update(PREFAB_TYPES)

    for type_name, properties in (data.get("types") or {}).items():
        if type_name in types:
            raise GraphError(f"Component type '{type_name}' is already defined")
        properties = properties or {}
        if not isinstance(properties, dict):
            raise GraphError(f"Properties of '{type_name}' must be a mapping")
        types[type_name] = ComponentType(
            name=type_name,
            properties=[parse_property_declaration(k, v) for k, v in properties.items()],
        )

    instances: dict[str, ComponentInstance] = {}
    for instance_id, raw in (data.get("instances") or {}).items():
        if not isinstance(raw, dict) or "type" not in raw:
            raise GraphError(f"Instance '{instance_id}' must declare a type")
        if raw["type"] not in types:
            raise GraphError(f"Instance '{instance_id}' has unknown type '{raw['type']}'")
        instances[str(instance_id)] = ComponentInstance(
            id=str(instance_id),
            type=raw["type"],
            values=raw.get("values") or {},
        )

    detect_instance_cycles(types, instances)

    roots = {str(k): str(v) for k, v in (data.get("roots") or {}).items()}
    for name, instance_id in roots.items():
        if instance_id not in instances:
            raise GraphError(f"Root '{name}' references unknown instance '{instance_id}'")

    return GraphDocument(graph=ComponentGraph(types=types, instances=instances), roots=roots)


def load_graph_document(path: Path) -> GraphDocument:
    """
    Load a graph document from a YAML or JSON file.

    Raises:
        GraphError: If the file is missing or malformed
    """
    if not path.exists():
        raise GraphError(f"Graph document not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise GraphError(f"Could not parse graph document {path}: {e}") from e

    document = parse_graph_document(data or {})
    logger.debug(
        "Loaded %d types and %d instances from %s",
        len(document.graph.types),
        len(document.graph.instances),
        path,
    )
    return document


def build_program(
    config: ProjectConfig,
    target: str | None = None,
    output: Path | None = None,
    hot: bool = False,
) -> Program:
    """
    Build the Program for a configured project.

    Args:
        config: Project configuration
        target: Target name overriding [compiler].target
        output: Output directory overriding [compiler].output
        hot: Compile for hot serving

    Returns:
        Program ready for a target compiler
    """
    document = load_graph_document(config.graph_path)
    options = CompilerOptions(
        target=target or config.compiler.target,
        sdk_version=config.compiler.sdk_version,
        output_path=output or config.compiler.output,
        hot_port=config.compiler.hot_port,
        target_options=config.compiler.options,
    )
    try:
        return Program(
            project_name=config.project.name,
            project_root=config.root,
            graph=document.graph,
            roots=document.roots,
            options=options,
            hot=hot,
        )
    except ValidationError as e:
        raise GraphError(f"Invalid program: {e}") from e
