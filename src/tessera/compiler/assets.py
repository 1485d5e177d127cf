"""
Asset binders shared by targets.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import quote

from ..core.errors import CompilationError
from ..core.ir import ComponentInstance, Program
from .binding import AssetBinding
from .spec import PropertyReference, TargetComponentSpec


def encode_file_source(src: str) -> str:
    """Percent-encode a relative asset path for use in a URL."""
    return quote(src, safe="/")


def resolve_asset(program: Program, src: str) -> Path:
    """
    Resolve an asset path against the project root.

    Raises:
        CompilationError: If the path is absolute, leaves the project root, or does not exist
    """
    if Path(src).is_absolute():
        raise CompilationError(f"Asset path must be relative to the project root: {src}")

    root = program.project_root.resolve()
    path = (root / src).resolve()
    if not path.is_relative_to(root):
        raise CompilationError(f"Asset path leaves the project root: {src}")
    if not path.is_file():
        raise CompilationError(f"Asset not found: {src} (looked in {program.project_root})")
    return path


def file_assets_binder(
    instance: ComponentInstance,
    program: Program,
    output: Any,
    spec: TargetComponentSpec,
    reference: PropertyReference | None,
) -> None:
    """Copy the file a File instance points to into the static root."""
    src = instance.values.get("src")
    if not src:
        return
    path = resolve_asset(program, src)
    output.asset_bindings[src] = AssetBinding(contents=str(path), copy=True)
