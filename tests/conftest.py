"""Shared pytest fixtures for Tessera tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from tessera.core.graph_loader import parse_graph_document
from tessera.core.ir import CompilerOptions, Program


def _make_program(
    data: dict[str, Any],
    project_root: Path = Path("."),
    target: str = "web",
    hot: bool = False,
    **target_options: Any,
) -> Program:
    """Build a Program from an inline graph document."""
    document = parse_graph_document(data)
    return Program(
        project_name="palette",
        project_root=project_root,
        graph=document.graph,
        roots=document.roots,
        options=CompilerOptions(target=target, output_path=Path("build"), target_options=target_options),
        hot=hot,
    )


def _read_tree(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def make_program():
    """Factory building a Program from an inline graph document."""
    return _make_program


@pytest.fixture
def read_tree():
    """Factory reading every file under a directory, keyed by relative path."""
    return _read_tree


@pytest.fixture
def nested_graph() -> dict[str, Any]:
    """A root component holding one instance of a nested component."""
    return {
        "types": {
            "A": {"b": "B"},
            "B": {"x": "string"},
        },
        "instances": {
            "a": {"type": "A", "values": {"b": "b"}},
            "b": {"type": "B", "values": {"x": "hello"}},
        },
        "roots": {"A": "a"},
    }


@pytest.fixture
def palette_graph() -> dict[str, Any]:
    """A design-system palette using the built-in prefabs."""
    return {
        "types": {
            "Palette": {
                "primary": "Color",
                "spacing": "float",
                "label": "string",
                "rounded": "boolean",
                "logo": "File",
                "body": "Typograph",
            },
        },
        "instances": {
            "palette": {
                "type": "Palette",
                "values": {
                    "primary": "brand-blue",
                    "spacing": 8,
                    "label": "Brand",
                    "rounded": True,
                    "logo": "logo",
                    "body": "body",
                },
            },
            "brand-blue": {"type": "Color", "values": {"h": 0.5, "s": 0.5, "l": 0.5, "a": 1}},
            "logo": {"type": "File", "values": {"src": "assets/logo.svg", "type": "image"}},
            "inter-file": {"type": "File", "values": {"src": "assets/Inter.woff2", "type": "font"}},
            "inter": {"type": "Font", "values": {"file": "inter-file", "name": "Inter"}},
            "body": {
                "type": "Typograph",
                "values": {"font": "inter", "fontSize": 16, "color": "brand-blue"},
            },
        },
        "roots": {"Palette": "palette"},
    }


@pytest.fixture
def palette_project(tmp_path: Path) -> Path:
    """Project root holding the assets referenced by palette_graph."""
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.svg").write_text('<svg xmlns="http://www.w3.org/2000/svg"></svg>\n')
    (assets / "Inter.woff2").write_bytes(b"wOF2fake")
    return tmp_path
