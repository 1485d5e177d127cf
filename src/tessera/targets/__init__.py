"""
Built-in compilation targets.

Each subpackage defines one TargetCompiler subclass and the bindings for
the built-in prefab types. Templates and native binding sources live in
``tessera/sources/<target>``.
"""

from pathlib import Path

SOURCES_PATH = Path(__file__).parent.parent / "sources"

__all__ = ["SOURCES_PATH"]
