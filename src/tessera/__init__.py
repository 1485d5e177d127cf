"""
Tessera - compile design-system component graphs into SDK packages.

A component graph describes design tokens (colors, files, fonts and
nested components). Tessera walks it once per target and renders a
ready-to-use source package for that target.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    CompilationError,
    ConfigError,
    ExporterError,
    GraphError,
    TesseraError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TesseraError",
    "GraphError",
    "ConfigError",
    "CompilationError",
    "ExporterError",
]
