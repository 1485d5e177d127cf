"""
Design-file import.

Exporters turn design tool files into vector assets a component graph can
reference.
"""

from __future__ import annotations

from pathlib import Path

from ..core.errors import InvalidSourceFileError
from .exporters import EXPORTERS, DesignFileExporter, SketchExporter


def get_exporter(source: str | Path) -> DesignFileExporter:
    """
    Get an exporter able to parse a design file.

    Raises:
        InvalidSourceFileError: If no exporter recognizes the file
    """
    for exporter_class in EXPORTERS:
        if exporter_class.can_parse(source):
            return exporter_class()
    raise InvalidSourceFileError()


__all__ = ["DesignFileExporter", "SketchExporter", "EXPORTERS", "get_exporter"]
