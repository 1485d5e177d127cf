"""Design-file exporters, in lookup order."""

from .base import DesignFileExporter, ProgressCallback
from .sketch import SketchExporter

EXPORTERS: list[type[DesignFileExporter]] = [SketchExporter]

__all__ = ["DesignFileExporter", "ProgressCallback", "SketchExporter", "EXPORTERS"]
