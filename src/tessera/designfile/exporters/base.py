"""
Base class for design-file exporters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

ProgressCallback = Callable[[str], None]


class DesignFileExporter(ABC):
    """
    Exports vector assets from a design file.

    Subclasses recognize their files in can_parse() and shell out to the
    native design tool in export_svg().
    """

    name: str = "unnamed_exporter"

    @classmethod
    @abstractmethod
    def can_parse(cls, source: str | Path) -> bool:
        """Whether the file exists and looks like a file this exporter handles."""
        pass

    @abstractmethod
    def export_svg(
        self,
        source: str | Path,
        output_dir: Path,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        """
        Export SVG assets from a design file into a directory.

        Raises:
            InvalidSourceFileError: If can_parse() rejects the file
            UnsupportedPlatformError: If the host cannot run the design tool
            ExporterToolError: If the design tool is missing or fails
        """
        pass
