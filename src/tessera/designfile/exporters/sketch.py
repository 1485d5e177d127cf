"""
Sketch design-file exporter.

Uses the sketchtool binary bundled with Sketch.app, which only exists on
macOS.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ...core.errors import ExporterToolError, InvalidSourceFileError, UnsupportedPlatformError
from .. import commands
from .base import DesignFileExporter, ProgressCallback

logger = logging.getLogger(__name__)

SKETCH_EXTENSION = ".sketch"
SKETCH_BUNDLE_ID = "com.bohemiancoding.sketch3"
SKETCHTOOL_PATH = Path("Contents/Resources/sketchtool/bin/sketchtool")


class SketchExporter(DesignFileExporter):
    """Exports slices and artboards of a Sketch file as SVG."""

    name = "sketch"

    @classmethod
    def can_parse(cls, source: str | Path) -> bool:
        source = str(source)
        return Path(source.strip()).suffix == SKETCH_EXTENSION and Path(source).is_file()

    def export_svg(
        self,
        source: str | Path,
        output_dir: Path,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        if not self.can_parse(source):
            raise InvalidSourceFileError()

        if sys.platform != "darwin":
            raise UnsupportedPlatformError("Sketch export is only supported on macOS.")

        progress = on_progress or (lambda message: None)
        progress("Locating sketchtool")
        sketchtool = self.locate_sketchtool()

        source = str(source).strip()
        for kind in ("slices", "artboards"):
            progress(f"Exporting {kind} from {source}")
            commands.run_command(
                [
                    str(sketchtool),
                    "export",
                    "--format=svg",
                    f"--output={output_dir / kind}",
                    kind,
                    source,
                ]
            )
        logger.info("Exported SVG assets from %s to %s", source, output_dir)

    def locate_sketchtool(self) -> Path:
        """
        Find sketchtool inside the installed Sketch.app.

        Raises:
            ExporterToolError: If Sketch is not installed
        """
        app_paths = commands.run_command(["mdfind", f"kMDItemCFBundleIdentifier={SKETCH_BUNDLE_ID}"])
        for app_path in app_paths.splitlines():
            sketchtool = Path(app_path.strip()) / SKETCHTOOL_PATH
            if sketchtool.exists():
                return sketchtool

        raise ExporterToolError("Unable to locate a Sketch installation with sketchtool.")
