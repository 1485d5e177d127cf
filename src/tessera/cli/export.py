"""
Design-file export command for the Tessera CLI.
"""

from __future__ import annotations

from pathlib import Path

import typer

from tessera.core.errors import ExporterError
from tessera.designfile import get_exporter

from .utils import configure_logging


def export_command(
    source: str = typer.Argument(..., help="Design file to export"),
    output: Path = typer.Option(  # noqa: B008
        Path("assets"),
        "--output",
        "-o",
        help="Directory for exported SVG assets",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Export vector assets from a design file.

    Examples:
        tessera export design/icons.sketch -o assets/icons
    """
    configure_logging(verbose)

    try:
        exporter = get_exporter(source)
        exporter.export_svg(source, output, on_progress=lambda message: typer.echo(f"  {message}"))
    except ExporterError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Exported {source.strip()} to {output}")
