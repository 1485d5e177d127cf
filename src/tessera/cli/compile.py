"""
Compilation commands for the Tessera CLI.

Commands:
- compile: Compile the project's component graph for a target
- targets: List available targets
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from tessera.compiler import create_compiler, get_registry
from tessera.core.config import load_project_config
from tessera.core.errors import TesseraError
from tessera.core.graph_loader import build_program

from .utils import configure_logging

console = Console()


def compile_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory containing tessera.toml (default: current directory)",
    ),
    target: str | None = typer.Option(
        None,
        "--target",
        "-t",
        help="Target to compile for (overrides tessera.toml)",
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None,
        "--output",
        "-o",
        help="Output directory (overrides tessera.toml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Compile the design system into an SDK package.

    Examples:
        tessera compile                 # Compile for the configured target
        tessera compile -t ios          # Compile for iOS
        tessera compile -o ./dist       # Custom output directory
    """
    configure_logging(verbose)

    try:
        config = load_project_config(project_dir.resolve())
        program = build_program(config, target=target, output=output)
        compiler = create_compiler(program)
        result = compiler.start()
    except TesseraError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for warning in result.warnings:
        console.print(f"warning: {warning}", style="yellow", markup=False, highlight=False)

    compiler.print_usage_instructions(console)


def targets_command() -> None:
    """List available compilation targets."""
    registry = get_registry()

    table = Table(title="Targets")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name in registry.list_targets():
        table.add_row(name, registry.get(name).description)

    console.print(table)
