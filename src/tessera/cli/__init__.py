"""
Tessera CLI.

- compile.py: compile and targets commands
- export.py: design-file export command
- utils.py: shared utilities
"""

from __future__ import annotations

import typer

from .compile import compile_command, targets_command
from .export import export_command
from .utils import version_callback

app = typer.Typer(
    help="""Tessera – compile design systems into SDK packages

Commands:
  • compile: Compile tessera.toml's component graph for a target
  • targets: List available targets
  • export:  Export vector assets from a design file
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Tessera CLI main callback for global options."""
    pass


app.command(name="compile")(compile_command)
app.command(name="targets")(targets_command)
app.command(name="export")(export_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main"]
