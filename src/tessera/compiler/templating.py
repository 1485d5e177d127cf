"""
Jinja2 rendering for compiled packages.

Templates render code, not HTML, so autoescaping is off. Undefined keys
render as empty strings, letting templates treat optional data as absent.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound

from ..core.errors import CompilationError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".j2"


def _environment(root: Path | None = None) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(root)) if root is not None else None,
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_template(root: Path, name: str, data: dict[str, Any]) -> str:
    """
    Render a template file.

    Args:
        root: Directory templates are loaded from
        name: Template name relative to root
        data: Template context

    Raises:
        CompilationError: If the template is missing or fails to render
    """
    try:
        return _environment(root).get_template(name).render(**data)
    except TemplateNotFound as e:
        raise CompilationError(f"Template not found: {root / name}") from e
    except TemplateError as e:
        raise CompilationError(f"Failed to render template {root / name}: {e}") from e


def render_string(source: str, data: dict[str, Any]) -> str:
    """Render an inline template."""
    try:
        return _environment().from_string(source).render(**data)
    except TemplateError as e:
        raise CompilationError(f"Failed to render template string {source!r}: {e}") from e


def output_template_package(template_root: Path, destination: Path, data: dict[str, Any]) -> list[Path]:
    """
    Materialize a package skeleton.

    Every file under ``template_root`` is written to the same relative
    location under ``destination``. Path segments are rendered as
    templates, ``*.j2`` files are rendered (and lose the suffix), other
    files are copied verbatim. Existing files are overwritten.

    Returns:
        Paths of the written files, in sorted template order
    """
    if not template_root.is_dir():
        raise CompilationError(f"Package template not found: {template_root}")

    destination.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for path in sorted(template_root.rglob("*")):
        if not path.is_file():
            continue

        relative = render_string(path.relative_to(template_root).as_posix(), data)
        target = destination / relative
        target.parent.mkdir(parents=True, exist_ok=True)

        if path.suffix == TEMPLATE_SUFFIX:
            target = target.with_suffix("")
            content = render_template(template_root, path.relative_to(template_root).as_posix(), data)
            target.write_text(content, encoding="utf-8")
        else:
            shutil.copyfile(path, target)

        logger.debug("Wrote %s", target)
        written.append(target)

    return written
