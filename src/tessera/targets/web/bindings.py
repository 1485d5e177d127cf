"""
Web bindings for the built-in prefab types.

Color, Font and Typograph asset binders fill the style buckets so that
prefab values are also reachable from CSS and Sass.
"""

from __future__ import annotations

import json
from typing import Any

from ...compiler.assets import encode_file_source, file_assets_binder
from ...compiler.binding import Binding
from ...compiler.spec import PropertyReference, TargetComponentSpec
from ...core.designsystem import color_to_css
from ...core.ir import ComponentInstance, Program
from ...core.naming import join_to_kebab_case
from .api import CORE_WEB, WebOutput

BINDINGS_ROOT = CORE_WEB / "bindings"


def get_qualified_css_url(output: WebOutput, relative_path: str) -> str:
    """
    Return a CSS url() for an asset in the static root.

    Without a hot URL, static assets are assumed to be served by the host
    application at ``/tessera``.
    """
    return f'url("{output.hot_url or "/tessera"}/{encode_file_source(relative_path)}")'


def color_assets_binder(
    instance: ComponentInstance,
    program: Program,
    output: WebOutput,
    spec: TargetComponentSpec,
    reference: PropertyReference | None,
) -> None:
    """Expose a referenced color as a style variable and helper classes."""
    if reference is None:
        return
    name = join_to_kebab_case(reference.parent_type, reference.name)
    output.styles.variables[name] = color_to_css(instance.values)
    output.styles.rule_groups[f"{name}-color"] = {"color": f"var(--{name})"}
    output.styles.rule_groups[f"{name}-background-color"] = {"background-color": f"var(--{name})"}


def font_assets_binder(
    instance: ComponentInstance,
    program: Program,
    output: WebOutput,
    spec: TargetComponentSpec,
    reference: PropertyReference | None,
) -> None:
    """Register an @font-face rule for a font file."""
    font_file = program.graph.get_instance(instance.values["file"])
    name = instance.values["name"]
    output.styles.fonts[name] = {
        "font-family": json.dumps(name),
        "src": get_qualified_css_url(output, font_file.values["src"]),
    }


def typograph_assets_binder(
    instance: ComponentInstance,
    program: Program,
    output: WebOutput,
    spec: TargetComponentSpec,
    reference: PropertyReference | None,
) -> None:
    """Expose a referenced typograph as a style class."""
    if reference is None:
        return
    font = program.graph.get_instance(instance.values["font"])
    values: dict[str, Any] = {"font-family": json.dumps(font.values["name"])}
    if "fontSize" in instance.values:
        values["font-size"] = f"{instance.values['fontSize']}px"
    if "color" in instance.values:
        values["color"] = color_to_css(program.graph.get_instance(instance.values["color"]).values)
    output.styles.rule_groups[join_to_kebab_case(reference.parent_type, reference.name)] = values


def _binding(name: str, **kwargs: Any) -> Binding:
    return Binding(
        sources=(BINDINGS_ROOT / f"{name}.js",),
        declarations=(BINDINGS_ROOT / f"{name}.d.ts",),
        **kwargs,
    )


WEB_BINDINGS: dict[str, Binding] = {
    "File": _binding("File", assets_binder=file_assets_binder),
    "SVG": _binding("SVG", assets_binder=file_assets_binder),
    "Color": _binding("Color", assets_binder=color_assets_binder),
    "Font": _binding("Font", assets_binder=font_assets_binder),
    "Typograph": _binding("Typograph", assets_binder=typograph_assets_binder),
}
