"""
iOS bindings for the built-in prefab types.
"""

from __future__ import annotations

import json

from ...compiler.assets import encode_file_source, file_assets_binder, resolve_asset
from ...compiler.binding import AssetBinding, Binding
from ...compiler.spec import PropertyReference, TargetComponentSpec
from ...core.ir import ComponentInstance, Program
from .api import CORE_IOS, IosOutput

BINDINGS_ROOT = CORE_IOS / "bindings"

SVG_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta name="viewport" content="width=device-width, initial-scale=1">
<style>html, body {{ margin: 0; padding: 0; }} svg {{ width: 100%; height: 100%; }}</style>
</head>
<body>
{svg}
</body>
</html>
"""


def svg_assets_binder(
    instance: ComponentInstance,
    program: Program,
    output: IosOutput,
    spec: TargetComponentSpec,
    reference: PropertyReference | None,
) -> None:
    """Wrap an SVG in an HTML page that a web view can display."""
    src = instance.values.get("src")
    if not src:
        return
    path = resolve_asset(program, src)
    output.asset_bindings[f"{src}.html"] = AssetBinding(
        contents=SVG_HTML_TEMPLATE.format(svg=path.read_text(encoding="utf-8").strip())
    )


IOS_BINDINGS: dict[str, Binding] = {
    "File": Binding(
        sources=(BINDINGS_ROOT / "File.swift",),
        imports=("Foundation",),
        updatable=False,
        initializer=lambda instance: f"File(withSrc: {json.dumps(instance.values.get('src', ''), ensure_ascii=False)})",
        assets_binder=file_assets_binder,
    ),
    "SVG": Binding(
        sources=(BINDINGS_ROOT / "SVG.swift",),
        imports=("UIKit", "WebKit"),
        updatable=True,
        initializer=lambda instance: f'SVG(withSrc: "{encode_file_source(instance.values.get("src", ""))}")',
        assets_binder=svg_assets_binder,
    ),
    "Color": Binding(
        sources=(BINDINGS_ROOT / "Color.swift",),
        imports=("UIKit",),
        updatable=True,
    ),
    "Font": Binding(
        sources=(BINDINGS_ROOT / "Font.swift",),
        imports=("UIKit", "CoreText"),
        updatable=False,
    ),
    "Typograph": Binding(
        sources=(BINDINGS_ROOT / "Typograph.swift",),
        imports=("UIKit",),
        updatable=False,
    ),
}
