"""
Built-in design-system prefab types.

Prefabs are component types every project can use without declaring
them. Each target ships a binding for every prefab.
"""

from __future__ import annotations

from .ir import ComponentType, PropertyDeclaration


def _type(type_name: str, /, **properties: str) -> ComponentType:
    return ComponentType(
        name=type_name,
        properties=[PropertyDeclaration(name=key, type=value) for key, value in properties.items()],
    )


FILE = _type("File", src="string", type="string")
COLOR = _type("Color", h="float", s="float", l="float", a="float")
SVG = _type("SVG", src="string")
FONT = _type("Font", file="File", name="string")
TYPOGRAPH = _type("Typograph", font="Font", fontSize="float", color="Color")

PREFAB_TYPES: dict[str, ComponentType] = {
    prefab.name: prefab for prefab in (FILE, COLOR, SVG, FONT, TYPOGRAPH)
}


def color_to_css(values: dict) -> str:
    """Render Color instance values as a CSS hsla() expression."""
    h = values.get("h", 0)
    s = values.get("s", 0)
    l = values.get("l", 0)  # noqa: E741
    a = values.get("a", 1)
    return f"hsla({_fmt(h * 360)}, {_fmt(s * 100)}%, {_fmt(l * 100)}%, {_fmt(a)})"


def _fmt(value: float) -> str:
    rounded = round(float(value), 4)
    if rounded == int(rounded):
        return str(int(rounded))
    return str(rounded)
