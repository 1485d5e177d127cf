"""
Web target compiler.

Emits an npm package: one JavaScript module with a class per component,
TypeScript declarations, and CSS/Sass style sheets exposing promoted
design tokens.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import asdict
from pathlib import Path
from typing import Any

from ...compiler.analysis import promote_style_tokens
from ...compiler.binding import Binding
from ...compiler.compiler import TargetCompiler, coerce_number
from ...compiler.network import resolve_local_ipv4
from ...compiler.spec import ProcessedComponent, TargetComponentProperty, TargetComponentSpec
from ...compiler.templating import output_template_package, render_template
from ...core.ir import PrimitiveType
from ...core.naming import camel_to_kebab
from .api import CORE_WEB, StyleRuleGroup, StyleTokens, StyleVariable, WebOutput
from .bindings import WEB_BINDINGS

logger = logging.getLogger(__name__)

SCALAR_TYPES = ("string", "number", "boolean")

PRIMITIVE_TYPES = {
    PrimitiveType.STRING: "string",
    PrimitiveType.INT: "number",
    PrimitiveType.FLOAT: "number",
    PrimitiveType.NUMBER: "number",
    PrimitiveType.BOOLEAN: "boolean",
}


def format_literal(type_name: str, value: Any) -> str | None:
    """Render a primitive as a JavaScript literal, or None if the value is not a finite number."""
    if type_name == PrimitiveType.STRING:
        return json.dumps(str(value))
    if type_name == PrimitiveType.BOOLEAN:
        return "true" if value else "false"
    number = coerce_number(value)
    return None if number is None else str(number)


class WebCompiler(TargetCompiler[WebOutput]):
    """Compiler for web targets."""

    name = "web"
    description = "JavaScript package with TypeScript declarations and CSS/Sass tokens"
    sources_root = CORE_WEB
    component_template = "js.component.j2"
    component_suffix = ".js"
    declaration_template = "js.declaration.j2"

    def default_bindings(self) -> Mapping[str, Binding]:
        return WEB_BINDINGS

    def hostname(self) -> str:
        return resolve_local_ipv4()

    @property
    def module_name(self) -> str:
        return f"tessera-{camel_to_kebab(self.output.project_name)}"

    @property
    def hot_component(self) -> str:
        return str(CORE_WEB / "hot" / "component.js")

    @property
    def static_root(self) -> Path:
        return self.output.sdk_root / "static"

    def create_output(self, sdk_root: Path, project_name: str) -> WebOutput:
        return WebOutput(sdk_root=sdk_root, project_name=project_name)

    # =========================================================================
    # Resolution
    # =========================================================================

    def get_primitive(self, type_name: str, value: Any) -> TargetComponentProperty | None:
        target_type = PRIMITIVE_TYPES.get(type_name)
        if target_type is None:
            self.report_unrepresentable(f"Unknown non-component primitive value: {value!r} with type {type_name}")
            return None

        initializer = format_literal(type_name, value)
        if initializer is None:
            self.report_unrepresentable(f"Value {value!r} is not representable as {type_name}")
            return None
        return TargetComponentProperty(type=target_type, initializer=initializer)

    def get_initializer(self, spec: TargetComponentSpec) -> str:
        initializers = ", ".join(f"{name}: {prop.initializer}" for name, prop in spec.properties.items())
        return f"new {spec.component_name}({{{initializers}}})"

    def get_singleton_initializer(self, type_name: str) -> str:
        return f"new {type_name}()"

    def collect_component_properties(
        self, properties: list[TargetComponentProperty | None]
    ) -> TargetComponentProperty | None:
        resolved = [prop for prop in properties if prop is not None]
        if not resolved:
            return None

        return TargetComponentProperty(
            type=f"{resolved[0].type}[]",
            initializer=f"[{', '.join(prop.initializer for prop in resolved)}]",
            updatable=False,
        )

    # =========================================================================
    # Rendering
    # =========================================================================

    def merge_binding_to_output(self, binding: Binding) -> None:
        super().merge_binding_to_output(binding)
        for declaration in binding.declarations:
            self.output.declarations.add(declaration)

    def write_component_declaration(self, processed: ProcessedComponent) -> None:
        filename = self.get_temp_file_name(".d.ts")
        filename.write_text(
            render_template(self.sources_root, self.declaration_template, asdict(processed.spec)),
            encoding="utf-8",
        )
        self.output.declarations.add(filename)

    def get_style_tokens(self) -> StyleTokens:
        """Promote scalar properties and project the style buckets."""
        styles = self.output.styles
        numbers = promote_style_tokens(
            self.output.processed_components,
            styles.variables,
            scalar_types=SCALAR_TYPES,
            number_types=("number",),
        )
        return StyleTokens(
            style_variables=[
                StyleVariable(name=name, value=value, is_number=name in numbers)
                for name, value in styles.variables.items()
            ],
            style_rule_groups=[
                StyleRuleGroup(name=name, rules=list(rules.items()))
                for name, rules in styles.rule_groups.items()
            ],
            style_fonts=[list(values.items()) for values in styles.fonts.values()],
        )

    def write_style_sdk(self, lang: str, tokens: StyleTokens) -> Path:
        """Render styles.<lang> into the static root."""
        static_root = self.hot_static_root if self.program.hot and self.hot_static_root else self.static_root
        static_root.mkdir(parents=True, exist_ok=True)
        path = static_root / f"styles.{lang}"
        path.write_text(
            render_template(self.sources_root, f"styles.{lang}.j2", asdict(tokens)),
            encoding="utf-8",
        )
        return path

    def write_assets(self) -> None:
        super().write_assets()
        tokens = self.get_style_tokens()
        self.write_style_sdk("css", tokens)
        self.write_style_sdk("scss", tokens)

    def write_package(self) -> list[Path]:
        tokens = {
            "module_name": self.module_name,
            "sdk_version": self.program.options.sdk_version,
            "dependencies": [dependency.package_json.model_dump() for dependency in self.output.dependencies],
            "sources": self.read_sources(self.output.sources),
            "declarations": self.read_sources(self.output.declarations),
            "declaration_imports": list(self.output.declaration_imports),
            "static_url": self.output.hot_url,
        }
        return output_template_package(CORE_WEB / "sdk", self.output.sdk_root, tokens)

    # =========================================================================
    # Usage
    # =========================================================================

    def usage_instructions(self) -> str:
        component = next(iter(self.program.local_component_names), "Component")
        style_variable = next(iter(self.output.styles.variables), "variable-name")
        return f"""Tessera package compiled to {self.output.sdk_root}.

You can depend on {self.module_name} in package.json:
{{
  "dependencies": {{
    "{self.module_name}": "*"
  }}
}}

You can use the variables and classes defined by {self.module_name} in your CSS or Sass styles.
  CSS:  rule: var(--{style_variable});
  Sass: rule: ${style_variable};

You can also bootstrap any of the components defined in your project from JavaScript:
new Tessera({component}).attach((component) => {{
  // ...
}});
"""

