"""
iOS target compiler.

Emits a Swift package with one class per component, the native binding
sources, and static assets bundled as package resources.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ...compiler.binding import Binding
from ...compiler.compiler import TargetCompiler, coerce_number
from ...compiler.network import resolve_local_ipv4
from ...compiler.spec import TargetComponentProperty, TargetComponentSpec
from ...compiler.templating import output_template_package
from ...core.errors import CompilationError
from ...core.ir import PrimitiveType
from ...core.naming import to_pascal_case
from .api import CORE_IOS, IosOutput
from .bindings import IOS_BINDINGS

DEFAULT_DEPLOYMENT_TARGET = "13.0"

_VERSION_PATTERN = re.compile(r"^\d+(\.\d+){0,2}$")

PRIMITIVE_TYPES = {
    PrimitiveType.STRING: "String",
    PrimitiveType.INT: "Int",
    PrimitiveType.FLOAT: "CGFloat",
    PrimitiveType.NUMBER: "CGFloat",
    PrimitiveType.BOOLEAN: "Bool",
}


def format_literal(type_name: str, value: Any) -> str | None:
    """Render a primitive as a Swift literal, or None if the value does not fit its kind."""
    if type_name == PrimitiveType.STRING:
        return json.dumps(str(value), ensure_ascii=False)
    if type_name == PrimitiveType.BOOLEAN:
        return "true" if value else "false"
    number = coerce_number(value, integral=type_name == PrimitiveType.INT)
    return None if number is None else str(number)


class IosCompiler(TargetCompiler[IosOutput]):
    """Compiler for iOS targets."""

    name = "ios"
    description = "Swift package for iOS apps"
    sources_root = CORE_IOS
    component_template = "swift.component.j2"
    component_suffix = ".swift"

    def default_bindings(self) -> Mapping[str, Binding]:
        return IOS_BINDINGS

    def validate_options(self) -> None:
        deployment_target = str(self.deployment_target)
        if not _VERSION_PATTERN.match(deployment_target):
            raise CompilationError(
                f"Invalid iOS deployment_target '{deployment_target}'; expected a version such as '13.0'"
            )

    @property
    def deployment_target(self) -> str:
        return str(self.program.options.target_options.get("deployment_target", DEFAULT_DEPLOYMENT_TARGET))

    def hostname(self) -> str:
        return resolve_local_ipv4()

    @property
    def module_name(self) -> str:
        return f"Tessera{to_pascal_case(self.output.project_name)}"

    @property
    def hot_component(self) -> str:
        return str(CORE_IOS / "hot" / "HotComponent.swift")

    @property
    def static_root(self) -> Path:
        return self.output.sdk_root / "Sources" / self.module_name / "Static"

    def create_output(self, sdk_root: Path, project_name: str) -> IosOutput:
        return IosOutput(sdk_root=sdk_root, project_name=project_name)

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
        arguments = ", ".join(f"{name}: {prop.initializer}" for name, prop in spec.properties.items())
        return f"{spec.component_name}({arguments})"

    def get_singleton_initializer(self, type_name: str) -> str:
        return f"{type_name}()"

    def collect_component_properties(
        self, properties: list[TargetComponentProperty | None]
    ) -> TargetComponentProperty | None:
        resolved = [prop for prop in properties if prop is not None]
        if not resolved:
            return None

        return TargetComponentProperty(
            type=f"[{resolved[0].type}]",
            initializer=f"[{', '.join(prop.initializer for prop in resolved)}]",
            updatable=False,
        )

    # =========================================================================
    # Rendering
    # =========================================================================

    def merge_binding_to_output(self, binding: Binding) -> None:
        super().merge_binding_to_output(binding)
        for module in binding.imports:
            self.output.imports.add(module)

    def write_assets(self) -> None:
        # Package.swift always declares the Static resource directory.
        self.static_root.mkdir(parents=True, exist_ok=True)
        super().write_assets()

    def write_package(self) -> list[Path]:
        tokens = {
            "module_name": self.module_name,
            "sdk_version": self.program.options.sdk_version,
            "deployment_target": self.deployment_target,
            "dependencies": [dependency.swift_package.model_dump() for dependency in self.output.dependencies],
            "imports": list(self.output.imports),
            "sources": self.read_sources(self.output.sources),
            "hot_url": self.output.hot_url,
        }
        return output_template_package(CORE_IOS / "sdk", self.output.sdk_root, tokens)

    # =========================================================================
    # Usage
    # =========================================================================

    def usage_instructions(self) -> str:
        component = next(iter(self.program.local_component_names), "Component")
        return f"""Tessera package compiled to {self.output.sdk_root}.

You can depend on {self.module_name} with Swift Package Manager:
    .package(path: "{self.output.sdk_root}")

Then bootstrap any of the components defined in your project:
import {self.module_name}

Tessera({component}()).attach {{ component in
    // ...
}}
"""
