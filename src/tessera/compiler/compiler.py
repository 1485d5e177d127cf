"""
Target compiler base class.

A target compiler walks the component graph of a program once, resolves
every property to a target expression, then renders the processed
components into an SDK package:

    start()
      validate_options()
      hostname()                      (hot programs only)
      run()
        clear()
        process_component_instance()  (each local component, recursively)
        write_sdk()
          singleton rewrite, component/declaration templates, bindings
          write_assets()
          write_package()

Targets fill in the abstract hooks; the walk and the render pipeline are
shared.
"""

from __future__ import annotations

import logging
import math
import shutil
import tempfile
import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar

from rich.console import Console

from ..core.errors import CompilationError, GraphError, HostnameResolutionError
from ..core.ir import ComponentInstance, Program, PropertyDeclaration
from .analysis import find_singletons, rewrite_singleton_references
from .binding import Binding, merge_dependency
from .output import TargetOutput
from .spec import (
    ProcessedComponent,
    PropertyReference,
    TargetComponentProperty,
    TargetComponentSpec,
)
from .templating import render_template

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=TargetOutput)


def coerce_number(value: Any, integral: bool = False) -> int | float | None:
    """
    Return value as a finite number, or None when it is not one.

    Booleans are rejected. Whole floats collapse to ints; with ``integral``
    any other float is rejected too.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return None if integral else number


@dataclass
class CompilationResult:
    """
    Result of one compilation run.

    Attributes:
        sdk_root: Directory the package was written to
        files_created: Package files written by the run
        warnings: Non-fatal diagnostics (e.g. omitted properties)
    """

    sdk_root: Path
    files_created: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class TargetCompiler(ABC, Generic[OutputT]):
    """
    Abstract base class for all target compilers.

    Subclasses set ``name``, ``sources_root`` and the template names, and
    implement the abstract hooks.

    Example:
        class MarkdownCompiler(TargetCompiler[TargetOutput]):
            name = "markdown"

            def get_initializer(self, spec):
                return spec.component_name
            ...
    """

    name: ClassVar[str] = "abstract"
    description: ClassVar[str] = "No description provided"
    sources_root: ClassVar[Path]
    component_template: ClassVar[str] = ""
    component_suffix: ClassVar[str] = ".txt"

    def __init__(self, program: Program, bindings: Mapping[str, Binding] | None = None):
        """
        Initialize the compiler.

        Args:
            program: Program to compile
            bindings: Bindings by component type name (defaults to the target's own)
        """
        self.program = program
        self.bindings: dict[str, Binding] = dict(
            self.default_bindings() if bindings is None else bindings
        )
        self.output: OutputT = self.create_output(self.sdk_root_for(program), program.project_name)
        self.hot_static_root: Path | None = None
        self.warnings: list[str] = []
        self._staging_dir: Path | None = None
        self._walk_path: list[str] = []

    # =========================================================================
    # Target hooks
    # =========================================================================

    def validate_options(self) -> None:
        """
        Validate target options before compiling.

        Raises:
            CompilationError: If options are invalid
        """
        pass

    @abstractmethod
    def hostname(self) -> str:
        """Host name the hot server is reachable at."""
        pass

    @property
    @abstractmethod
    def module_name(self) -> str:
        """Name of the generated package or module."""
        pass

    @property
    @abstractmethod
    def hot_component(self) -> str:
        """Reference to the companion module loaded by hot clients."""
        pass

    @property
    @abstractmethod
    def static_root(self) -> Path:
        """Directory static assets are written to."""
        pass

    @abstractmethod
    def create_output(self, sdk_root: Path, project_name: str) -> OutputT:
        """Create the empty output for this target."""
        pass

    @abstractmethod
    def get_primitive(self, type_name: str, value: Any) -> TargetComponentProperty | None:
        """
        Resolve a primitive value.

        Returns None (after report_unrepresentable) for unknown kinds.
        """
        pass

    @abstractmethod
    def get_initializer(self, spec: TargetComponentSpec) -> str:
        """Render the construction of an instance from its resolved spec."""
        pass

    @abstractmethod
    def get_singleton_initializer(self, type_name: str) -> str:
        """Render the zero-argument construction of a type."""
        pass

    @abstractmethod
    def collect_component_properties(
        self, properties: list[TargetComponentProperty | None]
    ) -> TargetComponentProperty | None:
        """Collapse resolved collection elements into one property."""
        pass

    @abstractmethod
    def usage_instructions(self) -> str:
        """Human-readable instructions for consuming the compiled package."""
        pass

    @abstractmethod
    def write_package(self) -> list[Path]:
        """Render the package skeleton into the SDK root."""
        pass

    def default_bindings(self) -> Mapping[str, Binding]:
        """Bindings used when none are passed to the constructor."""
        return {}

    def write_component_declaration(self, processed: ProcessedComponent) -> None:
        """Render the declaration of a component, for targets that have them."""
        pass

    def print_usage_instructions(self, console: Any = None) -> None:
        """Print usage instructions to a rich console."""
        (console or Console()).print(self.usage_instructions(), markup=False, highlight=False)

    def clear(self) -> None:
        """Reset the output before a new run."""
        self.output.clear()
        self.warnings = []
        self._walk_path = []

    # =========================================================================
    # Entry points
    # =========================================================================

    def start(self) -> CompilationResult:
        """Validate options, prepare hot serving if requested, and compile."""
        self.validate_options()
        if self.program.hot:
            self.prepare_hot()
        return self.run()

    def prepare_hot(self) -> None:
        """
        Resolve the hot server URL and hot static root.

        Raises:
            HostnameResolutionError: If the host name cannot be resolved
        """
        try:
            host = self.hostname()
        except OSError as e:
            raise HostnameResolutionError(f"Could not resolve a hostname for hot serving: {e}") from e

        self.output.hot_url = f"http://{host}:{self.program.options.hot_port}"
        self.hot_static_root = self.sdk_root_for(self.program).parent / f".{self.name}-hot" / "static"
        logger.info("Serving hot assets from %s", self.output.hot_url)

    def run(self, program: Program | None = None) -> CompilationResult:
        """
        Compile the program into the SDK root.

        Args:
            program: A new program to compile with this compiler (hot reload)

        Returns:
            CompilationResult
        """
        if program is not None:
            self.program = program

        self.clear()
        logger.info("Compiling %s for target %s", self.program.project_name, self.name)

        with tempfile.TemporaryDirectory(prefix=f"tessera-{self.name}-") as staging:
            self._staging_dir = Path(staging)
            try:
                for component_name in self.program.local_component_names:
                    instance = self.program.graph.get_instance(self.program.roots[component_name])
                    self.process_component_instance(instance, public=True)
                files = self.write_sdk()
            finally:
                self._staging_dir = None

        logger.info("Compiled %d components to %s", len(self.output.processed_components), self.output.sdk_root)
        return CompilationResult(
            sdk_root=self.output.sdk_root,
            files_created=files,
            warnings=list(self.warnings),
        )

    # =========================================================================
    # Graph walk
    # =========================================================================

    def sdk_root_for(self, program: Program) -> Path:
        """Directory the package for this target is written to."""
        return program.project_root / program.options.output_path / f"tessera-{program.project_name}-{self.name}"

    def process_component_instance(
        self,
        instance: ComponentInstance,
        public: bool = False,
        reference: PropertyReference | None = None,
    ) -> TargetComponentSpec:
        """
        Register an instance and resolve its properties.

        The first instance of each type becomes the type's representative
        spec; later instances only add to its instance set.

        Returns:
            TargetComponentSpec resolved for this instance

        Raises:
            GraphError: If the instance is reached again while resolving itself
        """
        if instance.id in self._walk_path:
            cycle = [*self._walk_path[self._walk_path.index(instance.id) :], instance.id]
            raise GraphError(f"Circular reference between instances: {' -> '.join(cycle)}")

        self._walk_path.append(instance.id)
        try:
            return self._resolve_component_instance(instance, public, reference)
        finally:
            self._walk_path.pop()

    def _resolve_component_instance(
        self,
        instance: ComponentInstance,
        public: bool,
        reference: PropertyReference | None,
    ) -> TargetComponentSpec:
        component_type = self.program.graph.get_type(instance.type)
        binding = self.bindings.get(component_type.name)
        spec = TargetComponentSpec(component_name=component_type.name, public=public)

        processed = self.output.processed_components.get(component_type.name)
        if processed is None:
            processed = ProcessedComponent(spec=spec, binding=binding)
            self.output.processed_components[component_type.name] = processed
        elif public:
            processed.spec.public = True
        processed.instances.add(instance.id)

        for declaration in component_type.properties:
            if declaration.name not in instance.values:
                self.report_unrepresentable(
                    f"{component_type.name}.{declaration.name} has no value in instance '{instance.id}'"
                )
                continue
            prop = self.get_target_component_property(
                declaration, instance.values[declaration.name], component_type.name
            )
            if prop is not None:
                spec.properties[declaration.name] = prop

        if binding is not None and binding.assets_binder is not None:
            binding.assets_binder(instance, self.program, self.output, spec, reference)

        return spec

    def get_target_component_property(
        self,
        declaration: PropertyDeclaration,
        value: Any,
        parent_type: str,
        depth: int | None = None,
    ) -> TargetComponentProperty | None:
        """
        Resolve one property value for this target.

        Returns:
            The resolved property, or None if it cannot be represented
        """
        depth = declaration.depth if depth is None else depth
        if depth > 0:
            if not isinstance(value, (list, tuple)):
                self.report_unrepresentable(
                    f"{parent_type}.{declaration.name} expects a list, got {value!r}"
                )
                return None
            return self.collect_component_properties(
                [
                    self.get_target_component_property(declaration, child, parent_type, depth - 1)
                    for child in value
                ]
            )

        if not self.program.graph.is_component(declaration.type):
            return self.get_primitive(declaration.type, value)

        instance = self.program.graph.get_instance(value)
        spec = self.process_component_instance(
            instance, reference=PropertyReference(parent_type=parent_type, name=declaration.name)
        )
        binding = self.bindings.get(declaration.type)
        if binding is not None and binding.initializer is not None:
            initializer = binding.initializer(instance)
        else:
            initializer = self.get_initializer(spec)

        return TargetComponentProperty(
            type=declaration.type,
            initializer=initializer,
            updatable=binding.updatable if binding is not None else True,
        )

    def report_unrepresentable(self, message: str) -> None:
        """Record a property that is omitted from the output."""
        logger.warning(message)
        self.warnings.append(message)

    # =========================================================================
    # Rendering
    # =========================================================================

    def write_sdk(self) -> list[Path]:
        """
        Render processed components and write the package.

        Returns:
            Package files written
        """
        singletons = find_singletons(self.output.processed_components)

        for type_name, processed in self.output.processed_components.items():
            rewrite_singleton_references(processed.spec, singletons, self.get_singleton_initializer)
            self.write_component_source(processed, singleton=processed.spec.public or type_name in singletons)

            if processed.binding is not None:
                self.merge_binding_to_output(processed.binding)
                if processed.binding.declarations:
                    continue

            self.write_component_declaration(processed)

        if self.program.hot:
            self.output.sources.add(Path(self.hot_component))

        self.write_assets()
        return self.write_package()

    def write_component_source(self, processed: ProcessedComponent, singleton: bool) -> None:
        """Render the component template into a staged source file."""
        filename = self.get_temp_file_name(self.component_suffix)
        filename.write_text(
            render_template(
                self.sources_root,
                self.component_template,
                {**asdict(processed.spec), "singleton": singleton},
            ),
            encoding="utf-8",
        )
        self.output.sources.add(filename)

    def merge_binding_to_output(self, binding: Binding) -> None:
        """Fold a binding's sources and dependencies into the output."""
        for source in binding.sources:
            self.output.sources.add(source)

        for dependency in binding.dependencies:
            merge_dependency(self.output.dependencies, dependency)

    def write_assets(self) -> None:
        """
        Materialize every asset binding under the static root.

        Raises:
            CompilationError: If an asset destination is not a relative path inside the root
        """
        root = self.hot_static_root if self.program.hot and self.hot_static_root else self.static_root
        for relative, asset in self.output.asset_bindings.items():
            if Path(relative).is_absolute() or ".." in Path(relative).parts:
                raise CompilationError(f"Asset destination leaves the static root: {relative}")
            destination = root / relative
            destination.parent.mkdir(parents=True, exist_ok=True)
            if asset.copy:
                shutil.copyfile(asset.contents, destination)
            elif isinstance(asset.contents, bytes):
                destination.write_bytes(asset.contents)
            else:
                destination.write_text(asset.contents, encoding="utf-8")
            logger.debug("Wrote asset %s", destination)

    def get_temp_file_name(self, suffix: str = "") -> Path:
        """Allocate a file name in the staging directory of the current run."""
        if self._staging_dir is None:
            raise CompilationError("Staged files can only be created during a run")
        return self._staging_dir / f"{uuid.uuid4().hex}{suffix}"

    def read_sources(self, paths: Any) -> list[str]:
        """
        Read source files in order.

        Raises:
            CompilationError: If a source file is missing
        """
        contents = []
        for path in paths:
            try:
                contents.append(Path(path).read_text(encoding="utf-8"))
            except FileNotFoundError as e:
                raise CompilationError(f"Source file not found: {path}") from e
        return contents
