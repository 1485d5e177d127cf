"""
Target registry.

Targets are TargetCompiler subclasses. Built-in targets are discovered
from the ``tessera.targets`` package; integrators can register their own.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from pathlib import Path

from ..core.errors import CompilationError
from ..core.ir import Program
from .compiler import CompilationResult, TargetCompiler

logger = logging.getLogger(__name__)


class TargetRegistry:
    """
    Registry for target compilers.

    Supports:
    - Manual registration via register()
    - Auto-discovery of targets in the tessera.targets package
    - Lookup by name
    """

    def __init__(self) -> None:
        self._targets: dict[str, type[TargetCompiler]] = {}

    def register(self, name: str, compiler_class: type[TargetCompiler]) -> None:
        """
        Register a target compiler class.

        Raises:
            CompilationError: If name already registered or class invalid
        """
        if name in self._targets:
            raise CompilationError(
                f"Target '{name}' is already registered. Cannot register {compiler_class.__name__}."
            )

        if not (inspect.isclass(compiler_class) and issubclass(compiler_class, TargetCompiler)):
            raise CompilationError(f"Target class {compiler_class!r} must extend TargetCompiler")

        self._targets[name] = compiler_class

    def get(self, name: str) -> type[TargetCompiler]:
        """
        Get a target compiler class by name.

        Raises:
            CompilationError: If target not found
        """
        if name not in self._targets:
            available = self.list_targets()
            raise CompilationError(f"Target '{name}' not found. Available targets: {available}")

        return self._targets[name]

    def list_targets(self) -> list[str]:
        """List all registered target names."""
        return list(self._targets.keys())

    def discover(self) -> None:
        """
        Register every TargetCompiler subclass found in tessera.targets subpackages.

        Targets register under their ``name`` attribute.
        """
        targets_dir = Path(__file__).parent.parent / "targets"
        for subdir in sorted(targets_dir.iterdir()):
            if not subdir.is_dir() or subdir.name.startswith(("_", ".")):
                continue
            if not (subdir / "__init__.py").exists():
                continue
            self._try_register_module(subdir.name)

    def _try_register_module(self, module_name: str) -> None:
        """Import a target package and register the compilers it exports."""
        try:
            module = importlib.import_module(f"tessera.targets.{module_name}")
        except ImportError:
            # Targets may depend on optional packages
            logger.debug("Skipping target package %s", module_name, exc_info=True)
            return

        for _name, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, TargetCompiler) and obj is not TargetCompiler:
                if obj.name not in self._targets:
                    self.register(obj.name, obj)


_registry: TargetRegistry | None = None


def get_registry() -> TargetRegistry:
    """
    Get the global target registry.

    Performs auto-discovery on first call.
    """
    global _registry
    if _registry is None:
        _registry = TargetRegistry()
        _registry.discover()
    return _registry


def register_target(name: str, compiler_class: type[TargetCompiler]) -> None:
    """Register a target in the global registry."""
    get_registry().register(name, compiler_class)


def list_targets() -> list[str]:
    """List all available target names."""
    return get_registry().list_targets()


def create_compiler(program: Program) -> TargetCompiler:
    """Instantiate the compiler for the target named in the program options."""
    return get_registry().get(program.options.target)(program)


def compile_program(program: Program) -> CompilationResult:
    """
    Compile a program for the target named in its options.

    Raises:
        CompilationError: If the target is unknown or compilation fails
    """
    return create_compiler(program).start()
