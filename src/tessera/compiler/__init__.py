"""
Target compiler pipeline.

Exposes the TargetCompiler base class, the records it produces, binding
types and the target registry.
"""

from .binding import AssetBinding, Binding, Dependency, merge_dependency
from .compiler import CompilationResult, TargetCompiler
from .output import TargetOutput
from .registry import (
    TargetRegistry,
    compile_program,
    create_compiler,
    get_registry,
    list_targets,
    register_target,
)
from .spec import (
    ProcessedComponent,
    PropertyReference,
    TargetComponentProperty,
    TargetComponentSpec,
)

__all__ = [
    "AssetBinding",
    "Binding",
    "Dependency",
    "merge_dependency",
    "CompilationResult",
    "TargetCompiler",
    "TargetOutput",
    "TargetRegistry",
    "compile_program",
    "create_compiler",
    "get_registry",
    "list_targets",
    "register_target",
    "ProcessedComponent",
    "PropertyReference",
    "TargetComponentProperty",
    "TargetComponentSpec",
]
