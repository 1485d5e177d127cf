"""Tests for the target registry."""

import pytest

from tessera.compiler import TargetRegistry, compile_program, create_compiler, get_registry, list_targets
from tessera.core.errors import CompilationError
from tessera.targets.ios import IosCompiler
from tessera.targets.web import WebCompiler


def test_builtin_targets_are_discovered():
    assert set(list_targets()) >= {"web", "ios"}
    assert get_registry().get("web") is WebCompiler
    assert get_registry().get("ios") is IosCompiler


def test_discover_on_fresh_registry():
    registry = TargetRegistry()
    registry.discover()
    assert registry.list_targets() == ["ios", "web"]


def test_manual_registration():
    registry = TargetRegistry()
    registry.register("browser", WebCompiler)
    assert registry.get("browser") is WebCompiler


def test_duplicate_registration():
    registry = TargetRegistry()
    registry.register("web", WebCompiler)
    with pytest.raises(CompilationError, match="already registered"):
        registry.register("web", IosCompiler)


def test_register_rejects_non_compilers():
    registry = TargetRegistry()
    with pytest.raises(CompilationError, match="must extend TargetCompiler"):
        registry.register("bogus", dict)


def test_unknown_target_lists_available():
    registry = TargetRegistry()
    registry.register("web", WebCompiler)
    with pytest.raises(CompilationError, match=r"Target 'android' not found.*web"):
        registry.get("android")


def test_create_compiler_uses_program_target(make_program, nested_graph):
    assert isinstance(create_compiler(make_program(nested_graph, target="ios")), IosCompiler)
    assert isinstance(create_compiler(make_program(nested_graph, target="web")), WebCompiler)


def test_compile_program(tmp_path, make_program, nested_graph):
    result = compile_program(make_program(nested_graph, project_root=tmp_path))
    assert result.sdk_root == tmp_path / "build" / "tessera-palette-web"
    assert (result.sdk_root / "index.js").is_file()
