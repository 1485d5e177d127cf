"""Tests for dependency merging and output reset."""

from pathlib import Path

from tessera.compiler import AssetBinding, ProcessedComponent, TargetComponentSpec, merge_dependency
from tessera.core.ordered import OrderedSet
from tessera.targets.ios.api import CORE_IOS, IosOutput
from tessera.targets.web.api import CORE_WEB, PackageJsonDependency, WebDependency, WebOutput


def _dependency(name, version):
    return WebDependency(package_json=PackageJsonDependency(name=name, version_constraint=version))


class TestMergeDependency:
    def test_adds_new_dependency(self):
        dependencies = OrderedSet()
        merge_dependency(dependencies, _dependency("lodash", "^4.0.0"))
        assert [d.name for d in dependencies] == ["lodash"]

    def test_idempotent(self):
        dependencies = OrderedSet()
        dependency = _dependency("lodash", "^4.0.0")
        merge_dependency(dependencies, dependency)
        merge_dependency(dependencies, dependency)
        assert list(dependencies) == [dependency]

    def test_first_write_wins_on_name_conflict(self):
        dependencies = OrderedSet()
        first = _dependency("lodash", "^4.0.0")
        merge_dependency(dependencies, first)
        merge_dependency(dependencies, _dependency("lodash", "^3.0.0"))
        assert list(dependencies) == [first]

    def test_preserves_order_of_distinct_names(self):
        dependencies = OrderedSet()
        for name in ("b", "a", "c"):
            merge_dependency(dependencies, _dependency(name, "1"))
        assert [d.name for d in dependencies] == ["b", "a", "c"]


class TestWebOutputClear:
    def test_fresh_output_is_seeded(self):
        output = WebOutput(sdk_root=Path("build"), project_name="palette")
        assert list(output.sources) == [CORE_WEB / "core" / "Tessera.js"]
        assert list(output.declarations) == [CORE_WEB / "core" / "Tessera.d.ts"]

    def test_clear_empties_in_place_and_reseeds(self):
        output = WebOutput(sdk_root=Path("build"), project_name="palette", hot_url="http://1.2.3.4:8081")
        sources = output.sources
        components = output.processed_components

        output.sources.add(Path("A.js"))
        output.declarations.add(Path("A.d.ts"))
        output.declaration_imports.add("{Thing} from 'thing'")
        output.dependencies.add(_dependency("lodash", "^4.0.0"))
        output.asset_bindings["logo.svg"] = AssetBinding(contents="<svg/>")
        output.processed_components["A"] = ProcessedComponent(spec=TargetComponentSpec(component_name="A"))
        output.styles.variables["a-size"] = "4"
        output.styles.rule_groups["a-color"] = {"color": "red"}
        output.styles.fonts["Inter"] = {"font-family": '"Inter"'}

        output.clear()

        assert output.sources is sources
        assert output.processed_components is components
        assert list(output.sources) == [CORE_WEB / "core" / "Tessera.js"]
        assert list(output.declarations) == [CORE_WEB / "core" / "Tessera.d.ts"]
        assert len(output.declaration_imports) == 0
        assert len(output.dependencies) == 0
        assert output.asset_bindings == {}
        assert output.processed_components == {}
        assert output.styles.variables == {}
        assert output.styles.rule_groups == {}
        assert output.styles.fonts == {}
        assert output.hot_url == "http://1.2.3.4:8081"
        assert output.sdk_root == Path("build")
        assert output.project_name == "palette"


class TestIosOutputClear:
    def test_clear_reseeds_runtime_and_foundation(self):
        output = IosOutput(sdk_root=Path("build"), project_name="palette")
        output.imports.add("UIKit")
        output.sources.add(Path("A.swift"))

        output.clear()

        assert list(output.sources) == [CORE_IOS / "core" / "Tessera.swift"]
        assert list(output.imports) == ["Foundation"]
