"""Tests for singleton detection, singleton rewriting and style promotion."""

from tessera.compiler import Binding, ProcessedComponent, TargetComponentProperty, TargetComponentSpec
from tessera.compiler.analysis import find_singletons, promote_style_tokens, rewrite_singleton_references
from tessera.core.naming import camel_to_kebab, join_to_kebab_case, to_pascal_case
from tessera.core.ordered import OrderedSet


def _processed(name, instances, binding=None, **properties):
    return ProcessedComponent(
        spec=TargetComponentSpec(component_name=name, properties=dict(properties)),
        instances=OrderedSet(instances),
        binding=binding,
    )


class TestFindSingletons:
    def test_single_unbound_instance_is_singleton(self):
        components = {"B": _processed("B", ["b"])}
        assert find_singletons(components) == {"B"}

    def test_multiple_instances_are_not_singletons(self):
        components = {"B": _processed("B", ["b1", "b2"])}
        assert find_singletons(components) == set()

    def test_bound_types_are_never_singletons(self):
        components = {"Color": _processed("Color", ["blue"], binding=Binding())}
        assert find_singletons(components) == set()


class TestRewriteSingletonReferences:
    def test_rewrites_only_singleton_typed_properties(self):
        spec = TargetComponentSpec(
            component_name="A",
            properties={
                "b": TargetComponentProperty(type="B", initializer='new B({x: "hello"})', updatable=True),
                "c": TargetComponentProperty(type="C", initializer="new C({})", updatable=True),
                "label": TargetComponentProperty(type="string", initializer='"A"'),
            },
        )

        rewrite_singleton_references(spec, {"B"}, lambda name: f"new {name}()")

        assert spec.properties["b"].initializer == "new B()"
        assert spec.properties["c"].initializer == "new C({})"
        assert spec.properties["label"].initializer == '"A"'
        assert spec.properties["b"].updatable is True


class TestPromoteStyleTokens:
    def test_promotes_scalars_of_unbound_components(self):
        components = {
            "Palette": _processed(
                "Palette",
                ["palette"],
                primaryTint=TargetComponentProperty(type="string", initializer='"#00f"'),
                gutterWidth=TargetComponentProperty(type="number", initializer="12"),
                shadow=TargetComponentProperty(type="Shadow", initializer="new Shadow()"),
            ),
            "Color": _processed(
                "Color",
                ["blue"],
                binding=Binding(),
                h=TargetComponentProperty(type="number", initializer="0.5"),
            ),
        }
        variables = {"palette-primary": "hsla(0, 0%, 0%, 1)"}

        numbers = promote_style_tokens(
            components, variables, scalar_types=("string", "number", "boolean"), number_types=("number",)
        )

        assert variables == {
            "palette-primary": "hsla(0, 0%, 0%, 1)",
            "palette-primary-tint": '"#00f"',
            "palette-gutter-width": "12",
        }
        assert list(variables) == ["palette-primary", "palette-primary-tint", "palette-gutter-width"]
        assert numbers == {"palette-gutter-width"}


class TestNaming:
    def test_join_to_kebab_case(self):
        assert join_to_kebab_case("Palette", "primaryColor") == "palette-primary-color"
        assert join_to_kebab_case("TextStyles", "h1") == "text-styles-h1"

    def test_camel_to_kebab(self):
        assert camel_to_kebab("fontSize") == "font-size"
        assert camel_to_kebab("DesignSystem") == "design-system"

    def test_to_pascal_case(self):
        assert to_pascal_case("my-design_system") == "MyDesignSystem"
        assert to_pascal_case("palette") == "Palette"


class TestOrderedSet:
    def test_keeps_first_insertion_order(self):
        items = OrderedSet(["b", "a"])
        items.add("c")
        items.add("b")
        assert list(items) == ["b", "a", "c"]

    def test_clear_keeps_identity(self):
        items = OrderedSet(["a"])
        same = items
        items.clear()
        assert same is items
        assert len(items) == 0
