"""
Singleton and style analysis over processed components.

Both passes need every component of the program, so they run after the
graph walk has finished.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping, MutableMapping

from ..core.naming import join_to_kebab_case
from .spec import ProcessedComponent, TargetComponentSpec


def find_singletons(processed_components: Mapping[str, ProcessedComponent]) -> set[str]:
    """
    Find component types that can be reconstructed at every use site.

    A type qualifies when it was instantiated exactly once and has no
    binding. Bound types may acquire resources on construction and never
    qualify.
    """
    return {
        type_name
        for type_name, component in processed_components.items()
        if len(component.instances) == 1 and component.binding is None
    }


def rewrite_singleton_references(
    spec: TargetComponentSpec,
    singletons: Collection[str],
    construct: Callable[[str], str],
) -> None:
    """
    Replace initializers of singleton-typed properties with a bare construction.

    Args:
        spec: Spec whose properties are rewritten in place
        singletons: Singleton type names
        construct: Renders the zero-argument construction of a type
    """
    for prop in spec.properties.values():
        if prop.type in singletons:
            prop.initializer = construct(prop.type)


def promote_style_tokens(
    processed_components: Mapping[str, ProcessedComponent],
    variables: MutableMapping[str, str],
    scalar_types: Collection[str],
    number_types: Collection[str],
) -> set[str]:
    """
    Promote scalar properties of unbound components to style variables.

    Variable names join the component and property names in kebab case,
    e.g. ``Palette.primaryTint`` becomes ``palette-primary-tint``.

    Returns:
        Names of the promoted variables holding numbers
    """
    numbers: set[str] = set()
    for component_name, component in processed_components.items():
        if component.binding is not None:
            continue
        for property_name, prop in component.spec.properties.items():
            if prop.type not in scalar_types:
                continue
            variable_name = join_to_kebab_case(component_name, property_name)
            variables[variable_name] = prop.initializer
            if prop.type in number_types:
                numbers.add(variable_name)
    return numbers
