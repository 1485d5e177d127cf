"""
Naming helpers shared by targets.
"""

import re


def camel_to_kebab(name: str) -> str:
    """
    Convert camelCase or PascalCase to kebab-case.

    Args:
        name: camelCase string

    Returns:
        kebab-case string
    """
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1-\2", name)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", s1)
    return re.sub(r"[\s_\-]+", "-", s2).strip("-").lower()


def join_to_kebab_case(*parts: str) -> str:
    """
    Join name parts into one kebab-case identifier.

    ``join_to_kebab_case("Palette", "primaryColor")`` returns
    ``"palette-primary-color"``.
    """
    return "-".join(camel_to_kebab(part) for part in parts if part)


def to_pascal_case(name: str) -> str:
    """Convert a kebab, snake or space separated name to PascalCase."""
    words = re.split(r"[\s_\-]+", name)
    return "".join(word[:1].upper() + word[1:] for word in words if word)
