"""
Predicate strategies for custom conditions.

A custom condition carries one of these objects instead of a bare lambda so
that compiled rules stay comparable and can be described in API responses.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConstantPredicate:
    """Returns the same decision for any content."""

    name: str
    result: bool

    def __call__(self, content: str, language: str) -> bool:
        return self.result


# Generic quality statements apply to all code
ALWAYS_MATCH = ConstantPredicate(name="always", result=True)

# Fallback rules are recorded but never fire
NEVER_MATCH = ConstantPredicate(name="never", result=False)
