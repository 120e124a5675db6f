"""Stub Enums - Type-safe Constants.

str-based Enums for JSON compatibility.
"""

from enum import Enum


class ElementKind(str, Enum):
    """Kinds of declared stub elements."""

    CLASS = "class"
    INTERFACE = "interface"
    METHOD = "method"
    CONSTANT = "constant"
    FUNCTION = "function"
    PROPERTY = "property"

    def __str__(self) -> str:
        return self.value


class MarkerKind(str, Enum):
    """Version markers found in documentation comments.

    DEPRECATED is carried on elements but never resolved into a range.
    """

    SINCE = "since"
    REMOVED = "removed"
    DEPRECATED = "deprecated"

    def __str__(self) -> str:
        return self.value


# Kinds that fall back to their enclosing type for version information.
PARENT_SCOPED_KINDS = frozenset({ElementKind.METHOD, ElementKind.CONSTANT})
