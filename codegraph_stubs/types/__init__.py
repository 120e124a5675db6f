"""Stub element types."""

from codegraph_stubs.types.element import (
    AttributeRange,
    StubClass,
    StubConstant,
    StubElement,
    StubFunction,
    StubInterface,
    StubMethod,
    StubProperty,
)
from codegraph_stubs.types.enums import PARENT_SCOPED_KINDS, ElementKind, MarkerKind
from codegraph_stubs.types.markers import VersionMarker
from codegraph_stubs.types.version import Version

__all__ = [
    "AttributeRange",
    "ElementKind",
    "MarkerKind",
    "PARENT_SCOPED_KINDS",
    "StubClass",
    "StubConstant",
    "StubElement",
    "StubFunction",
    "StubInterface",
    "StubMethod",
    "StubProperty",
    "Version",
    "VersionMarker",
]
