"""Stub element graph model.

Elements are built once by an external loader (doc tags and source
attributes already parsed) and are immutable afterwards. Parents are
referenced by name and looked up through a repository, never linked
directly.

Variants:
    - StubClass / StubInterface: types that members point at via parent_name
    - StubMethod: may defer entirely to an inherited doc comment
    - StubConstant: class constant when parent_name is set, global otherwise
    - StubFunction / StubProperty: never fall back to a parent
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from codegraph_stubs.types.enums import PARENT_SCOPED_KINDS, ElementKind
from codegraph_stubs.types.markers import VersionMarker
from codegraph_stubs.types.version import Version


@dataclass(frozen=True)
class AttributeRange:
    """Availability declared by a source attribute, e.g. ``from: '7.1', to: '7.4'``."""

    from_version: Version | None = None
    to_version: Version | None = None

    @classmethod
    def of(cls, from_version: str | None = None, to_version: str | None = None) -> AttributeRange:
        return cls(
            from_version=Version.parse(from_version) if from_version is not None else None,
            to_version=Version.parse(to_version) if to_version is not None else None,
        )


@dataclass(frozen=True)
class StubElement:
    """Common shape of every declared stub element.

    ``deprecated_tags`` is carried for consumers that audit deprecation
    markers (e.g. with ``is_real_version``); range resolution never reads it.
    """

    kind: ClassVar[ElementKind]

    name: str
    since_tags: tuple[VersionMarker, ...] = ()
    removed_tags: tuple[VersionMarker, ...] = ()
    deprecated_tags: tuple[VersionMarker, ...] = ()
    attribute_range: AttributeRange | None = None
    belongs_to_core: bool = True
    parent_name: str | None = None

    def __post_init__(self) -> None:
        # Lists accepted, stored as tuples.
        for attr in ("since_tags", "removed_tags", "deprecated_tags"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))

    def defers_to_inherited_doc(self) -> bool:
        """True when the element declares no version information of its own."""
        return False

    @property
    def uses_parent_fallback(self) -> bool:
        """Methods and class constants consult their enclosing type."""
        return self.kind in PARENT_SCOPED_KINDS and bool(self.parent_name)

    @property
    def qualified_name(self) -> str:
        if self.parent_name:
            return f"{self.parent_name}::{self.name}"
        return self.name


@dataclass(frozen=True)
class StubClass(StubElement):
    kind: ClassVar[ElementKind] = ElementKind.CLASS


@dataclass(frozen=True)
class StubInterface(StubElement):
    kind: ClassVar[ElementKind] = ElementKind.INTERFACE


@dataclass(frozen=True)
class StubMethod(StubElement):
    kind: ClassVar[ElementKind] = ElementKind.METHOD

    has_inherited_doc: bool = False

    def defers_to_inherited_doc(self) -> bool:
        return self.has_inherited_doc


@dataclass(frozen=True)
class StubConstant(StubElement):
    kind: ClassVar[ElementKind] = ElementKind.CONSTANT


@dataclass(frozen=True)
class StubFunction(StubElement):
    kind: ClassVar[ElementKind] = ElementKind.FUNCTION


@dataclass(frozen=True)
class StubProperty(StubElement):
    kind: ClassVar[ElementKind] = ElementKind.PROPERTY


__all__ = [
    "AttributeRange",
    "StubClass",
    "StubConstant",
    "StubElement",
    "StubFunction",
    "StubInterface",
    "StubMethod",
    "StubProperty",
]
