"""codegraph-stubs - version availability of language stub elements.

Resolves, for a declared stub element, the first and last language version
it is available in and expands that range over the supported catalog.

Quick Start:
    >>> from codegraph_stubs import (
    ...     InMemoryStubRepository, StubsContainer, StubMethod, StubClass, VersionMarker,
    ... )
    >>> repository = InMemoryStubRepository([StubClass("ArrayObject", since_tags=[VersionMarker.since("5.1")])])
    >>> container = StubsContainer(repository=repository)
    >>> method = StubMethod("count", parent_name="ArrayObject")
    >>> container.availability.available_versions(method)[0]
    Version(major=5, minor=3)
"""

__version__ = "0.1.0"  # Keep in sync with pyproject.toml

from codegraph_stubs.catalog import VersionCatalog
from codegraph_stubs.container import StubsContainer
from codegraph_stubs.errors import (
    CatalogError,
    ConfigurationError,
    InvalidElementError,
    InvalidVersionError,
    StubsError,
    UnresolvableReferenceError,
)
from codegraph_stubs.repository import InMemoryStubRepository, StubRepositoryPort
from codegraph_stubs.resolution import (
    AvailabilityEnumerator,
    AvailabilityRange,
    InheritanceResolver,
    RangeResolver,
    is_real_version,
)
from codegraph_stubs.types import (
    AttributeRange,
    ElementKind,
    MarkerKind,
    StubClass,
    StubConstant,
    StubElement,
    StubFunction,
    StubInterface,
    StubMethod,
    StubProperty,
    Version,
    VersionMarker,
)

__all__ = [
    "__version__",
    # Resolution
    "AvailabilityEnumerator",
    "AvailabilityRange",
    "InheritanceResolver",
    "RangeResolver",
    "StubsContainer",
    "is_real_version",
    # Graph
    "AttributeRange",
    "ElementKind",
    "InMemoryStubRepository",
    "MarkerKind",
    "StubClass",
    "StubConstant",
    "StubElement",
    "StubFunction",
    "StubInterface",
    "StubMethod",
    "StubProperty",
    "StubRepositoryPort",
    "Version",
    "VersionCatalog",
    "VersionMarker",
    # Errors
    "CatalogError",
    "ConfigurationError",
    "InvalidElementError",
    "InvalidVersionError",
    "StubsError",
    "UnresolvableReferenceError",
]
