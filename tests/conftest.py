"""
Global test configuration and fixtures
"""

import pytest

from codegraph_stubs import (
    AttributeRange,
    AvailabilityEnumerator,
    InMemoryStubRepository,
    RangeResolver,
    StubClass,
    StubInterface,
    VersionCatalog,
    VersionMarker,
)


@pytest.fixture
def catalog() -> VersionCatalog:
    """7.0 … 8.3"""
    return VersionCatalog.from_strings(["7.0", "7.1", "7.2", "7.3", "7.4", "8.0", "8.1", "8.2", "8.3"])


@pytest.fixture
def repository() -> InMemoryStubRepository:
    """Small stub graph with one of each parent shape."""
    return InMemoryStubRepository(
        [
            StubClass("ArrayObject", since_tags=[VersionMarker.since("7.1")]),
            StubClass("WeakMap", attribute_range=AttributeRange.of("8.0", None)),
            StubClass("Legacy", removed_tags=[VersionMarker.removed("8.0")]),
            StubClass("Ancient", removed_tags=[VersionMarker.removed("7.0")]),
            StubClass("Bounded", attribute_range=AttributeRange.of("7.2", "7.4")),
            StubClass("ThirdParty", since_tags=[VersionMarker.since("7.0")], belongs_to_core=False),
            StubClass("Child", since_tags=[VersionMarker.since("8.1")], parent_name="ArrayObject"),
            StubInterface("Stringable", since_tags=[VersionMarker.since("8.0")]),
        ]
    )


@pytest.fixture
def resolver(repository, catalog) -> RangeResolver:
    return RangeResolver(repository, catalog)


@pytest.fixture
def enumerator(resolver, catalog) -> AvailabilityEnumerator:
    return AvailabilityEnumerator(resolver, catalog)


# Pytest hooks
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")


def pytest_collection_modifyitems(config, items):
    """테스트 수집 후 처리"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
