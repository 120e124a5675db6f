"""Expansion of resolved bounds into concrete catalog versions."""

from __future__ import annotations

from dataclasses import dataclass

from codegraph_stubs.catalog import VersionCatalog
from codegraph_stubs.resolution.range_resolver import RangeResolver
from codegraph_stubs.types.element import StubElement
from codegraph_stubs.types.version import Version


@dataclass(frozen=True)
class AvailabilityRange:
    """Inclusive ``[lower, upper]`` availability of an element."""

    lower: Version
    upper: Version

    @property
    def is_empty(self) -> bool:
        return self.upper < self.lower

    def contains(self, version: Version) -> bool:
        return self.lower <= version <= self.upper

    def __str__(self) -> str:
        return f"[{self.lower}, {self.upper}]"


class AvailabilityEnumerator:
    """Unresolved bounds fall back to the first and last catalog versions."""

    def __init__(self, resolver: RangeResolver, catalog: VersionCatalog | None = None):
        self._resolver = resolver
        self._catalog = catalog if catalog is not None else resolver.catalog

    def availability_range(self, element: StubElement) -> AvailabilityRange:
        lower = self._resolver.resolve_since(element)
        upper = self._resolver.resolve_latest(element)
        return AvailabilityRange(
            lower=lower if lower is not None else self._catalog.first(),
            upper=upper if upper is not None else self._catalog.last(),
        )

    def available_versions(self, element: StubElement | None) -> tuple[Version, ...]:
        """All catalog versions the element exists in, oldest first."""
        if element is None:
            return ()
        bounds = self.availability_range(element)
        return self._catalog.between(bounds.lower, bounds.upper)

    def is_available_in(self, element: StubElement, version: Version) -> bool:
        return version in self.available_versions(element)
