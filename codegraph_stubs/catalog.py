"""Supported language version catalog.

Owned by the surrounding harness: built once, read-only afterwards.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator, Sequence

from codegraph_stubs.errors import CatalogError
from codegraph_stubs.types.version import Version


class VersionCatalog(Sequence[Version]):
    """Strictly ascending, non-empty sequence of supported versions."""

    def __init__(self, versions: Iterable[Version]):
        self._versions: tuple[Version, ...] = tuple(versions)
        if not self._versions:
            raise CatalogError("Version catalog must not be empty")
        for previous, current in zip(self._versions, self._versions[1:]):
            if current <= previous:
                raise CatalogError(
                    "Version catalog must be strictly ascending",
                    previous=str(previous),
                    current=str(current),
                )

    @classmethod
    def from_strings(cls, versions: Iterable[str]) -> VersionCatalog:
        return cls(Version.parse(v) for v in versions)

    def first(self) -> Version:
        return self._versions[0]

    def last(self) -> Version:
        return self._versions[-1]

    def index_of(self, version: Version) -> int:
        position = bisect_left(self._versions, version)
        if position == len(self._versions) or self._versions[position] != version:
            raise CatalogError("Version is not in the catalog", version=str(version))
        return position

    def predecessor_of(self, version: Version) -> Version | None:
        """Greatest catalog version strictly below ``version``.

        For a catalog member this is the entry right before it. ``None`` when
        ``version`` is at or below the first entry.
        """
        position = bisect_left(self._versions, version)
        if position == 0:
            return None
        return self._versions[position - 1]

    def floor(self) -> Version:
        """A version below every catalog entry.

        Stands in for "last available" of elements removed at or before the
        first entry, so ranges ending there contain no catalog versions.
        """
        first = self.first()
        if first.minor > 0:
            return Version(first.major, first.minor - 1)
        if first.major > 0:
            return Version(first.major - 1, 0)
        raise CatalogError("No version precedes the catalog", first=str(first))

    def between(self, lower: Version, upper: Version) -> tuple[Version, ...]:
        """Catalog entries with ``lower <= v <= upper``, in catalog order."""
        if upper < lower:
            return ()
        start = bisect_left(self._versions, lower)
        end = bisect_right(self._versions, upper)
        return self._versions[start:end]

    def __getitem__(self, index):
        return self._versions[index]

    def __len__(self) -> int:
        return len(self._versions)

    def __iter__(self) -> Iterator[Version]:
        return iter(self._versions)

    def __contains__(self, version: object) -> bool:
        return version in self._versions

    def __repr__(self) -> str:
        return f"VersionCatalog({', '.join(str(v) for v in self._versions)})"
