"""Version markers taken from documentation comments."""

from __future__ import annotations

from dataclasses import dataclass

from codegraph_stubs.types.enums import MarkerKind
from codegraph_stubs.types.version import Version


@dataclass(frozen=True)
class VersionMarker:
    """A ``@since`` / ``@removed`` / ``@deprecated`` tag with its raw version text."""

    kind: MarkerKind
    version: str

    def get_version(self) -> str:
        return self.version

    def parsed_version(self) -> Version | None:
        return Version.try_parse(self.version)

    @classmethod
    def since(cls, version: str) -> VersionMarker:
        return cls(MarkerKind.SINCE, version)

    @classmethod
    def removed(cls, version: str) -> VersionMarker:
        return cls(MarkerKind.REMOVED, version)

    @classmethod
    def deprecated(cls, version: str) -> VersionMarker:
        return cls(MarkerKind.DEPRECATED, version)
