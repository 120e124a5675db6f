"""
Per-element version projections.

Tag projections read an element's own documentation markers (trusted only
for core elements); attribute projections read its declared source range.
Each returns a list of candidates so callers can merge them with ``min``.
"""

from collections.abc import Iterable

from codegraph_stubs.catalog import VersionCatalog
from codegraph_stubs.observability import get_logger
from codegraph_stubs.types.element import StubElement
from codegraph_stubs.types.markers import VersionMarker
from codegraph_stubs.types.version import Version

logger = get_logger(__name__)


def _marker_versions(element: StubElement, markers: Iterable[VersionMarker]) -> list[Version]:
    versions = []
    for marker in markers:
        version = marker.parsed_version()
        if version is None:
            logger.debug(
                "marker_version_unparsable",
                declared_on=element.qualified_name,
                marker=str(marker.kind),
                text=marker.get_version(),
            )
            continue
        versions.append(version)
    return versions


# ==============================================================================
# Documentation tags
# ==============================================================================


def since_versions_from_doc(element: StubElement) -> list[Version]:
    """All ``@since`` versions of a core element."""
    if not element.since_tags or not element.belongs_to_core:
        return []
    return _marker_versions(element, element.since_tags)


def latest_version_from_doc(element: StubElement, catalog: VersionCatalog) -> list[Version]:
    """Last version the documentation says the element exists in.

    Defaults to the newest catalog version. With ``@removed`` markers, the
    catalog version before the earliest removal, or ``catalog.floor()`` when
    the removal is at or before the first catalog version.
    """
    if not element.removed_tags or not element.belongs_to_core:
        return [catalog.last()]

    removed = _marker_versions(element, element.removed_tags)
    if not removed:
        return [catalog.last()]

    removed_in = min(removed)
    last_present = catalog.predecessor_of(removed_in)
    if last_present is None:
        logger.warning(
            "removal_precedes_catalog",
            declared_on=element.qualified_name,
            removed_in=str(removed_in),
            first=str(catalog.first()),
        )
        return [catalog.floor()]
    return [last_present]


# ==============================================================================
# Source attributes
# ==============================================================================


def since_versions_from_attribute(element: StubElement) -> list[Version]:
    attribute_range = element.attribute_range
    if attribute_range is None or attribute_range.from_version is None:
        return []
    return [attribute_range.from_version]


def latest_versions_from_attribute(element: StubElement) -> list[Version]:
    attribute_range = element.attribute_range
    if attribute_range is None or attribute_range.to_version is None:
        return []
    return [attribute_range.to_version]
