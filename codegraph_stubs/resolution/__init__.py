"""Version range resolution for stub elements."""

from codegraph_stubs.resolution.availability import AvailabilityEnumerator, AvailabilityRange
from codegraph_stubs.resolution.inheritance import InheritanceResolver
from codegraph_stubs.resolution.predicates import is_real_version
from codegraph_stubs.resolution.projectors import (
    latest_version_from_doc,
    latest_versions_from_attribute,
    since_versions_from_attribute,
    since_versions_from_doc,
)
from codegraph_stubs.resolution.range_resolver import RangeResolver

__all__ = [
    "AvailabilityEnumerator",
    "AvailabilityRange",
    "InheritanceResolver",
    "RangeResolver",
    "is_real_version",
    "latest_version_from_doc",
    "latest_versions_from_attribute",
    "since_versions_from_attribute",
    "since_versions_from_doc",
]
