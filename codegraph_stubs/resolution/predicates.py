"""Version marker predicates."""

import re

from codegraph_stubs.types.markers import VersionMarker

# "7.4", "7.4.1", "8.0" but not "7.4.0" (placeholder) or "0.5"
_REAL_VERSION = re.compile(r"^[1-9]+\.\d+(\.[1-9]+\d*)*$")


def is_real_version(marker: VersionMarker) -> bool:
    """True unless the marker carries a zero-patch placeholder version.

    Stubs use ``x.y.0`` to mean "introduced, version not recorded", not
    "introduced in patch 0".
    """
    return _REAL_VERSION.match(marker.get_version()) is not None
