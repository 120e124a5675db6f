"""Tests for the zero-patch sentinel predicate"""

import pytest

from codegraph_stubs import VersionMarker, is_real_version


class TestIsRealVersion:
    """is_real_version"""

    @pytest.mark.parametrize("text", ["7.4.1", "8.0", "1.0.2", "5.3", "8.10", "7.4.12"])
    def test_real_versions(self, text):
        """Specific versions are real"""
        assert is_real_version(VersionMarker.since(text))

    @pytest.mark.parametrize("text", ["7.4.0", "8.1.0", "0.5", "8", "PECL", "", "7.4.0.1"])
    def test_placeholders_and_garbage(self, text):
        """Zero patch, leading-zero major and non-versions are not"""
        assert not is_real_version(VersionMarker.since(text))

    def test_applies_to_every_marker_kind(self):
        """Removed and deprecated markers use the same rule"""
        assert is_real_version(VersionMarker.removed("8.0"))
        assert not is_real_version(VersionMarker.removed("8.0.0"))
        assert is_real_version(VersionMarker.deprecated("8.1"))
        assert not is_real_version(VersionMarker.deprecated("8.1.0"))
