"""Tests for VersionCatalog"""

import pytest

from codegraph_stubs import CatalogError, Version, VersionCatalog


class TestCatalogConstruction:
    """Validation on construction"""

    def test_from_strings(self, catalog):
        """Parsed in order"""
        assert catalog.first() == Version(7, 0)
        assert catalog.last() == Version(8, 3)
        assert len(catalog) == 9

    def test_empty_rejected(self):
        """Empty catalog is a CatalogError"""
        with pytest.raises(CatalogError, match="must not be empty"):
            VersionCatalog([])

    def test_descending_rejected(self):
        """Versions must ascend"""
        with pytest.raises(CatalogError, match="strictly ascending"):
            VersionCatalog.from_strings(["8.0", "7.4"])

    def test_duplicates_rejected(self):
        """Duplicates are not strictly ascending"""
        with pytest.raises(CatalogError) as exc_info:
            VersionCatalog.from_strings(["7.4", "8.0", "8.0"])

        assert exc_info.value.context == {"previous": "8.0", "current": "8.0"}

    def test_single_version(self):
        """One version is both first and last"""
        catalog = VersionCatalog.from_strings(["8.0"])
        assert catalog.first() == catalog.last() == Version(8, 0)


class TestCatalogLookup:
    """Positional lookup"""

    def test_index_of(self, catalog):
        """Position of a member"""
        assert catalog.index_of(Version(7, 0)) == 0
        assert catalog.index_of(Version(8, 2)) == 7

    def test_index_of_non_member(self, catalog):
        """Non-members raise"""
        with pytest.raises(CatalogError, match="not in the catalog"):
            catalog.index_of(Version(7, 5))

    def test_predecessor_of_member(self, catalog):
        """Entry right before a member"""
        assert catalog.predecessor_of(Version(8, 2)) == Version(8, 1)
        assert catalog.predecessor_of(Version(8, 0)) == Version(7, 4)

    def test_predecessor_of_non_member(self, catalog):
        """Greatest entry below a version outside the catalog"""
        assert catalog.predecessor_of(Version(7, 5)) == Version(7, 4)
        assert catalog.predecessor_of(Version(9, 0)) == Version(8, 3)

    def test_predecessor_of_first(self, catalog):
        """Nothing precedes the first entry"""
        assert catalog.predecessor_of(Version(7, 0)) is None
        assert catalog.predecessor_of(Version(5, 6)) is None

    def test_floor(self, catalog):
        """Floor sits below the first entry"""
        assert catalog.floor() == Version(6, 0)
        assert VersionCatalog.from_strings(["5.3", "5.4"]).floor() == Version(5, 2)
        assert catalog.floor() not in catalog

    def test_floor_of_zero_catalog(self):
        """Nothing precedes 0.0"""
        with pytest.raises(CatalogError, match="No version precedes"):
            VersionCatalog.from_strings(["0.0", "0.1"]).floor()

    def test_indexing_and_iteration(self, catalog):
        """Sequence protocol"""
        assert catalog[0] == Version(7, 0)
        assert catalog[-1] == Version(8, 3)
        assert list(catalog)[4] == Version(7, 4)
        assert Version(8, 1) in catalog
        assert Version(6, 0) not in catalog


class TestCatalogBetween:
    """Inclusive range slicing"""

    def test_inclusive_bounds(self, catalog):
        """Both ends included"""
        assert catalog.between(Version(7, 3), Version(8, 0)) == (Version(7, 3), Version(7, 4), Version(8, 0))

    def test_bounds_outside_catalog(self, catalog):
        """Bounds need not be members"""
        assert catalog.between(Version(5, 0), Version(7, 1)) == (Version(7, 0), Version(7, 1))
        assert catalog.between(Version(8, 2), Version(9, 9)) == (Version(8, 2), Version(8, 3))

    def test_inverted_bounds(self, catalog):
        """Upper below lower yields nothing"""
        assert catalog.between(Version(8, 0), Version(7, 4)) == ()

    def test_up_to_floor_is_empty(self, catalog):
        """No entry lies at or below the floor"""
        assert catalog.between(catalog.first(), catalog.floor()) == ()
        assert catalog.between(Version(5, 0), catalog.floor()) == ()
