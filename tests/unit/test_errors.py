"""Tests for the StubsError hierarchy"""

import pytest

from codegraph_stubs import (
    CatalogError,
    ConfigurationError,
    InvalidElementError,
    InvalidVersionError,
    StubsError,
    UnresolvableReferenceError,
)


class TestStubsError:
    """Coded errors with context"""

    def test_message_and_context(self):
        """Code prefixed message, context kept"""
        error = StubsError(code="TEST", message="Something broke", element="Foo::bar")

        assert str(error) == "[TEST] Something broke"
        assert error.context == {"element": "Foo::bar"}

    def test_repr(self):
        """repr includes context"""
        error = StubsError(code="TEST", message="m", parent_name="Foo")

        assert repr(error) == "StubsError(code='TEST', message='m', parent_name='Foo')"

    @pytest.mark.parametrize(
        "error_cls, code",
        [
            (UnresolvableReferenceError, "UNRESOLVABLE_REFERENCE"),
            (InvalidElementError, "INVALID_ELEMENT"),
            (InvalidVersionError, "INVALID_VERSION"),
            (CatalogError, "CATALOG_ERROR"),
            (ConfigurationError, "CONFIGURATION_ERROR"),
        ],
    )
    def test_subclass_codes(self, error_cls, code):
        """Every subclass has a fixed code and is a StubsError"""
        error = error_cls("message", key="value")

        assert error.code == code
        assert isinstance(error, StubsError)
        assert error.context == {"key": "value"}
