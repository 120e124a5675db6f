"""
Standardized Error Handling for codegraph-stubs

Hierarchical exception classes with error codes and context.
"""

from typing import Any


class StubsError(Exception):
    """Base exception for all codegraph-stubs errors.

    Includes error code for programmatic handling and context for debugging.

    Example:
        raise StubsError(
            code="UNRESOLVABLE_REFERENCE",
            message="Parent type not found",
            element="Foo::bar",
            parent_name="Foo",
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def __repr__(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r}, {ctx_str})"


# ==============================================================================
# Graph Errors
# ==============================================================================


class UnresolvableReferenceError(StubsError):
    """Element names a parent type that is neither a known class nor interface.

    The stub graph is internally inconsistent; resolution must stop.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="UNRESOLVABLE_REFERENCE", message=message, **context)


class InvalidElementError(StubsError):
    """Element of the wrong kind handed to a repository."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="INVALID_ELEMENT", message=message, **context)


# ==============================================================================
# Version / Catalog Errors
# ==============================================================================


class InvalidVersionError(StubsError, ValueError):
    """Version text that cannot be read as major.minor."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="INVALID_VERSION", message=message, **context)


class CatalogError(StubsError):
    """Invalid catalog construction or lookup."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="CATALOG_ERROR", message=message, **context)


# ==============================================================================
# Configuration Errors
# ==============================================================================


class ConfigurationError(StubsError):
    """Error in configuration."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, **context)
