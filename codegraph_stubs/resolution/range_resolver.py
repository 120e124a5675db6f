"""
Range Resolver

Merges documentation markers, source attributes and the single-hop parent
fallback into the first and last version an element is available in.

Precedence:
    - lower bound: minimum over own @since (core only), attribute ``from``,
      and for parent-scoped elements the parent's @since and ``from``
    - upper bound: own attribute ``to`` when declared, replacing everything
      else; otherwise minimum over the documentation bound (newest catalog
      version, or the version before the earliest @removed) merged with the
      parent's upper bound for parent-scoped elements
    - methods documented only through an inherited doc comment resolve to
      None at this level
"""

from structlog.contextvars import bound_contextvars

from codegraph_stubs.catalog import VersionCatalog
from codegraph_stubs.observability import get_logger
from codegraph_stubs.repository import StubRepositoryPort
from codegraph_stubs.resolution.inheritance import InheritanceResolver
from codegraph_stubs.resolution.projectors import (
    latest_version_from_doc,
    latest_versions_from_attribute,
    since_versions_from_attribute,
    since_versions_from_doc,
)
from codegraph_stubs.types.element import StubElement
from codegraph_stubs.types.version import Version

logger = get_logger(__name__)


class RangeResolver:
    """Resolves the declared availability bounds of a single element."""

    def __init__(
        self,
        repository: StubRepositoryPort,
        catalog: VersionCatalog,
        inheritance: InheritanceResolver | None = None,
    ):
        self._catalog = catalog
        self._inheritance = inheritance or InheritanceResolver(repository, catalog)

    @property
    def catalog(self) -> VersionCatalog:
        return self._catalog

    def resolve_since(self, element: StubElement) -> Version | None:
        """
        First version the element is declared available in.

        Returns:
            Earliest candidate, or None when the element defers to an
            inherited doc comment or declares nothing

        Raises:
            UnresolvableReferenceError: parent type cannot be found
        """
        with bound_contextvars(element=element.qualified_name):
            if element.defers_to_inherited_doc():
                logger.debug("since_deferred_to_inherited_doc")
                return None

            candidates = since_versions_from_doc(element) + since_versions_from_attribute(element)
            if element.uses_parent_fallback:
                candidates += self._inheritance.since_versions(element)

            since = min(candidates, default=None)
            logger.debug(
                "since_resolved",
                version=str(since) if since is not None else None,
                candidates=len(candidates),
            )
            return since

    def resolve_latest(self, element: StubElement) -> Version | None:
        """
        Last version the element is declared available in.

        Raises:
            UnresolvableReferenceError: parent type cannot be found
        """
        with bound_contextvars(element=element.qualified_name):
            if element.defers_to_inherited_doc():
                logger.debug("latest_deferred_to_inherited_doc")
                return None

            from_doc = latest_version_from_doc(element, self._catalog)
            if element.uses_parent_fallback:
                from_doc += self._inheritance.latest_versions(element)

            # An attribute "to" is authoritative; doc-derived bounds are not merged in.
            from_attribute = latest_versions_from_attribute(element)
            candidates = from_attribute or from_doc

            latest = min(candidates, default=None)
            logger.debug(
                "latest_resolved",
                version=str(latest) if latest is not None else None,
                source="attribute" if from_attribute else "doc",
            )
            return latest
