"""Single-hop fallback to an element's enclosing class or interface."""

from codegraph_stubs.catalog import VersionCatalog
from codegraph_stubs.errors import UnresolvableReferenceError
from codegraph_stubs.repository import StubRepositoryPort
from codegraph_stubs.resolution.projectors import (
    latest_version_from_doc,
    latest_versions_from_attribute,
    since_versions_from_attribute,
    since_versions_from_doc,
)
from codegraph_stubs.types.element import StubElement
from codegraph_stubs.types.version import Version


class InheritanceResolver:
    """
    Looks up an element's parent type and projects its own version data.

    Only the parent's own tags and attribute are read. The parent's parent
    is never consulted.
    """

    def __init__(self, repository: StubRepositoryPort, catalog: VersionCatalog):
        self._repository = repository
        self._catalog = catalog

    def parent_of(self, element: StubElement) -> StubElement:
        """
        Parent type of ``element``: class first, then interface.

        Raises:
            UnresolvableReferenceError: parent_name names no known type
        """
        name = element.parent_name
        parent = self._repository.get_class(name)
        if parent is None:
            parent = self._repository.get_interface(name)
        if parent is None:
            raise UnresolvableReferenceError(
                f"Parent type {name!r} is neither a class nor an interface",
                element=element.qualified_name,
                parent_name=name,
            )
        return parent

    def since_versions(self, element: StubElement) -> list[Version]:
        parent = self.parent_of(element)
        return since_versions_from_doc(parent) + since_versions_from_attribute(parent)

    def latest_versions(self, element: StubElement) -> list[Version]:
        """Parent's attribute ``to`` when declared, else its documentation bound."""
        parent = self.parent_of(element)
        from_attribute = latest_versions_from_attribute(parent)
        if from_attribute:
            return from_attribute
        return latest_version_from_doc(parent, self._catalog)
