"""
Stub Repository Port

Read-only lookup of declared types by name.
Follows Port-Adapter (Hexagonal) architecture pattern: the resolver only
depends on StubRepositoryPort; the harness that loads the stub graph
provides the adapter.
"""

from typing import Protocol

from codegraph_stubs.errors import InvalidElementError
from codegraph_stubs.types.element import StubElement
from codegraph_stubs.types.enums import ElementKind


class StubRepositoryPort(Protocol):
    """
    Port (Interface) for type lookup.

    Implementations (Adapters):
    - InMemoryStubRepository: dict-backed index over an already built graph
    """

    def get_class(self, name: str) -> StubElement | None:
        """
        Look up a class by its declared name.

        Returns:
            The class element, or None if no class has that name
        """
        ...

    def get_interface(self, name: str) -> StubElement | None:
        """
        Look up an interface by its declared name.

        Returns:
            The interface element, or None if no interface has that name
        """
        ...


class InMemoryStubRepository:
    """StubRepositoryPort adapter over in-memory dicts."""

    def __init__(self, elements: list[StubElement] | None = None):
        self._classes: dict[str, StubElement] = {}
        self._interfaces: dict[str, StubElement] = {}
        for element in elements or []:
            self.add(element)

    def add(self, element: StubElement) -> None:
        if element.kind is ElementKind.CLASS:
            self.add_class(element)
        elif element.kind is ElementKind.INTERFACE:
            self.add_interface(element)
        else:
            raise InvalidElementError(
                "Only classes and interfaces can be indexed",
                element=element.qualified_name,
                kind=str(element.kind),
            )

    def add_class(self, element: StubElement) -> None:
        self._check_kind(element, ElementKind.CLASS)
        self._classes[element.name] = element

    def add_interface(self, element: StubElement) -> None:
        self._check_kind(element, ElementKind.INTERFACE)
        self._interfaces[element.name] = element

    def get_class(self, name: str) -> StubElement | None:
        return self._classes.get(name)

    def get_interface(self, name: str) -> StubElement | None:
        return self._interfaces.get(name)

    def __len__(self) -> int:
        return len(self._classes) + len(self._interfaces)

    @staticmethod
    def _check_kind(element: StubElement, expected: ElementKind) -> None:
        if element.kind is not expected:
            raise InvalidElementError(
                f"Expected {expected}, got {element.kind}",
                element=element.qualified_name,
            )
