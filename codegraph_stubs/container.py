"""
Dependency Injection Container

Builds the version catalog once and wires resolvers around an injected
stub repository.

Usage:
    from codegraph_stubs.container import StubsContainer

    container = StubsContainer(repository=repository)
    versions = container.availability.available_versions(element)
"""

from functools import cached_property

from codegraph_stubs.catalog import VersionCatalog
from codegraph_stubs.config import StubsSettings, settings as default_settings
from codegraph_stubs.observability import get_logger, setup_logging
from codegraph_stubs.repository import InMemoryStubRepository, StubRepositoryPort
from codegraph_stubs.resolution.availability import AvailabilityEnumerator
from codegraph_stubs.resolution.inheritance import InheritanceResolver
from codegraph_stubs.resolution.range_resolver import RangeResolver

logger = get_logger(__name__)


class StubsContainer:
    """Lazy singletons for one stub graph and one catalog."""

    def __init__(
        self,
        settings: StubsSettings | None = None,
        repository: StubRepositoryPort | None = None,
        catalog: VersionCatalog | None = None,
        configure_logging: bool = False,
    ):
        self._settings = settings or default_settings
        self._repository = repository
        self._catalog = catalog
        if configure_logging:
            setup_logging(
                level=self._settings.observability.log_level,
                format=self._settings.observability.log_format,
            )

    @property
    def settings(self) -> StubsSettings:
        return self._settings

    @cached_property
    def catalog(self) -> VersionCatalog:
        catalog = self._catalog if self._catalog is not None else self._settings.build_catalog()
        logger.debug("catalog_ready", first=str(catalog.first()), last=str(catalog.last()), size=len(catalog))
        return catalog

    @cached_property
    def repository(self) -> StubRepositoryPort:
        if self._repository is None:
            return InMemoryStubRepository()
        return self._repository

    @cached_property
    def inheritance(self) -> InheritanceResolver:
        return InheritanceResolver(self.repository, self.catalog)

    @cached_property
    def range_resolver(self) -> RangeResolver:
        return RangeResolver(self.repository, self.catalog, inheritance=self.inheritance)

    @cached_property
    def availability(self) -> AvailabilityEnumerator:
        return AvailabilityEnumerator(self.range_resolver, self.catalog)
