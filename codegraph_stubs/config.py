"""
codegraph-stubs Configuration

Centralized configuration management using pydantic-settings.
All environment variables use the CODEGRAPH_STUBS_ prefix.

Usage:
    from codegraph_stubs.config import settings

    catalog = settings.build_catalog()
    level = settings.observability.log_level

List values are read from the environment as JSON:
    CODEGRAPH_STUBS_SUPPORTED_VERSIONS='["7.4", "8.0", "8.1"]'
"""

from functools import cached_property
from typing import Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from codegraph_stubs.catalog import VersionCatalog
from codegraph_stubs.errors import CatalogError, ConfigurationError, InvalidVersionError

DEFAULT_SUPPORTED_VERSIONS = [
    "5.3",
    "5.4",
    "5.5",
    "5.6",
    "7.0",
    "7.1",
    "7.2",
    "7.3",
    "7.4",
    "8.0",
    "8.1",
    "8.2",
    "8.3",
    "8.4",
]


class CatalogConfig(BaseModel):
    """Supported language versions, oldest first."""

    supported_versions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUPPORTED_VERSIONS),
        min_length=1,
        description="Strictly ascending version strings",
    )


class ObservabilityConfig(BaseModel):
    """Logging settings."""

    log_level: str = Field(default="INFO", description="stdlib level name")
    log_format: Literal["console", "json"] = Field(default="console", description="structlog renderer")


class StubsSettings(BaseSettings):
    """
    codegraph-stubs Settings

    Grouped access:
        settings.catalog        # CatalogConfig
        settings.observability  # ObservabilityConfig
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CODEGRAPH_STUBS_",
        extra="ignore",
    )

    supported_versions: list[str] = Field(default_factory=lambda: list(DEFAULT_SUPPORTED_VERSIONS))
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @cached_property
    def catalog(self) -> CatalogConfig:
        return CatalogConfig(supported_versions=self.supported_versions)

    @cached_property
    def observability(self) -> ObservabilityConfig:
        return ObservabilityConfig(log_level=self.log_level, log_format=self.log_format)

    def build_catalog(self) -> VersionCatalog:
        """
        Build the version catalog from configuration.

        Raises:
            ConfigurationError: versions are empty, unparsable or out of order
        """
        try:
            return VersionCatalog.from_strings(self.catalog.supported_versions)
        except ValidationError as e:
            raise ConfigurationError(
                "supported_versions is not a valid catalog group",
                supported_versions=self.supported_versions,
                cause=str(e),
            ) from e
        except (CatalogError, InvalidVersionError) as e:
            raise ConfigurationError(
                "supported_versions cannot form a version catalog",
                supported_versions=self.supported_versions,
                cause=e.message,
            ) from e


# Eager loading (module-level instantiation)
settings = StubsSettings()
