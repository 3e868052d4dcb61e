"""Library settings and configuration."""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

from loguru import logger
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExecutorKind(StrEnum):
    """Strategy used to run a filter chain over a raster."""

    LOOKUP_TABLE = "lookup_table"
    PER_PIXEL = "per_pixel"


class Settings(BaseSettings):
    """
    Filter pipeline configuration settings.

    Settings can be configured via:

    1. Environment variables (e.g., RGBA_FILTERS_EXECUTOR=per_pixel)
    2. .env file in the project root
    3. Default values defined below

    All settings use the RGBA_FILTERS_ prefix for environment variables.

    .. rubric:: Examples

    Select the reference executor and log call signatures::

        export RGBA_FILTERS_EXECUTOR=per_pixel
        export RGBA_FILTERS_VERBOSE_LOGGING=true
    """

    executor: Annotated[
        ExecutorKind,
        Field(
            default=ExecutorKind.LOOKUP_TABLE,
            description="Default strategy used to process rasters",
        ),
    ]

    verbose_logging: Annotated[
        bool,
        Field(
            default=False,
            description="If True, log the signature of every logged railway call at debug level.",
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="RGBA_FILTERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        validate_assignment=True,
        extra="ignore",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def library_version(self) -> str:
        """
        Get the library version from package metadata.

        :return: The version from pyproject.toml.
                 Falls back to "0.0.0" if the package is not installed.
        """
        try:
            return version("rgba-filters")
        except PackageNotFoundError:
            logger.warning("Could not determine package version, using fallback '0.0.0'")
            return "0.0.0"

    def log_startup_config(self) -> None:
        """Log the effective configuration."""
        logger.info("=" * 60)
        logger.info("Filter pipeline configuration:")
        logger.info(f"  Version: {self.library_version}")
        logger.info(f"  Executor: {self.executor}")
        logger.info(f"  Verbose logging: {self.verbose_logging}")
        logger.info("=" * 60)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    The effective configuration is logged once, when the settings are first
    loaded.

    :return: The settings instance shared by the whole library.
    """
    settings = Settings()  # type: ignore
    settings.log_startup_config()
    return settings
