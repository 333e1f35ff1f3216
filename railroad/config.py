"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the settings used by the
command line demo: the default railroad map and logging options.

Configuration can be overridden via environment variables:
- RAILROAD_GRAPH_SPECIFICATION="AB1, BC2, CA3"
- RAILROAD_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SPECIFICATION = "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"


class GraphConfig(BaseSettings):
    """Railroad map configuration.

    Environment variables prefixed with RAILROAD_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILROAD_GRAPH_")

    specification: str = DEFAULT_SPECIFICATION


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RAILROAD_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILROAD_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.specification)
        print(config.observability.level)

    Environment variables prefixed with RAILROAD_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILROAD_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
