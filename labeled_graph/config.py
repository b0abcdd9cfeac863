"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the tunable behavior
of the graph container and its logging.

Configuration can be overridden via environment variables:
- LG_GRAPH_NEIGHBOR_ORDER=sorted
- LG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph traversal configuration.

    Environment variables prefixed with LG_GRAPH_.

    ``neighbor_order`` controls the order in which depth-first and
    breadth-first search expand the outgoing neighbors of a vertex:
    ``"insertion"`` follows edge insertion order, ``"sorted"`` follows
    lexicographic order of the neighbor identifiers.
    """

    model_config = SettingsConfigDict(env_prefix="LG_GRAPH_")

    neighbor_order: Literal["insertion", "sorted"] = "insertion"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with LG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="LG_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.neighbor_order)

    Environment variables prefixed with LG_.
    """

    model_config = SettingsConfigDict(env_prefix="LG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
