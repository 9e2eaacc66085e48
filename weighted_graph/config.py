"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the tunable parts of
the library: where graph files live, how edges are validated, which
search-state strategy searches use and how logging is set up.

Configuration can be overridden via environment variables:
- WG_GRAPH_DATA_DIR=/path/to/data
- WG_GRAPH_SEARCH_STATE=embedded
- WG_SEARCH_DEFAULT_ALGORITHM=dfs
- WG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GraphConfig(BaseSettings):
    """Graph construction and loading configuration.

    Environment variables prefixed with WG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_GRAPH_")

    data_dir: Path = Field(default_factory=Path.cwd)
    input_file: str = "in.txt"
    input_format: Literal["text", "json"] = "text"
    default_cost: Union[int, float] = 1
    allow_negative_costs: bool = False
    symmetric_load: bool = True
    search_state: Literal["context", "embedded"] = "context"

    @property
    def input_path(self) -> Path:
        """Full path to the graph description file."""
        return self.data_dir / self.input_file


class SearchConfig(BaseSettings):
    """Search configuration.

    Environment variables prefixed with WG_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_SEARCH_")

    default_algorithm: Literal["dijkstra", "dfs"] = "dijkstra"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with WG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations are reachable as attributes:

        config = get_config()
        print(config.graph.input_path)
        print(config.search.default_algorithm)

    Environment variables prefixed with WG_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
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


def configure_logging(
    config: Optional[ObservabilityConfig] = None, level: Optional[str] = None
) -> None:
    """Apply the observability settings to the root logger.

    Args:
        config: Logging settings, defaults to the application config.
        level: Optional level name overriding ``config.level``.

    Raises:
        ConfigurationError: If the level is not a standard level name.
    """
    config = config or get_config().observability
    level = (level or config.level).upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {level!r}",
            setting_name="level",
            expected_type=" | ".join(LOG_LEVELS),
        )
    logging.basicConfig(
        level=level,
        format=config.format,
        force=True,
    )
