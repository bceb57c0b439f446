"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TG_GRAPH_DATA_DIR=/path/to/data
- TG_GRAPH_ROADS_FILE=towns.txt
- TG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Road data configuration.

    Environment variables prefixed with TG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TG_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    roads_file: str = "towns.txt"
    encoding: str = "utf-8"

    @property
    def roads_path(self) -> Path:
        """Full path to the default road file."""
        return self.data_dir / self.roads_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TG_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def resolve_level(self) -> int:
        """Translate ``level`` into a ``logging`` level number.

        Raises:
            ConfigurationError: If the level name is unknown.
        """
        level = logging.getLevelName(self.level.upper())
        if not isinstance(level, int):
            raise ConfigurationError(
                f"Unknown log level: {self.level}",
                setting_name="TG_LOG_LEVEL",
                expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
            )
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.roads_path)

    Environment variables prefixed with TG_.
    """

    model_config = SettingsConfigDict(env_prefix="TG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: ObservabilityConfig) -> None:
    """Configure the root logger from ``config``."""
    logging.basicConfig(level=config.resolve_level(), format=config.format)
