"""Configuration module for Gameshelf News."""

from gameshelf_news.config.factory import create_aggregator, create_fetcher, create_from_config
from gameshelf_news.config.loader import get_default_config_path, load_config
from gameshelf_news.config.models import (
    AggregatorConfig,
    FetcherConfig,
    FilterConfig,
    GameshelfNewsConfig,
    LoggingConfig,
)

__all__ = [
    "AggregatorConfig",
    "FetcherConfig",
    "FilterConfig",
    "GameshelfNewsConfig",
    "LoggingConfig",
    "create_aggregator",
    "create_fetcher",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
