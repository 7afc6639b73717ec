"""Factory functions to create components from configuration."""

from pathlib import Path

from gameshelf_news.aggregator.news import AggregatorSettings, NewsAggregator
from gameshelf_news.config.models import AggregatorConfig, FetcherConfig, GameshelfNewsConfig
from gameshelf_news.fetch.base import FeedFetcher
from gameshelf_news.fetch.http import HttpFeedFetcher
from gameshelf_news.run_logger import RunLogger


def create_fetcher(config: FetcherConfig) -> HttpFeedFetcher:
    """Create an HTTP feed fetcher from config."""
    return HttpFeedFetcher(
        timeout_seconds=config.timeout_seconds,
        user_agent=config.user_agent,
    )


def create_aggregator(
    config: AggregatorConfig,
    fetcher: FeedFetcher,
    run_logger: RunLogger | None = None,
) -> NewsAggregator:
    """Create a news aggregator from config."""
    settings = AggregatorSettings(
        sources=tuple(config.sources),
        recency_days=config.recency_days,
        page_size=config.page_size,
        merge_cap=config.merge_cap,
    )
    return NewsAggregator(fetcher, settings, run_logger=run_logger)


def create_from_config(
    config: GameshelfNewsConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[NewsAggregator, RunLogger | None]:
    """Create a ready-to-reload aggregator from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (aggregator, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    fetcher = create_fetcher(config.fetcher)
    aggregator = create_aggregator(config.aggregator, fetcher, run_logger=run_logger)
    aggregator.set_platform(config.filters.platform, config.filters.kind)
    return (aggregator, run_logger)
