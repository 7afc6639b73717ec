"""Gameshelf News: game news aggregation, classification and paging from RSS/Atom feeds."""

from gameshelf_news.aggregator import AggregatorSettings, NewsAggregator, merge_entries
from gameshelf_news.classify import infer_kind
from gameshelf_news.config import GameshelfNewsConfig, create_from_config, load_config
from gameshelf_news.data import (
    FeedFailure,
    FeedResult,
    FeedSuccess,
    NewsEntry,
    NewsKind,
    NewsPage,
    PlatformFilter,
)
from gameshelf_news.feed import parse_feed
from gameshelf_news.fetch import FeedFetcher, HttpFeedFetcher
from gameshelf_news.run_logger import RunLogger
from gameshelf_news.sources import DEFAULT_FEED_SOURCES
from gameshelf_news.url import extract_domain

__all__ = [
    # Models
    "FeedFailure",
    "FeedResult",
    "FeedSuccess",
    "NewsEntry",
    "NewsKind",
    "NewsPage",
    "PlatformFilter",
    # Functions
    "extract_domain",
    "infer_kind",
    "merge_entries",
    "parse_feed",
    # Protocols
    "FeedFetcher",
    # Fetchers
    "HttpFeedFetcher",
    # Aggregator
    "AggregatorSettings",
    "DEFAULT_FEED_SOURCES",
    "NewsAggregator",
    # Logging
    "RunLogger",
    # Config
    "GameshelfNewsConfig",
    "create_from_config",
    "load_config",
]
