"""Data models for Gameshelf News."""

from gameshelf_news.data.models import (
    FeedFailure,
    FeedResult,
    FeedSuccess,
    NewsEntry,
    NewsKind,
    NewsPage,
    PlatformFilter,
)

__all__ = [
    "FeedFailure",
    "FeedResult",
    "FeedSuccess",
    "NewsEntry",
    "NewsKind",
    "NewsPage",
    "PlatformFilter",
]
