from gameshelf_news.fetch.base import FeedFetcher
from gameshelf_news.fetch.http import HttpFeedFetcher

__all__ = [
    "FeedFetcher",
    "HttpFeedFetcher",
]
