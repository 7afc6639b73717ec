from typing import Protocol

from gameshelf_news.data import FeedResult


class FeedFetcher(Protocol):
    """Interface for fetching and parsing a set of feed sources."""

    async def fetch(self, urls: list[str]) -> list[FeedResult]:
        """Fetch every source concurrently and parse what comes back.

        Args:
            urls: Feed URLs to fetch.

        Returns:
            One ``FeedSuccess`` or ``FeedFailure`` per URL, in input order.
        """
        ...
