from __future__ import annotations

import asyncio
import logging

import httpx

from gameshelf_news.data import FeedFailure, FeedResult, FeedSuccess
from gameshelf_news.feed import parse_feed

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "GameshelfNews/0.1 (+feed aggregator)"


class HttpFeedFetcher:
    """Fetch RSS/Atom feeds over HTTP with httpx.

    All sources are requested concurrently on one client. A source that
    fails (network error, non-2xx status) becomes a ``FeedFailure``; it is
    never retried.

    Args:
        timeout_seconds: Per-request timeout.
        user_agent: User-Agent header sent with every request.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._timeout = timeout_seconds
        self._user_agent = user_agent

    async def fetch(self, urls: list[str]) -> list[FeedResult]:
        """Fetch and parse the given feed URLs.

        Args:
            urls: Feed URLs to fetch.

        Returns:
            One result per URL, in input order regardless of completion order.
        """
        async with httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": self._user_agent},
            follow_redirects=True,
        ) as client:
            tasks = [self._fetch_single(client, url) for url in urls]
            results = await asyncio.gather(*tasks, return_exceptions=True)

        outcomes: list[FeedResult] = []
        for url, result in zip(urls, results, strict=True):
            if isinstance(result, BaseException):
                logger.warning("Error fetching feed %s. Error: %s", url, result)
                outcomes.append(FeedFailure(url=url, reason=str(result) or type(result).__name__))
                continue
            outcomes.append(result)
        return outcomes

    async def _fetch_single(self, client: httpx.AsyncClient, url: str) -> FeedSuccess:
        """Fetch and parse a single feed."""
        response = await client.get(url)
        response.raise_for_status()
        entries = parse_feed(response.content)
        logger.debug(f"Parsed {len(entries)} entries from {url}")
        return FeedSuccess(url=url, entries=tuple(entries))
