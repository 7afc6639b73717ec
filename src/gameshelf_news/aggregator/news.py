"""News aggregator: reloads the merged pool and serves a filtered, paged view."""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from gameshelf_news.aggregator.merge import merge_entries
from gameshelf_news.data import (
    FeedFailure,
    FeedSuccess,
    NewsEntry,
    NewsKind,
    NewsPage,
    PlatformFilter,
)
from gameshelf_news.fetch.base import FeedFetcher
from gameshelf_news.run_logger import RunLogger
from gameshelf_news.sources import DEFAULT_FEED_SOURCES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregatorSettings:
    """Tunables for one aggregator.

    Args:
        sources: Feed URLs fetched on every reload.
        recency_days: Entries older than this (at reload time) are dropped.
        page_size: Entries exposed per page of the visible slice.
        merge_cap: Maximum size of the merged pool.
    """

    sources: tuple[str, ...] = DEFAULT_FEED_SOURCES
    recency_days: int = 120
    page_size: int = 20
    merge_cap: int = 250


class NewsAggregator:
    """Owns the merged news pool and the filtered, paged view over it.

    Flow of a reload:
    1. Clear the pool and the visible slice
    2. Fetch every source concurrently; failed sources are skipped
    3. Merge: recency cut, newest first, round-robin across sources
    4. Commit the pool (unless a newer reload started meanwhile) and
       recompute page 1

    Filter and paging changes recompute the visible slice synchronously.
    While a reload is in flight they are stored and take effect when the
    reload commits; ``load_more`` is ignored.

    Args:
        fetcher: Feed fetcher used for all network I/O.
        settings: Sources, recency window, page size and merge cap.
        run_logger: Optional RunLogger recording each committed reload.
    """

    def __init__(
        self,
        fetcher: FeedFetcher,
        settings: AggregatorSettings | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._settings = settings or AggregatorSettings()
        self._run_logger = run_logger

        self._all_items: list[NewsEntry] = []
        self._items: list[NewsEntry] = []
        self._current_page = 1
        self._filter_keywords: list[str] = []
        self._filter_kind: NewsKind | None = None
        self._can_load_more = False
        self._is_loading = False
        self._is_loading_more = False
        self._generation = 0

    @property
    def settings(self) -> AggregatorSettings:
        return self._settings

    @property
    def items(self) -> tuple[NewsEntry, ...]:
        """The visible slice."""
        return tuple(self._items)

    @property
    def all_items(self) -> tuple[NewsEntry, ...]:
        """The full merged pool of the last committed reload."""
        return tuple(self._all_items)

    @property
    def can_load_more(self) -> bool:
        return self._can_load_more

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_loading_more(self) -> bool:
        return self._is_loading_more

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def filter_keywords(self) -> tuple[str, ...]:
        return tuple(self._filter_keywords)

    @property
    def filter_kind(self) -> NewsKind | None:
        return self._filter_kind

    @property
    def page(self) -> NewsPage:
        """Snapshot of the observable state."""
        return NewsPage(
            items=tuple(self._items),
            can_load_more=self._can_load_more,
            is_loading=self._is_loading,
            is_loading_more=self._is_loading_more,
            page=self._current_page,
        )

    async def reload(
        self,
        *,
        sources: Iterable[str] | None = None,
        now: datetime | None = None,
    ) -> bool:
        """Fetch all sources and rebuild the merged pool.

        Each call takes a new generation number. If another reload starts
        before this one's fetches complete, this one's results are
        discarded and the newer pool is left untouched. If the reload is
        cancelled or raises before committing, the pool stays empty and the
        loading state is cleared (unless a newer reload owns it).

        Args:
            sources: Feed URLs to fetch instead of the configured ones.
            now: Reload instant the recency window is measured from
                (defaults to the current UTC time).

        Returns:
            True if this reload committed its pool, False if it was stale.
        """
        self._generation += 1
        generation = self._generation
        urls = list(sources) if sources is not None else list(self._settings.sources)
        reload_at = now or datetime.now(tz=UTC)

        self._is_loading = True
        self._items = []
        self._all_items = []
        self._can_load_more = False

        try:
            return await self._fetch_and_commit(generation, urls, reload_at)
        finally:
            if generation == self._generation and self._is_loading:
                # Cancelled or failed before commit: release the loading state
                # so filters and paging work again over the empty pool.
                self._is_loading = False
                self._recompute()

    async def _fetch_and_commit(self, generation: int, urls: list[str], reload_at: datetime) -> bool:
        if self._run_logger:
            self._run_logger.start_run(urls)

        t0 = time.monotonic()
        try:
            results = await self._fetcher.fetch(urls)
        except Exception as e:
            logger.warning(f"Error fetching feeds: {str(e)}")
            results = []
        fetch_duration = time.monotonic() - t0

        if generation != self._generation:
            logger.debug(f"Discarding stale reload {generation} (current is {self._generation})")
            return False

        entries: list[NewsEntry] = []
        failed = 0
        for result in results:
            if isinstance(result, FeedSuccess):
                entries.extend(result.entries)
            elif isinstance(result, FeedFailure):
                failed += 1

        if self._run_logger:
            self._run_logger.log_sources(results)
            self._run_logger.log_stage(
                stage="fetch",
                component=type(self._fetcher).__name__,
                input_data=urls,
                output_data={
                    "succeeded": len(results) - failed,
                    "failed": failed,
                    "entry_count": len(entries),
                },
                duration_seconds=fetch_duration,
            )

        t0 = time.monotonic()
        merged = merge_entries(
            entries,
            now=reload_at,
            recency_days=self._settings.recency_days,
            cap=self._settings.merge_cap,
        )
        merge_duration = time.monotonic() - t0

        self._all_items = merged
        self._current_page = 1
        self._is_loading = False
        self._recompute()

        logger.info(
            f"Reloaded {len(merged)} entries from {len(results) - failed}/{len(urls)} sources"
        )

        if self._run_logger:
            self._run_logger.log_stage(
                stage="merge",
                component="round_robin",
                input_data={"entry_count": len(entries)},
                output_data=merged,
                duration_seconds=merge_duration,
            )
            self._run_logger.finish_run(merged)

        return True

    def set_filters(self, keywords: Iterable[str], kind: NewsKind | None = None) -> None:
        """Replace the keyword and kind filters and go back to page 1.

        Args:
            keywords: Title substrings; an entry matches if its title contains
                any of them (case-insensitive). Empty means no keyword filter.
            kind: Only show entries of this kind, or None for all kinds.
        """
        self._filter_keywords = [k.lower() for k in keywords]
        self._filter_kind = kind
        self._current_page = 1
        self._recompute()

    def set_platform(self, platform: PlatformFilter, kind: NewsKind | None = None) -> None:
        """Filter by a platform's title keywords (and optionally a kind)."""
        self.set_filters(platform.keywords, kind)

    def reset_paging(self) -> None:
        """Go back to page 1 with the current filters."""
        self._current_page = 1
        self._recompute()

    def load_more(self) -> bool:
        """Expose one more page of the filtered view.

        Returns:
            True if the page advanced; False when nothing more is available,
            a reload is in flight, or a load-more is already running.
        """
        if self._is_loading or self._is_loading_more or not self._can_load_more:
            return False
        self._is_loading_more = True
        try:
            self._current_page += 1
            self._recompute()
        finally:
            self._is_loading_more = False
        return True

    def _recompute(self) -> None:
        """Derive the visible slice from the pool, filters and current page."""
        if self._is_loading:
            # Deferred until the in-flight reload commits.
            return

        filtered = self._all_items
        if self._filter_kind is not None:
            filtered = [e for e in filtered if e.kind == self._filter_kind]
        if self._filter_keywords:
            filtered = [
                e for e in filtered if any(k in e.title.lower() for k in self._filter_keywords)
            ]

        end = min(len(filtered), self._current_page * self._settings.page_size)
        self._items = filtered[:end]
        self._can_load_more = len(filtered) > len(self._items)
