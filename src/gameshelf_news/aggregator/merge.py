"""Recency cut, ordering and fair interleaving of entries from many sources.

Merging works on the complete set of fetched entries, so the result only
depends on the entries themselves and never on the order in which the
sources finished downloading.

Steps:
    1. Drop entries older than the recency window (undated ones are kept).
    2. Sort newest first, undated entries last.
    3. Group by source; order the groups by their newest entry.
    4. Take one entry per group per round until the cap or exhaustion.
"""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from gameshelf_news.data import NewsEntry

_OLDEST = datetime.min.replace(tzinfo=UTC)


def _published_key(entry: NewsEntry) -> datetime:
    return entry.published or _OLDEST


def filter_recent(
    entries: Iterable[NewsEntry],
    *,
    now: datetime,
    recency_days: int,
) -> list[NewsEntry]:
    """Keep entries published within ``recency_days`` of ``now``, plus undated ones."""
    cutoff = now - timedelta(days=recency_days)
    return [e for e in entries if e.published is None or e.published >= cutoff]


def sort_newest_first(entries: Iterable[NewsEntry]) -> list[NewsEntry]:
    """Stable sort by publish time, descending; undated entries sort as oldest."""
    return sorted(entries, key=_published_key, reverse=True)


def group_by_source(entries: Iterable[NewsEntry]) -> list[list[NewsEntry]]:
    """Bucket entries by source label.

    Each bucket keeps the order of its input. Buckets are ordered by the
    publish time of their first entry (descending), so with newest-first
    input the most recently active source leads.
    """
    buckets: dict[str, list[NewsEntry]] = {}
    for entry in entries:
        buckets.setdefault(entry.source, []).append(entry)
    groups = list(buckets.values())
    groups.sort(key=lambda group: _published_key(group[0]), reverse=True)
    return groups


def interleave_round_robin(groups: list[list[NewsEntry]], *, cap: int) -> list[NewsEntry]:
    """Take one entry per non-exhausted group per round, in group order.

    No group contributes a second entry before every other non-exhausted
    group has contributed one in the same round.

    Args:
        groups: Ordered groups of entries.
        cap: Maximum number of entries to return.

    Returns:
        The interleaved entries, at most ``cap`` long.
    """
    mixed: list[NewsEntry] = []
    depth = 0
    while len(mixed) < cap:
        progressed = False
        for group in groups:
            if depth < len(group):
                mixed.append(group[depth])
                progressed = True
                if len(mixed) >= cap:
                    break
        if not progressed:
            break
        depth += 1
    return mixed


def merge_entries(
    entries: Iterable[NewsEntry],
    *,
    now: datetime,
    recency_days: int,
    cap: int,
) -> list[NewsEntry]:
    """Build the merged pool for one reload.

    Args:
        entries: All entries from every successfully fetched source.
        now: The reload instant the recency window is measured from.
        recency_days: Age limit in days.
        cap: Maximum size of the merged pool.

    Returns:
        Recent entries, interleaved fairly across sources.
    """
    recent = filter_recent(entries, now=now, recency_days=recency_days)
    groups = group_by_source(sort_newest_first(recent))
    return interleave_round_robin(groups, cap=cap)
