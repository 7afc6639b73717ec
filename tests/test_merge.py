"""Tests for the merge stage: recency cut, ordering and round-robin."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from gameshelf_news.aggregator import (
    filter_recent,
    group_by_source,
    interleave_round_robin,
    merge_entries,
    sort_newest_first,
)
from gameshelf_news.data import NewsEntry

NOW = datetime(2025, 9, 10, 12, 0, tzinfo=UTC)


def _entry(source: str, hours_ago: float | None, title: str | None = None) -> NewsEntry:
    published = None if hours_ago is None else NOW - timedelta(hours=hours_ago)
    return NewsEntry(
        title=title or f"{source} {hours_ago}",
        source=source,
        link=f"https://{source}/{hours_ago}",
        published=published,
    )


def _sample() -> list[NewsEntry]:
    # A has 3 entries, C has 5, B has 1; A is the most recently active source.
    return [
        _entry("a.com", 1),
        _entry("a.com", 5),
        _entry("a.com", 9),
        _entry("b.com", 3),
        _entry("c.com", 2),
        _entry("c.com", 6),
        _entry("c.com", 10),
        _entry("c.com", 14),
        _entry("c.com", 18),
    ]


def _titles(entries: list[NewsEntry]) -> list[str]:
    return [e.title for e in entries]


class TestFilterRecent:
    """Tests for the recency window."""

    def test_drops_old_entries(self) -> None:
        old = _entry("a.com", 121 * 24)
        fresh = _entry("a.com", 119 * 24)
        assert filter_recent([old, fresh], now=NOW, recency_days=120) == [fresh]

    def test_keeps_undated_entries(self) -> None:
        undated = _entry("a.com", None)
        assert filter_recent([undated], now=NOW, recency_days=0) == [undated]

    def test_boundary_is_inclusive(self) -> None:
        edge = _entry("a.com", 120 * 24)
        assert filter_recent([edge], now=NOW, recency_days=120) == [edge]


class TestSortAndGroup:
    """Tests for ordering and grouping."""

    def test_newest_first_undated_last(self) -> None:
        undated = _entry("a.com", None)
        older = _entry("a.com", 10)
        newer = _entry("a.com", 1)
        assert sort_newest_first([undated, older, newer]) == [newer, older, undated]

    def test_sort_is_stable_for_ties(self) -> None:
        first = _entry("a.com", 1, title="first")
        second = _entry("b.com", 1, title="second")
        assert sort_newest_first([first, second]) == [first, second]

    def test_groups_ordered_by_newest_entry(self) -> None:
        groups = group_by_source(sort_newest_first(_sample()))
        assert [g[0].source for g in groups] == ["a.com", "c.com", "b.com"]
        assert [len(g) for g in groups] == [3, 5, 1]

    def test_undated_only_group_is_last(self) -> None:
        groups = group_by_source(sort_newest_first([_entry("x.com", None), _entry("y.com", 30)]))
        assert [g[0].source for g in groups] == ["y.com", "x.com"]


class TestInterleave:
    """Tests for round-robin interleaving."""

    def test_round_robin_order(self) -> None:
        merged = merge_entries(_sample(), now=NOW, recency_days=120, cap=250)
        assert _titles(merged) == [
            "a.com 1",
            "c.com 2",
            "b.com 3",
            "a.com 5",
            "c.com 6",
            "a.com 9",
            "c.com 10",
            "c.com 14",
            "c.com 18",
        ]

    def test_stops_exactly_at_cap(self) -> None:
        merged = merge_entries(_sample(), now=NOW, recency_days=120, cap=4)
        assert _titles(merged) == ["a.com 1", "c.com 2", "b.com 3", "a.com 5"]

    def test_zero_cap(self) -> None:
        assert merge_entries(_sample(), now=NOW, recency_days=120, cap=0) == []

    def test_no_groups(self) -> None:
        assert interleave_round_robin([], cap=10) == []

    def test_no_source_contributes_twice_per_round(self) -> None:
        groups = group_by_source(sort_newest_first(_sample()))
        merged = interleave_round_robin(groups, cap=250)
        first_round = merged[: len(groups)]
        assert len({e.source for e in first_round}) == len(groups)


class TestMergeEntries:
    """Tests for the full merge."""

    def test_result_independent_of_input_order(self) -> None:
        entries = _sample()
        forward = merge_entries(entries, now=NOW, recency_days=120, cap=250)
        backward = merge_entries(list(reversed(entries)), now=NOW, recency_days=120, cap=250)
        assert [e.id for e in forward] == [e.id for e in backward]

    def test_recency_applied_before_grouping(self) -> None:
        entries = [_entry("a.com", 1), _entry("a.com", 200 * 24), _entry("b.com", 2)]
        merged = merge_entries(entries, now=NOW, recency_days=120, cap=250)
        assert _titles(merged) == ["a.com 1", "b.com 2"]

    def test_undated_entries_trail(self) -> None:
        entries = [_entry("a.com", None, title="undated"), _entry("b.com", 1, title="dated")]
        merged = merge_entries(entries, now=NOW, recency_days=120, cap=250)
        assert _titles(merged) == ["dated", "undated"]

    def test_pool_contains_only_input_entries(self) -> None:
        entries = _sample()
        merged = merge_entries(entries, now=NOW, recency_days=120, cap=250)
        assert {e.id for e in merged} == {e.id for e in entries}
        assert len(merged) == len(entries)
