"""Merging and paging of news from many feed sources."""

from gameshelf_news.aggregator.merge import (
    filter_recent,
    group_by_source,
    interleave_round_robin,
    merge_entries,
    sort_newest_first,
)
from gameshelf_news.aggregator.news import AggregatorSettings, NewsAggregator

__all__ = [
    "AggregatorSettings",
    "NewsAggregator",
    "filter_recent",
    "group_by_source",
    "interleave_round_robin",
    "merge_entries",
    "sort_newest_first",
]
