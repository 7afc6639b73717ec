"""Feed parsing: raw RSS/Atom bytes to normalized news entries."""

from gameshelf_news.feed.parser import (
    EntryAccumulator,
    FeedStateMachine,
    extract_first_image_url,
    parse_date,
    parse_feed,
)

__all__ = [
    "EntryAccumulator",
    "FeedStateMachine",
    "extract_first_image_url",
    "parse_date",
    "parse_feed",
]
