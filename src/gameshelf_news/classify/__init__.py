"""Kind classification for news entries."""

from gameshelf_news.classify.kind import contains_word, infer_kind

__all__ = [
    "contains_word",
    "infer_kind",
]
