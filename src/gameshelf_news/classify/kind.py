"""Heuristic content-kind classification for news entries.

The rules form a fixed-priority decision list: the first rule that matches
decides the kind. Keyword sets overlap between kinds, so the order matters.
Preview is checked before Review because "review" is a substring of
"preview".
"""

import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from gameshelf_news.data import NewsKind

PREVIEW_TOKENS = (
    "preview",
    "hands-on",
    "hands on",
    "first look",
    "first-look",
    "impressions",
    "first impressions",
    "förhandstitt",
)
PREVIEW_LINK_SEGMENTS = ("/preview/", "/previews/", "/hands-on/")

REVIEW_WORDS = ("review", "recension", "anmeldelse", "recensione")
REVIEW_LINK_SEGMENTS = ("/review/", "/reviews/", "/recension/", "/tests/")
# Outlets title patch notes and score aggregates with "review" too.
NEGATIVE_REVIEW_PHRASES = (
    "roundup",
    "round-up",
    "scores",
    "review scores",
    "score roundup",
    "patch notes",
    "update notes",
    "update:",
    "hotfix",
    "changelog",
)

GUIDE_WORDS = ("guide", "walkthrough")
GUIDE_TOKENS = ("tips ", "how to", "how-to", "explained", "build guide", "tier list", "best build")
GUIDE_LINK_SEGMENTS = ("/guide/", "/guides/", "/how-to/", "/walkthrough/")

OPINION_WORDS = ("opinion", "editorial", "commentary", "op-ed", "op ed", "krönika")

INTERVIEW_TOKENS = ("interview", "q&a")

VIDEO_TOKENS = ("trailer", "gameplay", "watch the", "video:", "livestream")

DEAL_TOKENS = ("deal", "reapris", "sale", "discount", "offer", "bundle", "free weekend")

FEATURE_WORDS = ("feature",)
FEATURE_TOKENS = ("in-depth", "retrospective", "history of", "behind the scenes", "ranking")

# Outlets whose category metadata is too terse; their title prefixes are trusted.
PREFIXED_TITLE_SOURCES = ("nintendolife.com", "pushsquare.com", "purexbox.com")


@lru_cache(maxsize=64)
def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


def contains_word(text: str, word: str) -> bool:
    """Whole-word, case-insensitive match (so "review" never matches "preview")."""
    return _word_pattern(word).search(text) is not None


def _has_any(text: str, tokens: Iterable[str]) -> bool:
    return any(token in text for token in tokens)


def _has_any_word(text: str, words: Iterable[str]) -> bool:
    return any(contains_word(text, word) for word in words)


def _categories_contain(categories: Sequence[str], words: Iterable[str]) -> bool:
    words = tuple(words)
    return any(word in category for category in categories for word in words)


def infer_kind(
    title: str,
    link: str,
    categories: Sequence[str],
    content: str,
    source: str = "",
) -> NewsKind:
    """Classify an entry from its title, link, declared categories and content body.

    Args:
        title: Entry title.
        link: Article URL (may be empty).
        categories: Category labels declared by the feed.
        content: Raw content/description HTML.
        source: Source label, used only for outlet-specific title prefixes.

    Returns:
        The first matching kind, or ``NewsKind.NEWS`` when nothing matches.
    """
    title_lc = title.lower()
    link_lc = link.lower()
    source_lc = source.lower()
    cats_lc = [c.lower() for c in categories]
    haystack = " ".join([title_lc, link_lc, " ".join(cats_lc), content.lower()])

    if (
        _has_any(haystack, PREVIEW_TOKENS)
        or _categories_contain(cats_lc, ("preview", "previews"))
        or _has_any(link_lc, PREVIEW_LINK_SEGMENTS)
    ):
        return NewsKind.PREVIEW

    url_is_review = _has_any(link_lc, REVIEW_LINK_SEGMENTS)
    strong_title_review = (
        title_lc.startswith(("review:", "recension:")) or title_lc.endswith(" review")
    )
    if url_is_review or strong_title_review:
        return NewsKind.REVIEW
    if _has_any_word(title_lc, REVIEW_WORDS) and not _has_any(haystack, NEGATIVE_REVIEW_PHRASES):
        return NewsKind.REVIEW

    if (
        _has_any_word(haystack, GUIDE_WORDS)
        or _has_any(haystack, GUIDE_TOKENS)
        or _categories_contain(cats_lc, ("guide", "guides"))
        or _has_any(link_lc, GUIDE_LINK_SEGMENTS)
    ):
        return NewsKind.GUIDE

    if _has_any_word(haystack, OPINION_WORDS) or _categories_contain(
        cats_lc, ("opinion", "editorial")
    ):
        return NewsKind.OPINION

    if (
        _has_any(haystack, INTERVIEW_TOKENS)
        or _categories_contain(cats_lc, ("interview",))
        or "/interview/" in link_lc
    ):
        return NewsKind.INTERVIEW

    if (
        _has_any(haystack, VIDEO_TOKENS)
        or _categories_contain(cats_lc, ("video",))
        or "/trailer/" in link_lc
    ):
        return NewsKind.VIDEO

    if (
        _has_any(haystack, DEAL_TOKENS)
        or _categories_contain(cats_lc, ("deal", "deals"))
        or "/deals/" in link_lc
    ):
        return NewsKind.DEAL

    if (
        _has_any_word(haystack, FEATURE_WORDS)
        or _has_any(haystack, FEATURE_TOKENS)
        or _categories_contain(cats_lc, ("feature",))
    ):
        return NewsKind.FEATURE

    if any(outlet in source_lc for outlet in PREFIXED_TITLE_SOURCES):
        if title_lc.startswith("review:"):
            return NewsKind.REVIEW
        if title_lc.startswith("preview:"):
            return NewsKind.PREVIEW

    return NewsKind.NEWS
