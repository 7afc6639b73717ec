"""Tests for data models and URL helpers."""

import dataclasses
from datetime import UTC, datetime

import pytest

from gameshelf_news.data import (
    FeedFailure,
    FeedResult,
    FeedSuccess,
    NewsEntry,
    NewsKind,
    NewsPage,
    PlatformFilter,
)
from gameshelf_news.url import extract_domain


def test_news_entry_minimal() -> None:
    entry = NewsEntry(title="Test title", source="example.com")
    assert entry.title == "Test title"
    assert entry.source == "example.com"
    assert entry.link is None
    assert entry.published is None
    assert entry.image is None
    assert entry.tags == ()
    assert entry.kind == NewsKind.NEWS
    assert entry.id


def test_news_entry_full() -> None:
    published = datetime(2025, 9, 10, 8, 0, tzinfo=UTC)
    entry = NewsEntry(
        title="Astro Bot review",
        source="example.com",
        link="https://example.com/reviews/astro-bot",
        published=published,
        image="https://cdn.example.com/astro.jpg",
        tags=("Reviews", "PS5"),
        kind=NewsKind.REVIEW,
    )
    assert entry.published == published
    assert entry.tags == ("Reviews", "PS5")
    assert entry.kind == "review"


def test_news_entry_identity_is_fresh_per_construction() -> None:
    a = NewsEntry(title="Same", source="example.com", link="https://example.com/a")
    b = NewsEntry(title="Same", source="example.com", link="https://example.com/a")
    assert a.id != b.id
    assert a != b


def test_news_entry_is_frozen() -> None:
    entry = NewsEntry(title="Frozen", source="example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.title = "changed"  # type: ignore[misc]


def test_news_kind_closed_set() -> None:
    assert {k.value for k in NewsKind} == {
        "review",
        "guide",
        "opinion",
        "preview",
        "interview",
        "video",
        "deal",
        "news",
        "feature",
        "other",
    }


def test_platform_filter_keywords() -> None:
    assert PlatformFilter.ALL.keywords == []
    assert PlatformFilter.PLAYSTATION.keywords == [
        "ps5",
        "ps4",
        "playstation",
        "playstation 5",
        "playstation 4",
    ]
    assert PlatformFilter.XBOX.keywords == [
        "xbox",
        "xbox series x",
        "xbox series s",
        "series x",
        "series s",
        "xbox one",
    ]
    assert PlatformFilter.NINTENDO.keywords == ["switch", "nintendo switch", "nintendo"]
    assert PlatformFilter.PC.keywords == ["pc", "steam", "epic games store", "epic store", "gog"]
    assert PlatformFilter.MOBILE.keywords == ["iphone", "ios", "ipad", "ipados", "android", "mobile"]


def test_platform_keywords_cover_older_and_storefront_titles() -> None:
    def matches(platform: PlatformFilter, title: str) -> bool:
        return any(k in title.lower() for k in platform.keywords)

    assert matches(PlatformFilter.PLAYSTATION, "PS4 remaster announced")
    assert matches(PlatformFilter.XBOX, "Xbox One backwards compat")
    assert matches(PlatformFilter.PC, "GOG sale")
    assert matches(PlatformFilter.MOBILE, "New iOS port")
    assert not matches(PlatformFilter.NINTENDO, "New iOS port")


def test_platform_filter_keywords_are_copies() -> None:
    keywords = PlatformFilter.XBOX.keywords
    keywords.append("mutated")
    assert "mutated" not in PlatformFilter.XBOX.keywords


# -- FeedResult hierarchy tests --


def test_feed_success_inherits_result() -> None:
    entry = NewsEntry(title="One", source="example.com")
    result = FeedSuccess(url="https://example.com/rss", entries=(entry,))
    assert isinstance(result, FeedResult)
    assert result.entries == (entry,)


def test_feed_failure_inherits_result() -> None:
    result = FeedFailure(url="https://example.com/rss", reason="timeout")
    assert isinstance(result, FeedResult)
    assert result.reason == "timeout"


def test_news_page_defaults() -> None:
    page = NewsPage()
    assert page.items == ()
    assert page.can_load_more is False
    assert page.is_loading is False
    assert page.is_loading_more is False
    assert page.page == 1


# -- extract_domain tests --


def test_extract_domain_strips_www() -> None:
    assert extract_domain("https://www.example.com/path") == "example.com"


def test_extract_domain_keeps_subdomain() -> None:
    assert extract_domain("https://news.example.com/a") == "news.example.com"


def test_extract_domain_only_strips_leading_www() -> None:
    assert extract_domain("https://blog.www.example.com/") == "blog.www.example.com"


def test_extract_domain_without_host() -> None:
    assert extract_domain("invalid") == ""
    assert extract_domain("") == ""
