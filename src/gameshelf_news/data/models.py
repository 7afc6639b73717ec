"""Core data models for Gameshelf News."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class NewsKind(StrEnum):
    """Closed set of content categories an entry can be classified into."""

    REVIEW = "review"
    GUIDE = "guide"
    OPINION = "opinion"
    PREVIEW = "preview"
    INTERVIEW = "interview"
    VIDEO = "video"
    DEAL = "deal"
    NEWS = "news"
    FEATURE = "feature"
    OTHER = "other"


class PlatformFilter(StrEnum):
    """Platform shortcuts offered by the news list, mapped to title keywords."""

    ALL = "all"
    PLAYSTATION = "playstation"
    XBOX = "xbox"
    NINTENDO = "nintendo"
    PC = "pc"
    MOBILE = "mobile"

    @property
    def keywords(self) -> list[str]:
        """Lowercase title keywords for this platform (empty for ALL)."""
        return list(_PLATFORM_KEYWORDS[self])


_PLATFORM_KEYWORDS: dict[PlatformFilter, tuple[str, ...]] = {
    PlatformFilter.ALL: (),
    PlatformFilter.PLAYSTATION: ("ps5", "ps4", "playstation", "playstation 5", "playstation 4"),
    PlatformFilter.XBOX: (
        "xbox",
        "xbox series x",
        "xbox series s",
        "series x",
        "series s",
        "xbox one",
    ),
    PlatformFilter.NINTENDO: ("switch", "nintendo switch", "nintendo"),
    PlatformFilter.PC: ("pc", "steam", "epic games store", "epic store", "gog"),
    PlatformFilter.MOBILE: ("iphone", "ios", "ipad", "ipados", "android", "mobile"),
}


def _new_entry_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class NewsEntry:
    """One normalized article parsed from an RSS item or Atom entry.

    ``id`` is minted at construction time and is not derived from content,
    so parsing the same article twice yields two distinct entries.
    """

    title: str
    source: str
    link: str | None = None
    published: datetime | None = None
    image: str | None = None
    tags: tuple[str, ...] = ()
    kind: NewsKind = NewsKind.NEWS
    id: str = field(default_factory=_new_entry_id)


@dataclass(frozen=True)
class FeedResult:
    """Base type for the outcome of fetching a single feed source."""

    url: str


@dataclass(frozen=True)
class FeedSuccess(FeedResult):
    """A feed that was fetched and parsed (possibly partially)."""

    entries: tuple[NewsEntry, ...] = ()


@dataclass(frozen=True)
class FeedFailure(FeedResult):
    """A feed that could not be fetched; it contributes nothing to a reload."""

    reason: str = ""


@dataclass(frozen=True)
class NewsPage:
    """Snapshot of what the presentation layer observes."""

    items: tuple[NewsEntry, ...] = ()
    can_load_more: bool = False
    is_loading: bool = False
    is_loading_more: bool = False
    page: int = 1
