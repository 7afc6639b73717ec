"""Streaming RSS 2.0 / Atom parser.

The document is scanned with the SAX event stream (start tag, character
data, end tag) rather than built into a tree. Namespace processing is left
off so vendor tags such as ``media:content``, ``dc:subject`` and
``content:encoded`` arrive under their qualified names.

Each event is handed to ``FeedStateMachine``, which owns the accumulator for
the entry currently being read and turns it into a ``NewsEntry`` when the
entry's end tag arrives.
"""

import logging
import re
import xml.sax
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta, timezone
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import AttributesImpl

from gameshelf_news.classify import infer_kind
from gameshelf_news.data import NewsEntry
from gameshelf_news.url import extract_domain

logger = logging.getLogger(__name__)

ENTRY_TAGS = frozenset({"item", "entry"})
CATEGORY_TAGS = frozenset({"category", "dc:subject"})
MEDIA_IMAGE_TAGS = frozenset({"media:content", "media:thumbnail"})

# Element whose character data is captured -> accumulator field.
_TEXT_FIELDS: dict[str, str] = {
    "title": "title",
    "link": "link",
    "source": "source",
    "pubdate": "published_raw",
    "updated": "published_raw",
    "published": "published_raw",
    "content:encoded": "content",
    "description": "content",
}

# RFC 822 patterns, tried in order before ISO-8601.
_RFC822_FORMATS = (
    "%a, %d %b %Y %H:%M:%S %z",
    "%d %b %Y %H:%M:%S %z",
)
_RFC822_NAMED_ZONE_FORMAT = "%a, %d %b %Y %H:%M:%S"
_NAMED_ZONES: dict[str, int] = {
    "UT": 0,
    "UTC": 0,
    "GMT": 0,
    "Z": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}

_IMG_TAG = re.compile(r"<img", re.IGNORECASE)
_SRC_ATTR = re.compile(r'src="', re.IGNORECASE)


def parse_date(raw: str) -> datetime | None:
    """Parse a feed timestamp.

    Tries the RFC 822 variants seen in RSS feeds first (numeric offset, no
    weekday, named zone) and falls back to ISO-8601. The result is always
    timezone-aware; naive ISO timestamps are taken as UTC.

    Returns:
        The parsed datetime, or None if no pattern matches.
    """
    value = raw.strip()
    if not value:
        return None

    for fmt in _RFC822_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    stamp, _, zone = value.rpartition(" ")
    if zone.upper() in _NAMED_ZONES:
        try:
            parsed = datetime.strptime(stamp, _RFC822_NAMED_ZONE_FORMAT)
        except ValueError:
            pass
        else:
            offset = timezone(timedelta(hours=_NAMED_ZONES[zone.upper()]))
            return parsed.replace(tzinfo=offset)

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def extract_first_image_url(html: str) -> str | None:
    """Sniff the first ``<img src="...">`` URL out of an HTML fragment."""
    img = _IMG_TAG.search(html)
    if img is None:
        return None
    tail = html[img.start() :]
    src = _SRC_ATTR.search(tail)
    if src is None:
        return None
    end = tail.find('"', src.end())
    if end == -1:
        return None
    return tail[src.end() : end]


@dataclass
class EntryAccumulator:
    """Raw state collected for the item/entry currently being parsed."""

    title: str = ""
    link: str = ""
    source: str = ""
    published_raw: str = ""
    media_image: str = ""
    enclosure_image: str = ""
    content: str = ""
    categories: list[str] = field(default_factory=list)
    category_buffer: str = ""
    # Atom entries carry both <published> and <updated>; the first one wins.
    date_captured: bool = False

    def finish(self) -> NewsEntry:
        """Normalize the accumulated fields into a NewsEntry."""
        title = self.title.strip()
        link = self.link.strip()
        source = self.source.strip() or extract_domain(link)

        image = self.media_image or self.enclosure_image
        if not image:
            image = extract_first_image_url(self.content) or ""
        image = image.strip()

        kind = infer_kind(
            title=title,
            link=link,
            categories=self.categories,
            content=self.content,
            source=source,
        )
        return NewsEntry(
            title=title,
            source=source,
            link=link or None,
            published=parse_date(self.published_raw),
            image=image or None,
            tags=tuple(self.categories),
            kind=kind,
        )


class FeedStateMachine:
    """Explicit state machine driven by start / characters / end events.

    ``current`` is None between entries; text outside an entry is ignored.
    ``element`` is the most recently opened element and routes character
    data; any end tag clears it.
    """

    def __init__(self) -> None:
        self.entries: list[NewsEntry] = []
        self.current: EntryAccumulator | None = None
        self.element = ""

    def start(self, name: str, attrs: dict[str, str]) -> None:
        lname = name.lower()
        self.element = lname

        if name in ENTRY_TAGS:
            self.current = EntryAccumulator()
            return

        entry = self.current
        if entry is None:
            return

        if lname in CATEGORY_TAGS:
            entry.category_buffer = ""
        elif lname in MEDIA_IMAGE_TAGS:
            url = attrs.get("url", "")
            if url and not entry.media_image:
                entry.media_image = url
        elif lname == "enclosure":
            url = attrs.get("url", "")
            if "image" in attrs.get("type", "") and url:
                entry.enclosure_image = url
        elif lname == "link":
            href = attrs.get("href", "")
            if href:
                if attrs.get("rel") == "alternate":
                    entry.link = href
                elif not entry.link:
                    entry.link = href

    def characters(self, text: str) -> None:
        entry = self.current
        if entry is None:
            return
        if self.element in CATEGORY_TAGS:
            entry.category_buffer += text
            return
        attr = _TEXT_FIELDS.get(self.element)
        if attr is None or (attr == "published_raw" and entry.date_captured):
            return
        setattr(entry, attr, getattr(entry, attr) + text)

    def end(self, name: str) -> None:
        lname = name.lower()
        entry = self.current
        if entry is not None:
            if lname in CATEGORY_TAGS:
                tag = entry.category_buffer.strip()
                if tag:
                    entry.categories.append(tag)
                entry.category_buffer = ""
            elif _TEXT_FIELDS.get(lname) == "published_raw" and entry.published_raw.strip():
                entry.date_captured = True
            if name in ENTRY_TAGS:
                self.entries.append(entry.finish())
                self.current = None
        self.element = ""


class _SaxFeedHandler(ContentHandler):
    """Adapts SAX callbacks onto a FeedStateMachine."""

    def __init__(self, machine: FeedStateMachine) -> None:
        super().__init__()
        self._machine = machine

    def startElement(self, name: str, attrs: AttributesImpl) -> None:  # noqa: N802
        self._machine.start(name, dict(attrs.items()))

    def characters(self, content: str) -> None:
        self._machine.characters(content)

    def endElement(self, name: str) -> None:  # noqa: N802
        self._machine.end(name)


def parse_feed(data: bytes) -> list[NewsEntry]:
    """Parse one RSS/Atom document into news entries, in document order.

    Parsing is best-effort: if the document turns out to be malformed, the
    entries completed before the error are returned and the entry that was
    in progress is dropped. No parse error reaches the caller.

    Args:
        data: Raw feed bytes.

    Returns:
        The entries that were fully read.
    """
    machine = FeedStateMachine()
    try:
        xml.sax.parseString(data, _SaxFeedHandler(machine))
    except xml.sax.SAXException as e:
        logger.debug(f"Feed parsing stopped after {len(machine.entries)} entries: {e}")
    return machine.entries
