"""Default feed sources: multi-platform outlets first, then platform blogs."""

DEFAULT_FEED_SOURCES: tuple[str, ...] = (
    # General multi-platform outlets
    "https://www.ign.com/rss",
    "https://www.eurogamer.net/api/frontpage.rss",
    "https://www.pcgamer.com/rss/",
    "https://www.polygon.com/rss/index.xml",
    "https://www.theverge.com/games/rss/index.xml",
    "https://kotaku.com/rss",
    "https://www.gamespot.com/feeds/mashup/",
    "https://www.videogameschronicle.com/feed/",
    "https://www.gamesradar.com/rss/",
    "https://www.rockpapershotgun.com/feed",
    "https://www.pcgamesn.com/feed",
    "https://www.destructoid.com/feed/",
    "https://www.gematsu.com/feed",
    "https://www.gameinformer.com/news.xml",
    # Platform-focused official blogs
    "https://blog.playstation.com/feed/",
    "https://news.xbox.com/en-us/feed/",
    "https://www.nintendolife.com/feeds/latest",
    "https://www.pushsquare.com/feeds/latest",
    "https://www.purexbox.com/feeds/latest",
)
