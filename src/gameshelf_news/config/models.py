"""Pydantic configuration models for Gameshelf News."""

from pydantic import BaseModel, Field

from gameshelf_news.data import NewsKind, PlatformFilter
from gameshelf_news.fetch.http import DEFAULT_USER_AGENT
from gameshelf_news.sources import DEFAULT_FEED_SOURCES

# ============================================================
# Fetcher Config
# ============================================================


class FetcherConfig(BaseModel):
    """Configuration for HttpFeedFetcher."""

    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    model_config = {"frozen": True}


# ============================================================
# Aggregator Config
# ============================================================


class AggregatorConfig(BaseModel):
    """Configuration for NewsAggregator."""

    sources: list[str] = Field(default_factory=lambda: list(DEFAULT_FEED_SOURCES))
    recency_days: int = Field(default=120, ge=0)
    page_size: int = Field(default=20, ge=1)
    merge_cap: int = Field(default=250, ge=0)

    model_config = {"frozen": True}


class FilterConfig(BaseModel):
    """Filters applied to the aggregator when it is created."""

    platform: PlatformFilter = PlatformFilter.ALL
    kind: NewsKind | None = None

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-reload JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class GameshelfNewsConfig(BaseModel):
    """Root configuration for Gameshelf News."""

    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    aggregator: AggregatorConfig = Field(default_factory=AggregatorConfig)
    filters: FilterConfig = Field(default_factory=FilterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
