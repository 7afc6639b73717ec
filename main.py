#!/usr/bin/env python
"""Command-line front end: reload the game news feeds and print a page of results."""

import argparse
import asyncio
import json
import logging
import sys
from collections import Counter
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from gameshelf_news.aggregator import NewsAggregator
from gameshelf_news.config import create_from_config, get_default_config_path, load_config
from gameshelf_news.data import NewsKind, PlatformFilter

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    platform: PlatformFilter | None = None
    kind: NewsKind | None = None
    keywords: list[str] = []
    pages: int = Field(default=1, ge=1)
    as_json: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def _apply_filters(aggregator: NewsAggregator, args: CLIArgs, default_kind: NewsKind | None) -> None:
    kind = args.kind if args.kind is not None else default_kind
    if args.keywords:
        aggregator.set_filters(args.keywords, kind)
    elif args.platform is not None:
        aggregator.set_platform(args.platform, kind)
    elif args.kind is not None:
        aggregator.set_filters(aggregator.filter_keywords, kind)


def _report(aggregator: NewsAggregator, *, as_json: bool) -> None:
    page = aggregator.page
    if as_json:
        rows = [
            {
                "title": e.title,
                "source": e.source,
                "kind": str(e.kind),
                "link": e.link,
                "published": e.published.isoformat() if e.published else None,
                "image": e.image,
            }
            for e in page.items
        ]
        print(json.dumps({"page": page.page, "more": page.can_load_more, "items": rows}, indent=2))
        return

    logger.info(f"\n{len(page.items)} shown, {len(aggregator.all_items)} in pool (page {page.page})\n")
    for n, entry in enumerate(page.items, 1):
        stamp = entry.published.strftime("%Y-%m-%d %H:%M") if entry.published else "undated"
        logger.info(f"{n:>3}. [{entry.kind}] {entry.title}")
        logger.info(f"     {entry.source} | {stamp}")
        if entry.link:
            logger.info(f"     {entry.link}")

    kinds = Counter(str(e.kind) for e in aggregator.all_items)
    if kinds:
        logger.info("\nPool by kind: " + ", ".join(f"{k}={c}" for k, c in kinds.most_common()))
    if page.can_load_more:
        logger.info("More entries available; raise --pages to see them")


async def run(args: CLIArgs) -> None:
    """Reload once, apply the requested filters and page forward.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    aggregator, run_logger = create_from_config(
        config,
        log_override=True if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Reloading {len(aggregator.settings.sources)} feeds ({args.config})")
    await aggregator.reload()

    _apply_filters(aggregator, args, config.filters.kind)
    for _ in range(args.pages - 1):
        if not aggregator.load_more():
            break

    _report(aggregator, as_json=args.as_json)

    if run_logger and run_logger.last_log_path:
        logger.info(f"Reload log written to: {run_logger.last_log_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Aggregate and classify video game news feeds.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--platform",
        "-p",
        choices=[p.value for p in PlatformFilter],
        default=None,
        help="Only show titles mentioning this platform",
    )
    parser.add_argument(
        "--keyword",
        "-k",
        dest="keywords",
        action="append",
        default=[],
        help="Only show titles containing this text (repeatable, any may match)",
    )
    parser.add_argument(
        "--kind",
        choices=[k.value for k in NewsKind],
        default=None,
        help="Only show one kind of article",
    )
    parser.add_argument("--pages", type=int, default=1, help="Pages to show (default: 1)")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print JSON")
    parser.add_argument("--log", action="store_true", help="Write a JSON log of the reload")
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for reload logs (default: logs/)",
    )
    return parser


def main() -> None:
    """Entry point for the CLI."""
    ns = build_parser().parse_args()

    logging.basicConfig(
        level=logging.WARNING if ns.as_json else logging.INFO,
        format="%(message)s",
    )

    try:
        args = CLIArgs(
            config=ns.config or get_default_config_path(),
            platform=ns.platform,
            kind=ns.kind,
            keywords=ns.keywords,
            pages=ns.pages,
            as_json=ns.as_json,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
