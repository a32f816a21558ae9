from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, timezone
from typing import List, Optional

from woofmoo.config import Settings
from woofmoo.services.directory import default_table, ingest

from .base import ListingEntry
from .fetcher import HttpFetcher
from .playlist import PlaylistResolver
from .spiders.archive_feed_spider import ArchiveFeedSpider
from .spiders.archive_page_spider import ArchivePageSpider


def _print_entries(entries: List[ListingEntry]) -> None:
    for e in entries:
        print(json.dumps(e.to_dict(), ensure_ascii=False))


def main(argv: Optional[list] = None) -> int:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Parse archive listings")
    sub = parser.add_subparsers(dest="cmd", required=True)

    page = sub.add_parser("page", help="Parse the recent archives HTML page")
    feed = sub.add_parser("feed", help="Parse the MP3 archive RSS feed")
    for p, default_url in ((page, settings.archive_page_url), (feed, settings.archive_feed_url)):
        src = p.add_mutually_exclusive_group()
        src.add_argument("--url", default=None, help=f"Listing URL (default {default_url})")
        src.add_argument("--file", help="Local listing file path")
        p.add_argument("--resolve", action="store_true", help="Resolve playlist links and print the directory table")

    args = parser.parse_args(argv)
    fetcher = HttpFetcher(timeout=settings.http_timeout, headers=settings.http_headers)
    if args.cmd == "page":
        spider = ArchivePageSpider(fetcher, base_url=settings.base_url)
        default_url = settings.archive_page_url
    else:
        spider = ArchiveFeedSpider(fetcher, station_name=settings.station_name)
        default_url = settings.archive_feed_url

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            entries = spider.parse(f.read())
    else:
        entries = spider.fetch(args.url or default_url)

    if not args.resolve:
        _print_entries(entries)
        return 0

    table = ingest(
        entries,
        PlaylistResolver(fetcher),
        seed=default_table(settings),
        now=datetime.now(timezone.utc),
        description=settings.archive_description,
        max_workers=settings.max_workers,
    )
    for key, record in table.items():
        print(json.dumps({"key": key, **record.to_dict()}, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
