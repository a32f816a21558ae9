"""Background refresh of the archive directory.

Startup does one full rebuild from the archives page, then patches in the
latest items from the feed. After that only the feed is polled, and its
results are merged on top of the live table so the page-seeded week of shows
survives between refreshes.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from woofmoo.config import Settings
from woofmoo.services.crawl.base import ListingError
from woofmoo.services.crawl.fetcher import HttpFetcher
from woofmoo.services.crawl.playlist import PlaylistResolver
from woofmoo.services.crawl.spiders.archive_feed_spider import ArchiveFeedSpider
from woofmoo.services.crawl.spiders.archive_page_spider import ArchivePageSpider
from woofmoo.services.directory import ArchiveDirectory, DirectoryTable, default_table, ingest

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ArchiveRefresher:
    def __init__(
        self,
        directory: ArchiveDirectory,
        *,
        settings: Settings,
        page_spider: ArchivePageSpider,
        feed_spider: ArchiveFeedSpider,
        media_resolver: Callable[[str], str],
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.directory = directory
        self.settings = settings
        self.page_spider = page_spider
        self.feed_spider = feed_spider
        self.media_resolver = media_resolver
        self.clock = clock

    @classmethod
    def from_settings(cls, directory: ArchiveDirectory, settings: Settings) -> "ArchiveRefresher":
        fetcher = HttpFetcher(timeout=settings.http_timeout, headers=settings.http_headers)
        return cls(
            directory,
            settings=settings,
            page_spider=ArchivePageSpider(fetcher, base_url=settings.base_url),
            feed_spider=ArchiveFeedSpider(fetcher, station_name=settings.station_name),
            media_resolver=PlaylistResolver(fetcher),
        )

    def _build(self, entries) -> DirectoryTable:
        return ingest(
            entries,
            self.media_resolver,
            seed=default_table(self.settings),
            now=self.clock(),
            description=self.settings.archive_description,
            max_workers=self.settings.max_workers,
        )

    def rebuild_from_page(self) -> int:
        """Replace the live table with one built from the archives page.

        Raises ListingError if the page cannot be fetched; the live table is
        left untouched in that case.
        """
        logger.info("Refreshing archive list from HTML ...")
        entries = self.page_spider.fetch(self.settings.archive_page_url)
        table = self._build(entries)
        self.directory.replace(table)
        logger.info("Archive page yielded %d entries, %d keys", len(entries), len(table))
        return len(table)

    def refresh_from_feed(self) -> int:
        """Merge the latest feed items over the live table."""
        logger.info("Refreshing archive list from XML ...")
        entries = self.feed_spider.fetch(self.settings.archive_feed_url)
        table = self._build(entries)
        self.directory.merge(table)
        logger.info("Archive feed yielded %d entries, directory now has %d keys", len(entries), len(self.directory))
        return len(table)

    def _attempt(self, step: Callable[[], int]) -> Optional[int]:
        try:
            return step()
        except ListingError as exc:
            logger.warning("Archive listing unavailable, keeping the previous directory: %s", exc)
            return None
        except Exception:
            logger.exception("Archive refresh failed; keeping the previous directory")
            return None

    def run_startup(self) -> None:
        # The page lists the whole week but may hold several recordings of the
        # same daily show; the feed only lists the latest ones.
        self._attempt(self.rebuild_from_page)
        self._attempt(self.refresh_from_feed)

    async def run_forever(self) -> None:
        await asyncio.to_thread(self.run_startup)
        interval = float(self.settings.refresh_interval_seconds)
        while True:
            await asyncio.sleep(interval)
            await asyncio.to_thread(self._attempt, self.refresh_from_feed)
