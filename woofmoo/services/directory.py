"""Directory table: lookup key -> ArchiveRecord.

Tables are plain dicts that are never mutated once published. Refreshes build a
brand-new table off to the side and then swap it into an ArchiveDirectory, so
readers always see either the old or the new table in full.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from woofmoo.config import Settings
from woofmoo.models.archive import ArchiveRecord
from woofmoo.services.crawl.base import ListingEntry
from woofmoo.services.name_normalizer import get_title_synonyms, normalize_key

logger = logging.getLogger(__name__)

DirectoryTable = Dict[str, ArchiveRecord]


def livestream_record(settings: Settings) -> ArchiveRecord:
    return ArchiveRecord(
        announced_title=settings.station_name,
        description=settings.station_name,
        media_url=settings.livestream_url,
    )


def default_table(settings: Settings) -> DirectoryTable:
    """Return the permanent entries every table starts from."""
    live = livestream_record(settings)
    return {normalize_key(k): live for k in settings.livestream_keys}


def ingest(
    entries: Iterable[ListingEntry],
    resolve_media_url: Callable[[str], str],
    *,
    seed: Mapping[str, ArchiveRecord],
    now: datetime,
    description: str = "archive",
    max_workers: int = 8,
) -> DirectoryTable:
    """Build a fresh table from listing entries.

    Incomplete entries are skipped. Playlist links are resolved with at most
    max_workers requests in flight; an entry whose link fails to resolve is
    dropped without affecting the others. Keys are written in listing order so
    the last entry wins on collisions.
    """
    complete: List[ListingEntry] = [e for e in entries if e.is_complete()]
    table: DirectoryTable = dict(seed)
    if not complete:
        return table

    with ThreadPoolExecutor(max_workers=max(1, int(max_workers))) as pool:
        futures = [pool.submit(resolve_media_url, e.link) for e in complete]
        for entry, future in zip(complete, futures):
            try:
                media_url = future.result()
            except Exception as exc:
                logger.warning("Dropping '%s' (%s): %s", entry.title, entry.link, exc)
                continue
            record = ArchiveRecord(
                announced_title=entry.title,
                description=description,
                media_url=media_url,
                date=entry.date,
                discovered_at=now,
            )
            for key in get_title_synonyms(entry.title):
                table[key] = record
    return table


def merge_refresh(current: Mapping[str, ArchiveRecord], fresh: Mapping[str, ArchiveRecord]) -> DirectoryTable:
    """Union of both tables; fresh wins for keys present in both."""
    merged: DirectoryTable = dict(current)
    merged.update(fresh)
    return merged


class ArchiveDirectory:
    """Owner of the live table.

    Reads are lock-free: snapshot() hands out the currently published dict.
    Writers serialize on a lock and publish by rebinding a single attribute.
    """

    def __init__(self, table: Optional[Mapping[str, ArchiveRecord]] = None) -> None:
        self._table: DirectoryTable = dict(table or {})
        self._write_lock = threading.Lock()

    @classmethod
    def with_defaults(cls, settings: Settings) -> "ArchiveDirectory":
        return cls(default_table(settings))

    def snapshot(self) -> Mapping[str, ArchiveRecord]:
        return self._table

    def keys(self) -> List[str]:
        return list(self._table.keys())

    def __len__(self) -> int:
        return len(self._table)

    def lookup(self, query: str) -> Optional[ArchiveRecord]:
        """Exact lookup after key normalization."""
        return self._table.get(normalize_key(query))

    def replace(self, table: Mapping[str, ArchiveRecord]) -> None:
        new_table = dict(table)
        with self._write_lock:
            self._table = new_table

    def merge(self, fresh: Mapping[str, ArchiveRecord]) -> None:
        with self._write_lock:
            self._table = merge_refresh(self._table, fresh)
