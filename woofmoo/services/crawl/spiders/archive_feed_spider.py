from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import List, Optional

from ..base import ListingEntry, ListingError, TextFetcher, Spider

_WITH_RE = re.compile(r"(.+) with (.+)")


@dataclass(frozen=True)
class ArchiveTitle:
    title: str
    date: str


def strip_cohosts(title: str) -> str:
    """Drop trailing ' with <co-host>' clauses until none are left."""
    while True:
        m = _WITH_RE.search(title)
        if not m:
            return title
        title = m.group(1)


def parse_archive_title(text: Optional[str], station_name: str = "WFMU") -> Optional[ArchiveTitle]:
    """Split a feed item title like 'WFMU MP3 Archive: Wake from Monday 1/1'.

    Returns None when the text does not follow the archive title pattern.
    """
    if not text:
        return None
    pattern = re.escape(station_name) + r" MP3 Archive: (.+) from (.+)"
    m = re.search(pattern, text)
    if not m:
        return None
    return ArchiveTitle(title=strip_cohosts(m.group(1)), date=m.group(2))


class ArchiveFeedSpider(Spider):
    """Parser for the MP3 archive RSS feed.

    The feed only covers the most recent recordings, but it is cheap to poll,
    so it drives the periodic refresh.
    """

    name = "archive_feed"

    def __init__(self, fetcher: TextFetcher, *, station_name: str = "WFMU") -> None:
        super().__init__(fetcher)
        self.station_name = station_name

    def parse(self, text: str) -> List[ListingEntry]:
        return self.parse_xml(text)

    def parse_xml(self, xml_text: str) -> List[ListingEntry]:
        try:
            root = ET.fromstring((xml_text or "").strip())
        except ET.ParseError as exc:
            raise ListingError(f"{self.name}: invalid feed XML: {exc}") from exc

        entries: List[ListingEntry] = []
        for item in root.iter("item"):
            link = (item.findtext("guid") or "").strip() or None
            parsed = parse_archive_title(item.findtext("title"), self.station_name)
            if parsed is None:
                continue
            entries.append(ListingEntry(title=parsed.title, date=parsed.date, link=link))
        return self.complete_entries(entries)
