from __future__ import annotations

import re
import urllib.parse
from typing import List, Optional

from selectolax.parser import HTMLParser

from ..base import ListingEntry, TextFetcher, Spider

_DATE_RE = re.compile(r"([^:]+):[.\s]*")


def parse_listing_date(text: Optional[str]) -> Optional[str]:
    """Return the part of an archive date label before its first colon.

    'Monday, January 1st, 2024: MP3 - 128K' -> 'monday, january 1st, 2024'
    """
    t = (text or "").strip()
    if not t:
        return None
    m = _DATE_RE.search(t)
    if not m:
        return None
    return m.group(1).strip().lower() or None


class ArchivePageSpider(Spider):
    """Selector-driven parser for the "recent archives" HTML page.

    Every program entry carries a show title link, a date label and a link to
    the playlist file for the recording. Hrefs are relative and are joined onto
    base_url.

    Selectors (CSS):
      - program_sel: one node per program entry
      - title_sel: show title, relative to the entry
      - date_sel: date label, relative to the entry
      - link_sel: anchor pointing at the playlist file, relative to the entry
    """

    name = "archive_page"

    def __init__(
        self,
        fetcher: TextFetcher,
        *,
        base_url: str,
        program_sel: str = ".program",
        title_sel: str = "a.show-title-link",
        date_sel: str = "span.archive-link",
        link_sel: str = "a.archive-link",
    ) -> None:
        super().__init__(fetcher)
        self.base_url = base_url
        self.program_sel = program_sel
        self.title_sel = title_sel
        self.date_sel = date_sel
        self.link_sel = link_sel

    def parse(self, text: str) -> List[ListingEntry]:
        return self.parse_html(text)

    def parse_html(self, html: str) -> List[ListingEntry]:
        doc = HTMLParser(html or "")
        entries: List[ListingEntry] = []
        for item in doc.css(self.program_sel) or []:
            title = None
            title_node = item.css_first(self.title_sel)
            if title_node:
                title = title_node.text().strip() or None

            date = None
            date_node = item.css_first(self.date_sel)
            if date_node:
                date = parse_listing_date(date_node.text())

            link = None
            link_node = item.css_first(self.link_sel)
            if link_node:
                href = (link_node.attributes.get("href") or "").strip()
                if href:
                    link = self._absolute(href)

            entries.append(ListingEntry(title=title, date=date, link=link))
        return self.complete_entries(entries)

    def _absolute(self, href: str) -> str:
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return urllib.parse.urljoin(base, href)
