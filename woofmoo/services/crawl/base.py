from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Protocol


class FetchError(RuntimeError):
    """A URL could not be fetched (transport failure or non-2xx status)."""


class ListingError(FetchError):
    """A whole listing document could not be fetched or parsed."""


class ResolveError(FetchError):
    """An indirect link could not be expanded to a media URL."""


class TextFetcher(Protocol):
    def fetch_text(self, url: str) -> str:
        ...


@dataclass
class ListingEntry:
    """One raw (title, date, indirect link) triple scraped from a listing."""

    title: Optional[str]
    date: Optional[str]
    link: Optional[str]

    def is_complete(self) -> bool:
        return bool(self.title and self.date and self.link)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Spider:
    """Minimal spider contract.

    Subclasses implement parse() over listing text; fetch() retrieves the
    listing through the injected fetcher and parses it. Any failure to fetch or
    parse the document as a whole surfaces as ListingError.
    """

    name: str = "base"

    def __init__(self, fetcher: TextFetcher) -> None:
        self.fetcher = fetcher

    def fetch(self, url: str) -> List[ListingEntry]:
        try:
            text = self.fetcher.fetch_text(url)
        except FetchError as exc:
            raise ListingError(f"{self.name}: failed to fetch listing {url}: {exc}") from exc
        return self.parse(text)

    def parse(self, text: str) -> List[ListingEntry]:
        raise NotImplementedError

    @staticmethod
    def complete_entries(items: List[ListingEntry]) -> List[ListingEntry]:
        return [x for x in items if x.is_complete()]
