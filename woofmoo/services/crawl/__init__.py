"""Archive listing crawling subsystem.

Structure:
- base.py: common types, errors and the spider contract
- fetcher.py: httpx-backed text fetcher (injectable)
- playlist.py: expands indirect playlist links to direct media URLs
- spiders/: one parser per listing source (HTML page, XML feed)
- runner.py: tiny CLI entrypoint for manual runs

Listings are fetched as text and parsed with selectolax (HTML) or
ElementTree (XML), so tests only need a fake fetcher returning canned text.
"""

__all__ = [
    "base",
    "fetcher",
    "playlist",
]
