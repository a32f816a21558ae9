from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from .base import FetchError

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Fetch URL bodies as text over HTTP(S)."""

    def __init__(self, *, timeout: float = 10.0, headers: Optional[Dict[str, str]] = None) -> None:
        self.timeout = float(timeout)
        self.headers = headers or {"User-Agent": "WoofMoo/0.1"}

    def fetch_text(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            with httpx.Client(timeout=self.timeout, headers=self.headers, follow_redirects=True) as client:
                r = client.get(url)
                r.raise_for_status()
                return r.text
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"GET {url} failed: {exc}") from exc
