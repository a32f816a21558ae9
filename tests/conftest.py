from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

import pytest

from woofmoo.config import Settings
from woofmoo.services.crawl.base import FetchError


FIXED_NOW = datetime(2024, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


def read_fixture(name: str) -> str:
    p = Path(__file__).parent / "fixtures" / name
    return p.read_text(encoding="utf-8")


class FakeFetcher:
    """Serves canned bodies by URL; unknown URLs fail like a 404."""

    def __init__(self, responses: Optional[Dict[str, str]] = None) -> None:
        self.responses = dict(responses or {})
        self.calls = []

    def fetch_text(self, url: str) -> str:
        self.calls.append(url)
        if url not in self.responses:
            raise FetchError(f"GET {url} failed: 404")
        return self.responses[url]


@pytest.fixture
def settings() -> Settings:
    return Settings(refresh_enabled=False, max_workers=4)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW
