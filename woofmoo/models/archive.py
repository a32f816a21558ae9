from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ArchiveRecord:
    """A playable directory entry.

    discovered_at is only set on scraped archives; permanent entries (the live
    stream) leave it empty and never expire.
    """

    announced_title: str
    description: str
    media_url: str
    date: Optional[str] = None
    discovered_at: Optional[datetime] = None

    @property
    def is_scraped(self) -> bool:
        return self.discovered_at is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "announced_title": self.announced_title,
            "description": self.description,
            "media_url": self.media_url,
            "date": self.date,
            "discovered_at": self.discovered_at.isoformat() if self.discovered_at else None,
        }
