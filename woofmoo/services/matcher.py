from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Mapping, Optional

from rapidfuzz.distance import Levenshtein

from woofmoo.models.archive import ArchiveRecord
from woofmoo.services.name_normalizer import normalize_key

logger = logging.getLogger(__name__)

DEFAULT_AGE_LIMIT = timedelta(days=30)


@dataclass(frozen=True)
class ArchiveMatch:
    key: str
    record: ArchiveRecord
    distance: int
    exact: bool = False


def is_expired(record: ArchiveRecord, now: datetime, age_limit: timedelta = DEFAULT_AGE_LIMIT) -> bool:
    """Scraped archives older than age_limit probably have dead media links."""
    if not record.is_scraped:
        return False
    return now - record.discovered_at > age_limit


def find_best_match(
    table: Mapping[str, ArchiveRecord],
    query: str,
    *,
    now: datetime,
    age_limit: timedelta = DEFAULT_AGE_LIMIT,
) -> Optional[ArchiveMatch]:
    """Find the entry for a spoken name.

    An exact key hit is returned as-is, even when expired. Otherwise the key
    with the smallest edit distance wins, skipping expired archives. Ties keep
    the first candidate seen; table order is not a contract.
    """
    q = normalize_key(query)
    record = table.get(q)
    if record is not None:
        return ArchiveMatch(key=q, record=record, distance=0, exact=True)

    best: Optional[ArchiveMatch] = None
    for key, candidate in table.items():
        distance = Levenshtein.distance(q, key)
        if best is not None and distance >= best.distance:
            continue
        if is_expired(candidate, now, age_limit):
            logger.info("Disregarding match '%s' as it is past the expiry date.", candidate.announced_title)
            continue
        best = ArchiveMatch(key=key, record=candidate, distance=distance)

    if best is None:
        logger.info("No archive matched '%s'", q)
    else:
        logger.info("Best match archive title was '%s' with a Levenshtein distance of %d", best.key, best.distance)
    return best


def resolve(
    table: Mapping[str, ArchiveRecord],
    query: str,
    *,
    now: datetime,
    age_limit: timedelta = DEFAULT_AGE_LIMIT,
) -> Optional[ArchiveRecord]:
    match = find_best_match(table, query, now=now, age_limit=age_limit)
    return match.record if match else None
