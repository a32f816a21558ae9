from __future__ import annotations

import re
from typing import List

_STRIP_CHARS = str.maketrans("", "", "\":!")

# "[Someone]'s Show" should work if we just ask for [Someone].
_S_SHOW_RE = re.compile(r"(.+)'s show")
# "The Glen Jones Radio Programme" should work if we just ask for "Glen Jones".
_RADIO_PROGRAMME_RE = re.compile(r"the (.+) radio programme")


def normalize_key(title: str) -> str:
    """Lowercase a title and drop the characters lookups ignore (" : !)."""
    return str(title or "").lower().translate(_STRIP_CHARS)


def get_title_synonyms(title: str) -> List[str]:
    """Return the canonical key for a title followed by any shorter aliases."""
    key = normalize_key(title)
    synonyms = [key]
    for pattern in (_S_SHOW_RE, _RADIO_PROGRAMME_RE):
        m = pattern.search(key)
        if m and m.group(1) not in synonyms:
            synonyms.append(m.group(1))
    return synonyms
