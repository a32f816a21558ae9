from __future__ import annotations

from .base import FetchError, ResolveError, TextFetcher


class PlaylistResolver:
    """Expand an indirect playlist link (an .m3u style file) to its media URL.

    The body of the playlist file is the direct media URL itself, so exactly
    one extra fetch is made per link.
    """

    def __init__(self, fetcher: TextFetcher) -> None:
        self.fetcher = fetcher

    def resolve(self, link: str) -> str:
        try:
            body = self.fetcher.fetch_text(link)
        except FetchError as exc:
            raise ResolveError(f"Could not fetch playlist {link}: {exc}") from exc
        media_url = (body or "").strip()
        if not media_url:
            raise ResolveError(f"Playlist {link} is empty")
        return media_url

    __call__ = resolve
