import pytest

from woofmoo.services.crawl.base import FetchError, ResolveError
from woofmoo.services.crawl.fetcher import HttpFetcher
from woofmoo.services.crawl.playlist import PlaylistResolver


def test_invalid_url_is_reported_as_fetch_error():
    with pytest.raises(FetchError):
        HttpFetcher(timeout=1.0).fetch_text("http://[::1")


def test_invalid_playlist_url_is_a_resolve_error():
    with pytest.raises(ResolveError):
        PlaylistResolver(HttpFetcher(timeout=1.0)).resolve("http://[::1")
