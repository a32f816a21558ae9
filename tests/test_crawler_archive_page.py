import pytest

from woofmoo.services.crawl.base import ListingError
from woofmoo.services.crawl.spiders.archive_page_spider import ArchivePageSpider, parse_listing_date

from conftest import FakeFetcher, read_fixture


def test_archive_page_parse_skips_incomplete_entries():
    spider = ArchivePageSpider(FakeFetcher(), base_url="http://wfmu.org")
    entries = spider.parse_html(read_fixture("recent_archives_sample.html"))
    assert [e.title for e in entries] == [
        "Wake",
        "Clay Pigeon's Show",
        "The Glen Jones Radio Programme!",
    ]
    assert all(e.is_complete() for e in entries)


def test_archive_page_links_are_absolute():
    spider = ArchivePageSpider(FakeFetcher(), base_url="http://wfmu.org")
    entries = spider.parse_html(read_fixture("recent_archives_sample.html"))
    assert entries[0].link == "http://wfmu.org/listen.m3u?archive=1001"


def test_archive_page_dates_are_cut_at_colon():
    spider = ArchivePageSpider(FakeFetcher(), base_url="http://wfmu.org")
    entries = spider.parse_html(read_fixture("recent_archives_sample.html"))
    assert entries[0].date == "monday, january 1st, 2024"
    assert entries[1].date == "tuesday, january 2nd, 2024"
    assert entries[2].date == "wednesday, january 3rd, 2024"


def test_parse_listing_date_without_colon():
    assert parse_listing_date("No colon here") is None
    assert parse_listing_date("   ") is None


def test_archive_page_fetch_failure_raises_listing_error():
    spider = ArchivePageSpider(FakeFetcher(), base_url="http://wfmu.org")
    with pytest.raises(ListingError):
        spider.fetch("https://wfmu.org/recentarchives.php")


def test_archive_page_fetch_uses_fetcher():
    url = "https://wfmu.org/recentarchives.php"
    fetcher = FakeFetcher({url: read_fixture("recent_archives_sample.html")})
    spider = ArchivePageSpider(fetcher, base_url="http://wfmu.org")
    entries = spider.fetch(url)
    assert len(entries) == 3
    assert fetcher.calls == [url]


def test_archive_page_titles_keep_spaces_around_nested_markup():
    spider = ArchivePageSpider(FakeFetcher(), base_url="http://wfmu.org")
    entries = spider.parse_html(read_fixture("recent_archives_nested_markup.html"))
    assert [e.title for e in entries] == [
        "Clay Pigeon's Show",
        "The Glen Jones Radio Programme",
    ]
