import pytest

from woofmoo.services.crawl.base import ListingError
from woofmoo.services.crawl.spiders.archive_feed_spider import (
    ArchiveFeedSpider,
    parse_archive_title,
    strip_cohosts,
)

from conftest import FakeFetcher, read_fixture


def test_parse_archive_title_strips_cohost():
    parsed = parse_archive_title("WFMU MP3 Archive: Wake with Co-Host from Monday 1/1")
    assert parsed is not None
    assert parsed.title == "Wake"
    assert parsed.date == "Monday 1/1"


def test_parse_archive_title_not_matching():
    assert parse_archive_title("Station announcement") is None
    assert parse_archive_title("") is None
    assert parse_archive_title(None) is None


def test_strip_cohosts_repeats_until_clean():
    assert strip_cohosts("Surface Noise with Joe Belock with Guest") == "Surface Noise"
    assert strip_cohosts("Wake") == "Wake"


def test_parse_archive_title_other_station():
    parsed = parse_archive_title("WFMU MP3 Archive: Wake from Monday 1/1", station_name="KFJC")
    assert parsed is None
    parsed = parse_archive_title("KFJC MP3 Archive: Night Shift from Friday 2/2", station_name="KFJC")
    assert parsed.title == "Night Shift"
    assert parsed.date == "Friday 2/2"


def test_archive_feed_parse_xml():
    spider = ArchiveFeedSpider(FakeFetcher())
    entries = spider.parse_xml(read_fixture("archive_feed_sample.xml"))
    assert [(e.title, e.date) for e in entries] == [
        ("Wake", "Monday 1/1"),
        ("Surface Noise", "Friday 1/5"),
    ]
    assert entries[0].link == "http://wfmu.org/listen.m3u?archive=2001"


def test_archive_feed_invalid_xml_raises_listing_error():
    spider = ArchiveFeedSpider(FakeFetcher())
    with pytest.raises(ListingError):
        spider.parse_xml("<rss><channel>")
