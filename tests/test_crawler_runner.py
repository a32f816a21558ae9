import json
from pathlib import Path

from woofmoo.services.crawl.runner import main


FIXTURES = Path(__file__).parent / "fixtures"


def test_runner_prints_feed_entries(capsys):
    assert main(["feed", "--file", str(FIXTURES / "archive_feed_sample.xml")]) == 0
    lines = [json.loads(l) for l in capsys.readouterr().out.splitlines() if l.strip()]
    assert [l["title"] for l in lines] == ["Wake", "Surface Noise"]
    assert lines[0]["link"] == "http://wfmu.org/listen.m3u?archive=2001"


def test_runner_prints_page_entries(capsys):
    assert main(["page", "--file", str(FIXTURES / "recent_archives_sample.html")]) == 0
    lines = [json.loads(l) for l in capsys.readouterr().out.splitlines() if l.strip()]
    assert len(lines) == 3
    assert all(set(l) == {"title", "date", "link"} for l in lines)
