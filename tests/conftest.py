"""Pytest configuration and fixtures."""

import json

import pytest

from letswift_gallery.catalog.loader import CatalogLoader


SCENARIO_ITEMS = [
    ("Swift Concurrency", "Alice", "abc123"),
    ("Building Widgets", "Bob", "def456"),
    ("Async Patterns", "Carol", "ghi789"),
]


def make_item(title, speaker, video_id):
    return {
        "title": title,
        "speaker": speaker,
        "timeLine": "00:00 Intro",
        "referenceLink": "https://letswift.kr/",
        "thumbnail": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg",
        "videoID": video_id,
    }


@pytest.fixture
def write_playlist(tmp_path):
    """Write playlist-<year>.json into tmp_path; accepts a dict or raw text."""

    def _write(year, doc):
        path = tmp_path / f"playlist-{year}.json"
        if isinstance(doc, str):
            path.write_text(doc, encoding="utf-8")
        else:
            path.write_text(json.dumps(doc), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_doc():
    """The three-talk 2023 playlist."""
    return {"year": 2023, "items": [make_item(*it) for it in SCENARIO_ITEMS]}


@pytest.fixture
def scenario_loader(tmp_path, write_playlist, scenario_doc):
    """Loader over tmp_path holding the 2023 scenario and a small 2022 playlist."""
    write_playlist("2023", scenario_doc)
    write_playlist("2022", {"year": 2022, "items": [make_item("Modular Apps", "Dana", "jkl012")]})
    return CatalogLoader(data_dir=tmp_path, years=["2023", "2022", "2019"])
