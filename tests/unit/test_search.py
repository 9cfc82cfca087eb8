"""Tests for the filter engine."""

import pytest

from letswift_gallery.domain.models import VideoRecord
from letswift_gallery.domain.search import filter_items, matches


def record(title, speaker):
    return VideoRecord(
        title=title,
        speaker=speaker,
        time_line="",
        reference_link="",
        thumbnail="https://i.ytimg.com/vi/x/hqdefault.jpg",
        video_id="x",
    )


@pytest.fixture
def items():
    return (
        record("Swift Concurrency", "Alice"),
        record("Building Widgets", "Bob"),
        record("Async Patterns", "Carol"),
        record("Actors and Async", "Bobby"),
    )


class TestFilterItems:
    """Tests for filter_items."""

    def test_empty_query_is_identity(self, items):
        assert filter_items(items, "") is items

    def test_title_match(self, items):
        result = filter_items(items, "Widgets")
        assert [r.title for r in result] == ["Building Widgets"]

    def test_speaker_match(self, items):
        result = filter_items(items, "Carol")
        assert [r.title for r in result] == ["Async Patterns"]

    def test_preserves_source_order(self, items):
        result = filter_items(items, "Async")
        assert [r.title for r in result] == ["Async Patterns", "Actors and Async"]

    def test_no_match_is_empty(self, items):
        assert list(filter_items(items, "zzz")) == []

    def test_case_sensitive(self, items):
        assert list(filter_items(items, "async")) == []
        assert list(filter_items(items, "alice")) == []

    def test_whitespace_query_is_not_trimmed(self, items):
        result = filter_items(items, " ")
        assert [r.title for r in result] == [
            "Swift Concurrency", "Building Widgets", "Async Patterns", "Actors and Async",
        ]

    def test_does_not_mutate_input(self, items):
        before = list(items)
        filter_items(list(items), "Bob")
        assert list(items) == before

    @pytest.mark.parametrize("query", ["", "Async", "Bob", "o", "zzz", "Swift Concurrency"])
    def test_sound_and_complete(self, items, query):
        """Kept records match; dropped records do not."""
        result = filter_items(items, query)
        kept = {id(r) for r in result}
        for r in items:
            hit = query in r.title or query in r.speaker
            assert (id(r) in kept) == hit

    @pytest.mark.parametrize("query", ["", "Async", "Bob", "o", "zzz"])
    def test_idempotent(self, items, query):
        once = filter_items(items, query)
        assert list(filter_items(once, query)) == list(once)

    @pytest.mark.parametrize("query", ["Async", "Bob"])
    def test_deterministic(self, items, query):
        assert list(filter_items(items, query)) == list(filter_items(items, query))


class TestMatches:
    def test_either_field(self):
        r = record("Swift", "Alice")
        assert matches(r, "Swi") is True
        assert matches(r, "lic") is True
        assert matches(r, "Bob") is False
