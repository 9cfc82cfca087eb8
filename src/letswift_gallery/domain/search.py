from __future__ import annotations

from typing import Sequence

from letswift_gallery.domain.models import VideoRecord


def matches(record: VideoRecord, query: str) -> bool:
    # case-sensitive substring containment, no normalization
    return query in record.title or query in record.speaker


def filter_items(items: Sequence[VideoRecord], query: str) -> Sequence[VideoRecord]:
    if not query:
        return items
    return [r for r in items if matches(r, query)]
