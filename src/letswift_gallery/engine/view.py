from __future__ import annotations

from typing import Any

from letswift_gallery.engine.gallery_state import GallerySnapshot
from letswift_gallery.engine.player_url import make_embed_url, make_watch_url


def render(snap: GallerySnapshot) -> dict[str, Any]:
    """Pure view function: snapshot in, plain view model out."""
    if snap.loading:
        status = "loading"
    elif snap.error is not None:
        status = "error"
    elif snap.visible:
        status = "ok"
    else:
        status = "empty"

    return {
        "title": f"LetSwift {snap.selected_year}",
        "years": [{"label": y, "selected": y == snap.selected_year} for y in snap.years],
        "query": snap.query,
        "status": status,
        "error": str(snap.error) if snap.error is not None else None,
        "rows": [
            {
                "id": str(r.id),
                "title": r.title,
                "speaker": r.speaker,
                "thumbnail": r.thumbnail,
                "watch_url": make_watch_url(r.video_id),
                "embed_url": make_embed_url(r.video_id),
            }
            for r in snap.visible
        ],
    }
