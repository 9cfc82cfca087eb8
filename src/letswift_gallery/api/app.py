from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from letswift_gallery.catalog.errors import DecodeError, ResourceNotFound, UnsupportedYear
from letswift_gallery.catalog.loader import CatalogLoader, default_loader
from letswift_gallery.config import settings
from letswift_gallery.domain.search import filter_items
from letswift_gallery.engine.gallery_state import GalleryState
from letswift_gallery.engine.player_url import make_embed_url, make_watch_url
from letswift_gallery.engine.view import render

app = FastAPI(title="letswift-gallery")


class VideoOut(BaseModel):
    id: str
    title: str
    speaker: str
    thumbnail: str
    video_id: str
    watch_url: str


class CatalogOut(BaseModel):
    year: int
    total: int
    query: str
    items: list[VideoOut]


def get_loader() -> CatalogLoader:
    return default_loader()


@app.get("/years")
def get_years(loader: CatalogLoader = Depends(get_loader)):
    return {"years": list(loader.years), "default": settings.default_year}


@app.get("/catalog/{year}", response_model=CatalogOut)
def get_catalog(year: str, q: str = "", loader: CatalogLoader = Depends(get_loader)):
    try:
        catalog = loader.load(year)
    except (UnsupportedYear, ResourceNotFound) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except DecodeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    visible = filter_items(catalog.items, q)
    return CatalogOut(
        year=catalog.year,
        total=len(catalog),
        query=q,
        items=[
            VideoOut(
                id=str(r.id),
                title=r.title,
                speaker=r.speaker,
                thumbnail=r.thumbnail,
                video_id=r.video_id,
                watch_url=make_watch_url(r.video_id),
            )
            for r in visible
        ],
    )


@app.get("/view")
def get_view(year: str | None = None, q: str = "", loader: CatalogLoader = Depends(get_loader)):
    # Load failures render as status="error" rather than an HTTP error
    state = GalleryState(loader=loader)
    state.select_year(year or state.selected_year)
    state.set_query(q)
    return render(state.snapshot())


@app.get("/play/{video_id}")
def get_play(video_id: str):
    if not video_id.strip():
        raise HTTPException(status_code=400, detail="video_id required")
    return {"video_id": video_id, "watch_url": make_watch_url(video_id), "embed_url": make_embed_url(video_id)}
