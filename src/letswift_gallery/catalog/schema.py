from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from letswift_gallery.config import settings

# Preference order when picking a thumbnail out of a YouTube export
THUMBNAIL_SIZES = ("maxres", "high", "medium", "standard", "default")


class PlaylistItem(BaseModel):
    """One talk in the hand-authored playlist feed."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    title: str
    speaker: str
    time_line: str = Field(alias="timeLine")
    reference_link: str = Field(alias="referenceLink")
    thumbnail: str
    video_id: str = Field(alias="videoID")


class Playlist(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    year: int
    items: list[PlaylistItem]


# --- YouTube playlistItems export ---

class Thumbnail(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    url: str


class ResourceId(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    video_id: str = Field(alias="videoId")


class Snippet(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    title: str
    description: str
    thumbnails: dict[str, Thumbnail]
    resource_id: ResourceId = Field(alias="resourceId")

    def best_thumbnail(self) -> Optional[str]:
        for size in THUMBNAIL_SIZES:
            if size in self.thumbnails:
                return self.thumbnails[size].url
        return None


class ExportItem(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    snippet: Snippet


class ExportPlaylist(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    year: int
    items: list[ExportItem]

    def to_playlist(self) -> Playlist:
        """Translate the export into the canonical playlist shape."""
        items = []
        for i, item in enumerate(self.items):
            s = item.snippet
            thumb = s.best_thumbnail()
            if thumb is None:
                raise ValueError(f"items.{i}.snippet.thumbnails: no usable thumbnail")
            items.append(PlaylistItem(
                title=s.title,
                speaker=s.description,
                time_line="",
                reference_link=settings.watch_url_template.format(video_id=s.resource_id.video_id),
                thumbnail=thumb,
                video_id=s.resource_id.video_id,
            ))
        return Playlist(year=self.year, items=items)


def is_export_shape(doc: Any) -> bool:
    # A YouTube export wraps every item in a "snippet" object
    if not isinstance(doc, dict):
        return False
    items = doc.get("items")
    return isinstance(items, list) and bool(items) and isinstance(items[0], dict) and "snippet" in items[0]
