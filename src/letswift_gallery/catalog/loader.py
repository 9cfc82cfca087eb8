from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from loguru import logger

from letswift_gallery.catalog.errors import CatalogError, DecodeError, ResourceNotFound, UnsupportedYear
from letswift_gallery.catalog.schema import ExportPlaylist, Playlist, is_export_shape
from letswift_gallery.config import settings
from letswift_gallery.domain.models import Catalog, VideoRecord


def resource_name(year: str) -> str:
    return f"playlist-{year}.json"


class CatalogLoader:
    """Reads playlist-<year>.json resources and decodes them into catalogs.

    Decoding is strict. A missing resource or a document that does not match
    the playlist schema raises a CatalogError subclass; it is never turned
    into an empty catalog.
    """

    def __init__(self, data_dir: Path | str | None = None, years: Iterable[str] | None = None):
        self.data_dir = Path(data_dir) if data_dir else settings.resolved_data_dir()
        self.years = tuple(years if years is not None else settings.years)

    def resource_path(self, year: str) -> Path:
        return self.data_dir / resource_name(year)

    def _read(self, year: str) -> bytes:
        path = self.resource_path(year)
        logger.debug(f"Reading {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise ResourceNotFound(year, f"{path.name}: {exc.strerror or exc}") from exc

    def _decode(self, year: str, raw: bytes) -> Playlist:
        # utf-8-sig drops a leading BOM so both parses below see the same text
        try:
            text = raw.decode("utf-8-sig")
            doc = json.loads(text)
        except ValueError as exc:
            raise DecodeError(year, f"invalid JSON: {exc}") from exc

        try:
            if is_export_shape(doc):
                logger.debug(f"playlist-{year} is a YouTube export, translating")
                return ExportPlaylist.model_validate_json(text).to_playlist()
            return Playlist.model_validate_json(text)
        except ValueError as exc:
            raise DecodeError(year, str(exc)) from exc

    def load(self, year: str) -> Catalog:
        if year not in self.years:
            raise UnsupportedYear(year, f"supported years are {', '.join(self.years)}")

        playlist = self._decode(year, self._read(year))
        items = tuple(
            VideoRecord(
                title=it.title,
                speaker=it.speaker,
                time_line=it.time_line,
                reference_link=it.reference_link,
                thumbnail=it.thumbnail,
                video_id=it.video_id,
            )
            for it in playlist.items
        )
        logger.info(f"Loaded {len(items)} talks for {year}")
        return Catalog(year=playlist.year, items=items)

    def load_result(self, year: str) -> Catalog | CatalogError:
        try:
            return self.load(year)
        except CatalogError as exc:
            logger.warning(str(exc))
            return exc


_default: CatalogLoader | None = None


def default_loader() -> CatalogLoader:
    global _default
    if _default is None:
        _default = CatalogLoader()
    return _default


def load(year: str) -> Catalog:
    return default_loader().load(year)


def load_result(year: str) -> Catalog | CatalogError:
    return default_loader().load_result(year)
