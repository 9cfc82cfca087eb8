from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass
from typing import Callable, Sequence

from loguru import logger

from letswift_gallery.catalog.errors import CatalogError
from letswift_gallery.catalog.loader import CatalogLoader, default_loader
from letswift_gallery.config import settings
from letswift_gallery.domain.models import Catalog, VideoRecord
from letswift_gallery.domain.search import filter_items
from letswift_gallery.engine.player_url import make_player_url


@dataclass(frozen=True)
class GallerySnapshot:
    years: tuple[str, ...]
    selected_year: str
    query: str
    catalog: Catalog | None
    error: CatalogError | None
    visible: tuple[VideoRecord, ...]
    loading: bool = False


Listener = Callable[["GalleryState"], None]


class GalleryState:
    """Current-view state: selected year, live query and the active catalog.

    Every mutation notifies subscribers, which re-render from snapshot().
    A failed load clears the catalog and keeps the error, so an error never
    looks like an empty result list.
    """

    def __init__(self, loader: CatalogLoader | None = None, default_year: str | None = None):
        self.loader = loader or default_loader()
        self.years: tuple[str, ...] = self.loader.years
        self.selected_year = default_year or settings.default_year
        self.query = ""
        self.catalog: Catalog | None = None
        self.error: CatalogError | None = None
        # set while an async load for selected_year is in flight
        self.loading = False
        self._listeners: list[Listener] = []
        # bumped on every year request; only the latest one may apply its result
        self._ticket = 0

    # --- observers ---
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # --- year selection ---
    def _apply(self, result: Catalog | CatalogError) -> None:
        self.loading = False
        if isinstance(result, CatalogError):
            self.catalog = None
            self.error = result
        else:
            self.catalog = result
            self.error = None
        self._notify()

    def start(self) -> None:
        self.select_year(self.selected_year)

    def select_year(self, year: str) -> None:
        self._ticket += 1
        self.selected_year = year
        self._apply(self.loader.load_result(year))

    async def select_year_async(self, year: str) -> bool:
        """Load year off the event loop; returns False if a later request superseded it."""
        self._ticket += 1
        ticket = self._ticket
        self.selected_year = year
        self.loading = True
        self._notify()

        result = await asyncio.to_thread(self.loader.load_result, year)
        if ticket != self._ticket:
            logger.warning(f"Dropping stale catalog for {year} (request {ticket}, latest {self._ticket})")
            return False
        self._apply(result)
        return True

    # --- search ---
    def set_query(self, query: str) -> None:
        self.query = query
        self._notify()

    def visible_items(self) -> Sequence[VideoRecord]:
        if self.catalog is None or self.loading:
            return ()
        return filter_items(self.catalog.items, self.query)

    def select_record(self, record_id: uuid.UUID | str) -> str:
        try:
            rid = uuid.UUID(str(record_id))
        except ValueError as exc:
            raise KeyError(str(record_id)) from exc
        for record in self.visible_items():
            if record.id == rid:
                return make_player_url(record)
        raise KeyError(str(record_id))

    def snapshot(self) -> GallerySnapshot:
        return GallerySnapshot(
            years=self.years,
            selected_year=self.selected_year,
            query=self.query,
            catalog=self.catalog,
            error=self.error,
            visible=tuple(self.visible_items()),
            loading=self.loading,
        )
