"""Errors raised while loading a year's catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for every catalog load failure."""

    def __init__(self, year: str, detail: str = ""):
        self.year = year
        self.detail = detail
        msg = f"failed to load catalog for year {year}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class UnsupportedYear(CatalogError):
    """The year label is outside the supported set."""


class ResourceNotFound(CatalogError):
    """The playlist resource for the year is missing or unreadable."""


class DecodeError(CatalogError):
    """The resource is not valid JSON or does not match the playlist schema."""
