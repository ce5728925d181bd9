"""Station and favorites models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StationReference(BaseModel):
    """Name and URL of a station.  Both empty means "no current station"."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    url: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.name and not self.url


class FavoritesCollection(BaseModel):
    """Favorite station URLs and display names.

    ``urls`` and ``names`` come from independent remote reads and are not
    guaranteed to line up position by position.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    urls: tuple[str, ...] = ()
    names: tuple[str, ...] = ()

    def contains(self, url: str) -> bool:
        """Case-insensitive URL membership test."""
        if not url:
            return False
        folded = url.casefold()
        return any(candidate.casefold() == folded for candidate in self.urls)
