"""Favorites management."""

import logging

from radio_orbit.domain.models.station import Station
from radio_orbit.domain.ports.favorites_store import FavoritesStore

logger = logging.getLogger(__name__)


def is_favorite(favorites: list[Station], station: Station) -> bool:
    """Whether a station with the same identifier is already a favorite."""
    return any(fav.stationuuid == station.stationuuid for fav in favorites)


def toggle_favorite(favorites: list[Station], station: Station) -> list[Station]:
    """Return a new favorites list with the station added or removed."""
    if is_favorite(favorites, station):
        return [fav for fav in favorites if fav.stationuuid != station.stationuuid]
    return [*favorites, station]


class FavoritesService:
    """Keeps favorites in memory and rewrites the store on every change."""

    def __init__(self, store: FavoritesStore) -> None:
        self._store = store
        self._favorites: list[Station] = store.load()
        logger.debug(f"Loaded {len(self._favorites)} favorite(s)")

    @property
    def favorites(self) -> list[Station]:
        return list(self._favorites)

    def toggle(self, station: Station) -> list[Station]:
        """Toggle a station and persist the full collection."""
        self._favorites = toggle_favorite(self._favorites, station)
        self._store.save(self._favorites)
        return self.favorites

    def remove(self, stationuuid: str) -> list[Station]:
        """Remove a favorite by identifier; unknown identifiers are ignored."""
        remaining = [fav for fav in self._favorites if fav.stationuuid != stationuuid]
        if len(remaining) != len(self._favorites):
            self._favorites = remaining
            self._store.save(self._favorites)
        return self.favorites
