"""Local persistence adapters."""

from radio_orbit.adapters.storage.json_favorites_store import FAVORITES_KEY, JsonFavoritesStore

__all__ = ["FAVORITES_KEY", "JsonFavoritesStore"]
