"""Favorites store port."""

from typing import Protocol

from radio_orbit.domain.models.station import Station


class FavoritesStore(Protocol):
    """Port for persisting the favorites collection."""

    def load(self) -> list[Station]:
        """Load persisted favorites; an unreadable store loads as empty."""
        ...

    def save(self, favorites: list[Station]) -> None:
        """Rewrite the persisted favorites in full."""
        ...
