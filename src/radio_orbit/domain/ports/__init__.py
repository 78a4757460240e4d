"""Ports (interfaces) for external dependencies."""

from radio_orbit.domain.ports.assistant_client import AssistantClient, AssistantServiceError
from radio_orbit.domain.ports.curated_station_source import CuratedStationSource
from radio_orbit.domain.ports.favorites_store import FavoritesStore
from radio_orbit.domain.ports.station_directory import StationDirectory

__all__ = [
    "AssistantClient",
    "AssistantServiceError",
    "CuratedStationSource",
    "FavoritesStore",
    "StationDirectory",
]
