"""Curated station overlay adapter."""

from radio_orbit.adapters.curated.curated_station_repository import CuratedStationRepository
from radio_orbit.adapters.curated.curated_stations import CURATED_STATIONS

__all__ = ["CURATED_STATIONS", "CuratedStationRepository"]
