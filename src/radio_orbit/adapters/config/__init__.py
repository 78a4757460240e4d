"""Configuration adapters."""

from radio_orbit.adapters.config.app_config import AppConfig
from radio_orbit.adapters.config.curated_stations_loader import CuratedStationsLoader

__all__ = ["AppConfig", "CuratedStationsLoader"]
