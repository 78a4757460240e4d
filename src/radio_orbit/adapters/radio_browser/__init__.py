"""radio-browser directory adapter."""

from radio_orbit.adapters.radio_browser.mirror_selector import MirrorSelector
from radio_orbit.adapters.radio_browser.station_directory import RadioBrowserStationDirectory
from radio_orbit.adapters.radio_browser.station_normalizer import (
    normalize_station,
    normalize_stations,
)

__all__ = [
    "MirrorSelector",
    "RadioBrowserStationDirectory",
    "normalize_station",
    "normalize_stations",
]
