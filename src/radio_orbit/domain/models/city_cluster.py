"""City cluster model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CityCluster:
    """Map-displayable group of stations sharing a city (or state) name."""

    name: str
    lat: float
    lng: float
    station_count: int
