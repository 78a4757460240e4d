"""Country geometry adapter."""

from radio_orbit.adapters.geometry.country_geometry_repository import (
    CountryGeometryRepository,
    country_code_of,
    country_name_of,
    geometry_center,
)

__all__ = [
    "CountryGeometryRepository",
    "country_code_of",
    "country_name_of",
    "geometry_center",
]
