"""Domain models for Radio Orbit."""

from radio_orbit.domain.models.assistant_reply import AssistantReply
from radio_orbit.domain.models.city_cluster import CityCluster
from radio_orbit.domain.models.curated_entry import CuratedEntry
from radio_orbit.domain.models.filter_state import FilterState
from radio_orbit.domain.models.station import Station

__all__ = [
    "AssistantReply",
    "CityCluster",
    "CuratedEntry",
    "FilterState",
    "Station",
]
