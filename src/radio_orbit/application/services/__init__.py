"""Application services (use cases)."""

from radio_orbit.application.services.assistant_service import (
    AssistantService,
    parse_assistant_reply,
)
from radio_orbit.application.services.country_alias_resolver import (
    resolve_country_aliases,
)
from radio_orbit.application.services.favorites_service import (
    FavoritesService,
    is_favorite,
    toggle_favorite,
)
from radio_orbit.application.services.geo_clustering_service import GeoClusteringService
from radio_orbit.application.services.station_aggregation_service import (
    StationAggregationService,
    deduplicate_stations,
    rank_by_popularity,
)
from radio_orbit.application.services.station_filter import filter_stations
from radio_orbit.application.services.station_selection_tracker import StationSelectionTracker

__all__ = [
    "AssistantService",
    "FavoritesService",
    "GeoClusteringService",
    "StationAggregationService",
    "StationSelectionTracker",
    "deduplicate_stations",
    "filter_stations",
    "is_favorite",
    "parse_assistant_reply",
    "rank_by_popularity",
    "resolve_country_aliases",
    "toggle_favorite",
]
