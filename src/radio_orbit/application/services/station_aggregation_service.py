"""Station aggregation and reconciliation service."""

import asyncio
import logging
from collections.abc import Iterable
from urllib.parse import quote

from radio_orbit.application.services.country_alias_resolver import resolve_country_aliases
from radio_orbit.domain.models.station import Station
from radio_orbit.domain.ports.curated_station_source import CuratedStationSource
from radio_orbit.domain.ports.station_directory import StationDirectory

logger = logging.getLogger(__name__)

BY_COUNTRY_CODE_ENDPOINT = "/stations/bycountrycodeexact/"
BY_COUNTRY_NAME_ENDPOINT = "/stations/bycountry/"
SEARCH_ENDPOINT = "/stations/search"

POPULARITY_ORDER = {"order": "clickcount", "reverse": "true"}
SEARCH_LIMIT = 500


def deduplicate_stations(stations: Iterable[Station]) -> list[Station]:
    """Drop repeated identifiers, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[Station] = []
    for station in stations:
        if station.stationuuid in seen:
            continue
        seen.add(station.stationuuid)
        unique.append(station)
    return unique


def rank_by_popularity(stations: Iterable[Station]) -> list[Station]:
    """Stable sort by click count, highest first."""
    return sorted(stations, key=lambda station: -station.clickcount)


class StationAggregationService:
    """Combines directory queries and the curated overlay into one ranked list."""

    def __init__(
        self,
        directory: StationDirectory,
        curated_source: CuratedStationSource,
        search_limit: int = SEARCH_LIMIT,
    ) -> None:
        """Initialize with a station directory and a curated station source."""
        self._directory = directory
        self._curated_source = curated_source
        self._search_limit = search_limit

    async def get_stations_by_country(self, country_code: str, country_name: str) -> list[Station]:
        """Get the deduplicated, ranked stations for a country.

        One mirror is resolved up front and shared by both directory queries.
        The queries run concurrently and are awaited until both settle, so
        one failing source only reduces completeness. Curated stations form
        a fixed block at the top in table order; directory results follow,
        stably sorted by click count.

        Returns:
            Ordered stations, or an empty list if the pipeline fails.
        """
        try:
            aliases = resolve_country_aliases(country_name)
            directory_stations = await self._fetch_country_sources(country_code, country_name)
            unique = deduplicate_stations(directory_stations)
            curated = self._curated_source.stations_for(country_code, country_name, aliases)
            logger.debug(
                f"{country_name} ({country_code}): {len(unique)} directory station(s), "
                f"{len(curated)} curated"
            )
            return [*curated, *rank_by_popularity(unique)]
        except Exception as e:
            logger.error(f"Station aggregation failed for {country_name} ({country_code}): {e}")
            return []

    async def _fetch_country_sources(self, country_code: str, country_name: str) -> list[Station]:
        """Query by country code and by country name; code results come first."""
        base_url = self._directory.resolve_base_url()
        results = await asyncio.gather(
            self._directory.fetch_stations(
                BY_COUNTRY_CODE_ENDPOINT + country_code, dict(POPULARITY_ORDER), base_url
            ),
            self._directory.fetch_stations(
                BY_COUNTRY_NAME_ENDPOINT + quote(country_name, safe=""),
                dict(POPULARITY_ORDER),
                base_url,
            ),
            return_exceptions=True,
        )

        stations: list[Station] = []
        for result in results:
            if isinstance(result, BaseException):
                logger.warning(f"Directory query failed for {country_name}: {result}")
                continue
            stations.extend(result)
        return stations

    async def search_global_stations(self, query: str) -> list[Station]:
        """Free-text search across the whole directory, most popular first."""
        if not query.strip():
            return []
        params = {"name": query, "limit": str(self._search_limit), **POPULARITY_ORDER}
        try:
            return await self._directory.fetch_stations(SEARCH_ENDPOINT, params)
        except Exception as e:
            logger.error(f"Global station search failed for '{query}': {e}")
            return []
