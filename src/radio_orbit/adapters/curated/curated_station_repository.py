"""Curated station repository adapter."""

import hashlib
import logging
import secrets
import string
from collections.abc import Mapping, Sequence

from radio_orbit.adapters.curated.curated_stations import CURATED_STATIONS
from radio_orbit.domain.models.curated_entry import CuratedEntry
from radio_orbit.domain.models.station import Station
from radio_orbit.domain.ports.curated_station_source import CuratedStationSource

logger = logging.getLogger(__name__)

CURATED_ID_PREFIX = "m-"
_ID_LENGTH = 9
_ID_ALPHABET = string.ascii_lowercase + string.digits


def infer_codec(url: str) -> str:
    """Guess the codec label from a stream URL."""
    lower = url.lower()
    if ".m3u8" in lower:
        return "HLS"
    if ".aac" in lower:
        return "AAC"
    return "MP3"


def stable_curated_id(country_key: str, index: int) -> str:
    """Deterministic identifier for the entry at ``index`` under ``country_key``."""
    digest = hashlib.sha1(f"{country_key.lower()}:{index}".encode()).hexdigest()
    return f"{CURATED_ID_PREFIX}{digest[:_ID_LENGTH]}"


def random_curated_id() -> str:
    """Fresh identifier that differs on every call."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))
    return f"{CURATED_ID_PREFIX}{suffix}"


class CuratedStationRepository(CuratedStationSource):
    """Read-only lookup over the curated station table."""

    def __init__(
        self,
        table: Mapping[str, Sequence[CuratedEntry]] | None = None,
        id_mode: str = "stable",
    ) -> None:
        """Initialize with a curated table.

        Args:
            table: Curated entries keyed by country name. Defaults to the
                built-in table.
            id_mode: 'stable' for deterministic identifiers, 'random' for a
                new identifier on every call.
        """
        if id_mode not in ("stable", "random"):
            raise ValueError("id_mode must be either 'stable' or 'random'")
        source = CURATED_STATIONS if table is None else table
        self._table: dict[str, tuple[CuratedEntry, ...]] = {
            key: tuple(entries) for key, entries in source.items()
        }
        self._id_mode = id_mode

    @classmethod
    def with_extra(
        cls, extra: Mapping[str, Sequence[CuratedEntry]], id_mode: str = "stable"
    ) -> "CuratedStationRepository":
        """Built-in table extended with extra entries; extra entries go last."""
        merged: dict[str, list[CuratedEntry]] = {
            key: list(entries) for key, entries in CURATED_STATIONS.items()
        }
        for country, entries in extra.items():
            existing = next((key for key in merged if key.lower() == country.lower()), country)
            merged.setdefault(existing, []).extend(entries)
        return cls(merged, id_mode=id_mode)

    def _find_key(self, country_name: str, aliases: Sequence[str]) -> str | None:
        candidates = {country_name.lower(), *(alias.lower() for alias in aliases)}
        return next((key for key in self._table if key.lower() in candidates), None)

    def lookup(self, country_name: str, aliases: Sequence[str]) -> list[CuratedEntry]:
        """Return curated entries whose table key matches the name or an alias."""
        key = self._find_key(country_name, aliases)
        if key is None:
            return []
        return list(self._table[key])

    def stations_for(
        self, country_code: str, country_name: str, aliases: Sequence[str]
    ) -> list[Station]:
        """Complete matching curated entries into stations, in table order."""
        key = self._find_key(country_name, aliases)
        if key is None:
            return []

        stations = [
            self._build_station(entry, key, index, country_code)
            for index, entry in enumerate(self._table[key])
        ]
        logger.debug(f"Curated overlay '{key}' contributed {len(stations)} station(s)")
        return stations

    def _build_station(
        self, entry: CuratedEntry, country_key: str, index: int, country_code: str
    ) -> Station:
        if self._id_mode == "random":
            stationuuid = random_curated_id()
        else:
            stationuuid = stable_curated_id(country_key, index)

        has_coordinates = entry.geo_lat is not None and entry.geo_long is not None
        return Station(
            stationuuid=stationuuid,
            name=entry.name,
            url=entry.url,
            url_resolved=entry.url_resolved or entry.url,
            homepage=entry.homepage,
            favicon=entry.favicon,
            tags=entry.tags,
            country=country_key,
            countrycode=country_code,
            state=entry.state,
            city=entry.city,
            language=entry.language,
            codec=entry.codec or infer_codec(entry.url),
            geo_lat=entry.geo_lat if has_coordinates else None,
            geo_long=entry.geo_long if has_coordinates else None,
        )
