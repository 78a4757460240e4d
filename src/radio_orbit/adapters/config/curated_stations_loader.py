"""Curated stations loader for optional TOML overlay files."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from radio_orbit.adapters.config.app_config import AppConfig
from radio_orbit.domain.models.curated_entry import CuratedEntry

logger = logging.getLogger(__name__)


class CuratedStationsLoader:
    """Loads extra curated stations from the TOML file named in app config.

    Expected layout::

        [[countries.Colombia]]
        name = "La FM Cali"
        url = "https://example.org/live.m3u8"
        city = "Cali"
    """

    @staticmethod
    def load(config: AppConfig) -> dict[str, list[CuratedEntry]]:
        """Load curated entries keyed by country name.

        Raises:
            ValueError: If the configured file is missing or malformed.
        """
        if not config.curated_stations_file:
            return {}

        path = Path(config.curated_stations_file).expanduser()
        if not path.exists():
            raise ValueError(f"Curated stations file not found: {path}")

        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid curated stations file {path}: {e}") from e

        countries = data.get("countries", {})
        if not isinstance(countries, dict):
            raise ValueError("TOML config 'countries' must be a table")

        table: dict[str, list[CuratedEntry]] = {}
        for country, entries in countries.items():
            if not isinstance(entries, list):
                raise ValueError(f"Curated stations for '{country}' must be a list")
            parsed = [
                entry
                for entry in (CuratedStationsLoader._parse_entry(item) for item in entries)
                if entry is not None
            ]
            if parsed:
                table[country] = parsed

        logger.info(
            f"Loaded {sum(len(v) for v in table.values())} curated station(s) from {path}"
        )
        return table

    @staticmethod
    def _parse_entry(item: Any) -> CuratedEntry | None:
        """Parse one TOML entry; entries without name or url are skipped."""
        if not isinstance(item, dict):
            return None
        name = item.get("name")
        url = item.get("url")
        if not name or not url:
            logger.warning(f"Skipping curated entry without name or url: {item}")
            return None

        geo_lat = item.get("geo_lat")
        geo_long = item.get("geo_long")
        if not isinstance(geo_lat, (int, float)) or not isinstance(geo_long, (int, float)):
            geo_lat = geo_long = None

        return CuratedEntry(
            name=str(name),
            url=str(url),
            city=str(item.get("city", "")),
            state=str(item.get("state", "")),
            tags=str(item.get("tags", "")),
            geo_lat=float(geo_lat) if geo_lat is not None else None,
            geo_long=float(geo_long) if geo_long is not None else None,
            homepage=str(item.get("homepage", "")),
            favicon=str(item.get("favicon", "")),
            language=str(item.get("language", "")),
            codec=item.get("codec"),
            url_resolved=item.get("url_resolved"),
        )
