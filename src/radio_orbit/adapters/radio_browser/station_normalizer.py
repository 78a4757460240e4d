"""Normalization of raw radio-browser records into Station objects."""

import math
from typing import Any

from radio_orbit.domain.models.station import Station


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _count(value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(number, 0)


def _coordinate(value: Any) -> float | None:
    if value is None or isinstance(value, bool) or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def normalize_station(raw: dict[str, Any]) -> Station:
    """Map a raw directory record to a Station, filling every field.

    ``url_resolved`` falls back to ``url``; coordinates are kept only when
    both are valid numbers.
    """
    url = _text(raw.get("url"))
    url_resolved = _text(raw.get("url_resolved")) or url

    geo_lat = _coordinate(raw.get("geo_lat"))
    geo_long = _coordinate(raw.get("geo_long"))
    if geo_lat is None or geo_long is None:
        geo_lat = geo_long = None

    return Station(
        stationuuid=_text(raw.get("stationuuid")),
        name=_text(raw.get("name")),
        url=url_resolved,
        url_resolved=url_resolved,
        homepage=_text(raw.get("homepage")),
        favicon=_text(raw.get("favicon")),
        tags=_text(raw.get("tags")),
        country=_text(raw.get("country")),
        countrycode=_text(raw.get("countrycode")),
        state=_text(raw.get("state")),
        city=_text(raw.get("city")),
        language=_text(raw.get("language")),
        votes=_count(raw.get("votes")),
        clickcount=_count(raw.get("clickcount")),
        codec=_text(raw.get("codec")),
        bitrate=_count(raw.get("bitrate")),
        geo_lat=geo_lat,
        geo_long=geo_long,
    )


def normalize_stations(records: list[Any]) -> list[Station]:
    """Normalize a directory response.

    Records without an identifier or a playable URL are dropped.
    """
    stations = []
    for record in records:
        if not isinstance(record, dict):
            continue
        station = normalize_station(record)
        if station.stationuuid and station.url_resolved:
            stations.append(station)
    return stations
