"""Text filtering of an aggregated station list."""

from collections.abc import Iterable

from radio_orbit.domain.models.station import Station


def _matches_city(station: Station, city: str) -> bool:
    wanted = city.strip().lower()
    station_city = station.city.strip().lower()
    station_state = station.state.strip().lower()
    if station_city and (
        station_city == wanted or wanted in station_city or station_city in wanted
    ):
        return True
    return bool(station_state) and wanted in station_state


def _matches_term(station: Station, term: str) -> bool:
    lower = term.lower()
    return (
        lower in station.name.lower()
        or lower in station.tags.lower()
        or lower in station.city.lower()
    )


def filter_stations(
    stations: Iterable[Station], city: str | None = None, search_term: str = ""
) -> list[Station]:
    """Narrow stations to a selected city and/or a search term.

    City matching is loose: exact, either name containing the other, or the
    state containing the city. The search term is a case-insensitive
    substring of name, tags or city.
    """
    result = list(stations)
    if city:
        result = [station for station in result if _matches_city(station, city)]
    if search_term:
        result = [station for station in result if _matches_term(station, search_term)]
    return result
