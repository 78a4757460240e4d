"""Tests for station list filtering."""

from radio_orbit.application.services import filter_stations
from tests.fakes import make_station


def _stations() -> list:
    return [
        make_station("a", name="Tropicana", city="Cali", tags="salsa,tropical"),
        make_station("b", name="Rock FM", city="Santiago de Cali"),
        make_station("c", name="La Mega", city="", state="Valle del Cauca"),
        make_station("d", name="Jazz 24", city="Bogotá", tags="jazz"),
    ]


def test_without_filters_all_stations_are_returned() -> None:
    """Given no filters, when filtering, then the list is unchanged."""
    assert [s.stationuuid for s in filter_stations(_stations())] == ["a", "b", "c", "d"]


def test_city_filter_matches_containment_both_ways() -> None:
    """Given city Cali, when filtering, then exact and containing names match."""
    result = filter_stations(_stations(), city=" cali ")

    assert [s.stationuuid for s in result] == ["a", "b"]


def test_city_filter_matches_state() -> None:
    """Given a region name, when filtering, then stations in that state match."""
    result = filter_stations(_stations(), city="Valle")

    assert [s.stationuuid for s in result] == ["c"]


def test_search_term_matches_name_tags_or_city() -> None:
    """Given a term, when filtering, then name, tags and city are searched case-insensitively."""
    assert [s.stationuuid for s in filter_stations(_stations(), search_term="JAZZ")] == ["d"]
    assert [s.stationuuid for s in filter_stations(_stations(), search_term="salsa")] == ["a"]
    assert [s.stationuuid for s in filter_stations(_stations(), search_term="bogo")] == ["d"]


def test_city_and_term_combine() -> None:
    """Given both filters, when filtering, then stations must satisfy both."""
    result = filter_stations(_stations(), city="Cali", search_term="rock")

    assert [s.stationuuid for s in result] == ["b"]
