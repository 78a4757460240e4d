"""Test doubles and builders shared across test modules."""

from collections.abc import Sequence

from radio_orbit.domain.models import CuratedEntry, Station


def make_station(
    stationuuid: str,
    clickcount: int = 0,
    name: str | None = None,
    city: str = "",
    state: str = "",
    geo_lat: float | None = None,
    geo_long: float | None = None,
    **kwargs: object,
) -> Station:
    """Build a station with sensible defaults for tests."""
    return Station(
        stationuuid=stationuuid,
        name=name or f"Station {stationuuid}",
        url=f"https://stream.example.org/{stationuuid}",
        url_resolved=f"https://stream.example.org/{stationuuid}",
        city=city,
        state=state,
        clickcount=clickcount,
        geo_lat=geo_lat,
        geo_long=geo_long,
        **kwargs,  # type: ignore[arg-type]
    )


class FakeStationDirectory:
    """Station directory returning canned results keyed by endpoint prefix."""

    def __init__(
        self,
        responses: dict[str, list[Station] | Exception],
        base_urls: Sequence[str] = ("https://mirror.example/json",),
    ) -> None:
        self.responses = responses
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.requested_base_urls: list[str | None] = []
        self._base_urls = list(base_urls)
        self.resolve_count = 0

    def resolve_base_url(self) -> str:
        base_url = self._base_urls[self.resolve_count % len(self._base_urls)]
        self.resolve_count += 1
        return base_url

    async def fetch_stations(
        self, endpoint: str, params: dict[str, str], base_url: str | None = None
    ) -> list[Station]:
        self.calls.append((endpoint, params))
        self.requested_base_urls.append(base_url)
        for prefix, response in self.responses.items():
            if endpoint.startswith(prefix):
                if isinstance(response, Exception):
                    raise response
                return list(response)
        return []


class FakeCuratedSource:
    """Curated source returning a fixed list of already-completed stations."""

    def __init__(self, stations: list[Station] | None = None) -> None:
        self.stations = stations or []
        self.calls: list[tuple[str, str, tuple[str, ...]]] = []

    def lookup(self, country_name: str, aliases: Sequence[str]) -> list[CuratedEntry]:
        return []

    def stations_for(
        self, country_code: str, country_name: str, aliases: Sequence[str]
    ) -> list[Station]:
        self.calls.append((country_code, country_name, tuple(aliases)))
        return list(self.stations)
