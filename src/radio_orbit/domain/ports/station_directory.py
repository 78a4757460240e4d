"""Station directory port."""

from typing import Protocol

from radio_orbit.domain.models.station import Station


class StationDirectory(Protocol):
    """Port for querying a federated station directory."""

    def resolve_base_url(self) -> str:
        """Choose the base URL that a group of related requests should share."""
        ...

    async def fetch_stations(
        self, endpoint: str, params: dict[str, str], base_url: str | None = None
    ) -> list[Station]:
        """Fetch normalized stations from an endpoint.

        When ``base_url`` is omitted a base URL is resolved for this request
        alone. Implementations never raise; failures yield an empty list.
        """
        ...
