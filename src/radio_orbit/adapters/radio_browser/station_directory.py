"""radio-browser station directory adapter using aiohttp."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from radio_orbit.adapters.api_request_logger import log_api_request
from radio_orbit.adapters.radio_browser.constants import DEFAULT_HEADERS, DEFAULT_QUERY_PARAMS
from radio_orbit.adapters.radio_browser.mirror_selector import MirrorSelector
from radio_orbit.adapters.radio_browser.station_normalizer import normalize_stations
from radio_orbit.domain.models.station import Station
from radio_orbit.domain.ports.station_directory import StationDirectory

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class RadioBrowserStationDirectory(StationDirectory):
    """Adapter for the federated radio-browser directory."""

    def __init__(
        self,
        mirror_selector: MirrorSelector,
        session: "ClientSession | None" = None,
        user_agent: str = "RadioOrbit/2.7",
        timeout_seconds: float = 10.0,
        default_limit: int = 1000,
    ) -> None:
        """Initialize the directory client.

        Args:
            mirror_selector: Chooses the base URL when the caller does not
                pass one.
            session: Optional shared aiohttp session; a short-lived one is
                opened per request otherwise.
            user_agent: User-Agent sent with every request.
            timeout_seconds: Total deadline for a single request.
            default_limit: Result cap applied unless the caller overrides it.
        """
        self._mirror_selector = mirror_selector
        self._session = session
        self._headers = {**DEFAULT_HEADERS, "User-Agent": user_agent}
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._default_params = {**DEFAULT_QUERY_PARAMS, "limit": str(default_limit)}

    def build_params(self, params: dict[str, str]) -> dict[str, str]:
        """Merge caller parameters over the defaults."""
        return {**self._default_params, **params}

    def resolve_base_url(self) -> str:
        """Pick a mirror for one or more related requests."""
        return self._mirror_selector.select()

    async def fetch_stations(
        self, endpoint: str, params: dict[str, str], base_url: str | None = None
    ) -> list[Station]:
        """Fetch and normalize stations from a directory endpoint.

        Args:
            endpoint: Path below the mirror base URL, e.g. ``/stations/search``.
            params: Query parameters; these override the defaults.
            base_url: Mirror to query; resolved per request when omitted.

        Returns:
            Normalized stations, or an empty list on any failure.
        """
        base = (base_url or self.resolve_base_url()).rstrip("/")
        url = f"{base}{endpoint}"
        query = self.build_params(params)
        log_api_request("GET", url, params=query, headers=self._headers)

        try:
            if self._session is not None:
                return await self._get(self._session, url, query)
            async with aiohttp.ClientSession() as session:
                return await self._get(session, url, query)
        except asyncio.TimeoutError:
            logger.warning(f"Directory request timed out: {url}")
        except (aiohttp.ClientError, ValueError) as e:
            logger.warning(f"Error fetching stations from {url}: {e}")
        return []

    async def _get(
        self, session: "ClientSession", url: str, params: dict[str, str]
    ) -> list[Station]:
        async with session.get(
            url, params=params, headers=self._headers, timeout=self._timeout
        ) as response:
            return await self._handle_response(response, url)

    async def _handle_response(self, response: "ClientResponse", url: str) -> list[Station]:
        if response.status != 200:
            response_text = await response.text()
            logger.warning(
                f"Directory returned status {response.status} for {url}: {response_text[:200]}"
            )
            return []

        data: Any = await response.json(content_type=None)
        if not isinstance(data, list):
            logger.warning(f"Unexpected directory payload from {url}: {type(data).__name__}")
            return []

        stations = normalize_stations(data)
        logger.debug(f"{url}: {len(stations)} of {len(data)} record(s) playable")
        return stations
