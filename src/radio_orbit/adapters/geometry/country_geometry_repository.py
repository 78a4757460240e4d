"""Country boundary geometry loader with a fallback document."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def empty_collection() -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": []}


def country_code_of(feature: dict[str, Any]) -> str | None:
    """Two-letter country code from a feature's properties, if any."""
    properties = feature.get("properties") if feature else None
    if not properties:
        return None
    for key in ("ISO_A2", "iso_a2", "WB_A2", "wb_a2"):
        if properties.get(key):
            return str(properties[key])
    for key in ("ADM0_A3", "adm0_a3"):
        if properties.get(key):
            return str(properties[key])[:2]
    return None


def country_name_of(feature: dict[str, Any]) -> str:
    """Display name from a feature's properties, 'Unknown' when missing."""
    properties = feature.get("properties") if feature else None
    if not properties:
        return "Unknown"
    for key in ("NAME", "name", "ADMIN", "admin"):
        if properties.get(key):
            return str(properties[key])
    return "Unknown"


def geometry_center(geometry: dict[str, Any] | None) -> tuple[float, float]:
    """Bounding-box centre (lat, lng) of the first ring of a polygon geometry."""
    if not geometry or not geometry.get("coordinates"):
        return 0.0, 0.0

    ring = geometry["coordinates"][0]
    if geometry.get("type") == "MultiPolygon":
        ring = ring[0]
    if not ring:
        return 0.0, 0.0

    lats = [point[1] for point in ring]
    lngs = [point[0] for point in ring]
    return (min(lats) + max(lats)) / 2, (min(lngs) + max(lngs)) / 2


class CountryGeometryRepository:
    """Loads country polygons from a primary or fallback GeoJSON document."""

    def __init__(
        self,
        url: str,
        fallback_url: str,
        session: "ClientSession | None" = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        self._url = url
        self._fallback_url = fallback_url
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def load(self) -> dict[str, Any]:
        """Return a FeatureCollection; empty if both documents fail."""
        for url in (self._url, self._fallback_url):
            document = await self._fetch(url)
            if document is not None:
                return document
            logger.warning(f"Map data load failed for {url}")
        logger.error("Fallback map data failed; continuing without country geometry")
        return empty_collection()

    async def _fetch(self, url: str) -> dict[str, Any] | None:
        try:
            if self._session is not None:
                return await self._get(self._session, url)
            async with aiohttp.ClientSession() as session:
                return await self._get(session, url)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"Error fetching geometry from {url}: {e}")
            return None

    async def _get(self, session: "ClientSession", url: str) -> dict[str, Any] | None:
        async with session.get(url, timeout=self._timeout) as response:
            if response.status != 200:
                return None
            data = await response.json(content_type=None)
            if not isinstance(data, dict) or not isinstance(data.get("features"), list):
                return None
            return data
