"""Composition root: wires configuration, adapters and services."""

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from radio_orbit.adapters.config import AppConfig, CuratedStationsLoader
from radio_orbit.adapters.curated import CuratedStationRepository
from radio_orbit.adapters.gemini import GeminiAssistantClient
from radio_orbit.adapters.geometry import CountryGeometryRepository
from radio_orbit.adapters.radio_browser import MirrorSelector, RadioBrowserStationDirectory
from radio_orbit.adapters.storage import JsonFavoritesStore
from radio_orbit.application.services import (
    AssistantService,
    FavoritesService,
    GeoClusteringService,
    StationAggregationService,
    StationSelectionTracker,
)

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass
class AppServices:
    """Services shared by the presentation layer."""

    aggregation: StationAggregationService
    clustering: GeoClusteringService
    assistant: AssistantService
    favorites: FavoritesService
    selection: StationSelectionTracker
    geometry: CountryGeometryRepository


def build_services(config: AppConfig, session: "ClientSession | None" = None) -> AppServices:
    """Create services from configuration.

    Raises:
        ValueError: If the curated stations file is configured but invalid.
    """
    extra_curated = CuratedStationsLoader.load(config)
    curated = CuratedStationRepository.with_extra(extra_curated, id_mode=config.curated_id_mode)

    directory = RadioBrowserStationDirectory(
        mirror_selector=MirrorSelector(config.directory_mirrors, config.preferred_mirror),
        session=session,
        user_agent=config.user_agent,
        timeout_seconds=config.directory_timeout_seconds,
        default_limit=config.directory_limit,
    )
    aggregation = StationAggregationService(directory, curated, search_limit=config.search_limit)

    assistant_client = GeminiAssistantClient(
        api_key=config.gemini_api_key,
        model=config.gemini_model,
        base_url=config.gemini_base_url,
        temperature=config.gemini_temperature,
        timeout_seconds=config.assistant_timeout_seconds,
        session=session,
    )

    return AppServices(
        aggregation=aggregation,
        clustering=GeoClusteringService(),
        assistant=AssistantService(assistant_client, aggregation),
        favorites=FavoritesService(JsonFavoritesStore(config.favorites_file)),
        selection=StationSelectionTracker(),
        geometry=CountryGeometryRepository(
            config.geometry_url, config.geometry_fallback_url, session=session
        ),
    )
