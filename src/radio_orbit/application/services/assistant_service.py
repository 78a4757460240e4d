"""Assistant conversation service with search-marker extraction."""

import logging
import re

from radio_orbit.application.services.station_aggregation_service import (
    StationAggregationService,
)
from radio_orbit.domain.models.assistant_reply import AssistantReply
from radio_orbit.domain.models.station import Station
from radio_orbit.domain.ports.assistant_client import AssistantClient

logger = logging.getLogger(__name__)

SEARCH_MARKER_PATTERN = re.compile(r'\[SEARCH:\s*"(.*?)"\]')
SEARCH_MARKER_STRIP_PATTERN = re.compile(r"\[SEARCH:.*?\]")

EMPTY_REPLY_MESSAGE = "Received an empty signal from orbit. Please try again."
FALLBACK_MESSAGE = (
    "Could not reach Orbit AI. Make sure the assistant API key is configured "
    "and try again."
)


def parse_assistant_reply(text: str) -> AssistantReply:
    """Split a raw assistant reply into display text and a search term.

    The first ``[SEARCH: "term"]`` marker provides the term; every marker is
    removed from the displayed text, which is then trimmed.
    """
    match = SEARCH_MARKER_PATTERN.search(text)
    search_term = match.group(1) if match and match.group(1) else None
    clean_text = SEARCH_MARKER_STRIP_PATTERN.sub("", text).strip()
    return AssistantReply(text=clean_text, search_term=search_term)


class AssistantService:
    """Asks the assistant and turns its suggestions into station searches."""

    def __init__(
        self,
        client: AssistantClient,
        aggregation_service: StationAggregationService | None = None,
    ) -> None:
        self._client = client
        self._aggregation_service = aggregation_service

    async def ask(self, prompt: str) -> AssistantReply:
        """Ask the assistant; failures become a fixed fallback reply."""
        try:
            raw = await self._client.generate(prompt)
        except Exception as e:
            logger.error(f"Assistant request failed: {e}")
            return AssistantReply(text=FALLBACK_MESSAGE)

        if not raw:
            return AssistantReply(text=EMPTY_REPLY_MESSAGE)
        return parse_assistant_reply(raw)

    async def ask_and_search(self, prompt: str) -> tuple[AssistantReply, list[Station]]:
        """Ask the assistant and run the search it suggests, if any."""
        reply = await self.ask(prompt)
        if not reply.search_term or self._aggregation_service is None:
            return reply, []

        logger.info(f"Assistant requested search for '{reply.search_term}'")
        stations = await self._aggregation_service.search_global_stations(reply.search_term)
        return reply, stations
