"""Tests for the radio-browser directory adapter."""

import asyncio
import json
import random
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from radio_orbit.adapters.radio_browser import MirrorSelector, RadioBrowserStationDirectory

MIRROR = "https://all.api.radio-browser.info/json"


def _session_returning(status: int = 200, payload: Any = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value=text)
    session = MagicMock()
    session.get.return_value.__aenter__.return_value = response
    return session


def _directory(session: MagicMock) -> RadioBrowserStationDirectory:
    return RadioBrowserStationDirectory(
        mirror_selector=MirrorSelector([MIRROR], preferred=MIRROR),
        session=session,
        user_agent="RadioOrbit/test",
    )


class TestFetchStations:
    """Tests for request building and response handling."""

    @pytest.mark.asyncio
    async def test_request_merges_defaults_with_caller_params(self) -> None:
        """Given caller params, when fetching, then defaults apply and caller values win."""
        session = _session_returning(payload=[])
        directory = _directory(session)

        await directory.fetch_stations("/stations/search", {"name": "jazz", "limit": "500"})

        args, kwargs = session.get.call_args
        assert args[0] == f"{MIRROR}/stations/search"
        assert kwargs["params"] == {"hidebroken": "true", "limit": "500", "name": "jazz"}
        assert kwargs["headers"]["User-Agent"] == "RadioOrbit/test"
        assert isinstance(kwargs["timeout"], aiohttp.ClientTimeout)

    @pytest.mark.asyncio
    async def test_default_limit_is_one_thousand(self) -> None:
        """Given no caller limit, when fetching, then limit 1000 is requested."""
        session = _session_returning(payload=[])

        await _directory(session).fetch_stations("/stations/bycountrycodeexact/CO", {})

        assert session.get.call_args.kwargs["params"]["limit"] == "1000"

    @pytest.mark.asyncio
    async def test_successful_response_is_normalized_and_filtered(self) -> None:
        """Given records with and without URLs, when fetching, then only playable ones return."""
        payload = [
            {"stationuuid": "a", "name": "A", "url": "https://example.org/a", "clickcount": 3},
            {"stationuuid": "b", "name": "B", "url": ""},
        ]
        session = _session_returning(payload=payload)

        stations = await _directory(session).fetch_stations("/stations/search", {})

        assert [s.stationuuid for s in stations] == ["a"]
        assert stations[0].url_resolved == "https://example.org/a"

    @pytest.mark.asyncio
    async def test_infinite_counts_do_not_escape_fetch(self) -> None:
        """Given a body with an overflowing click count, when fetching, then the field becomes zero."""
        payload = json.loads('[{"stationuuid": "a", "url": "http://x", "clickcount": 1e400}]')
        session = _session_returning(payload=payload)

        stations = await _directory(session).fetch_stations("/stations/search", {})

        assert [s.stationuuid for s in stations] == ["a"]
        assert stations[0].clickcount == 0

    @pytest.mark.asyncio
    async def test_explicit_base_url_is_used_instead_of_selector(self) -> None:
        """Given a caller-resolved mirror, when fetching, then that mirror is queried."""
        session = _session_returning(payload=[])

        await _directory(session).fetch_stations(
            "/stations/bycountry/Chile", {}, base_url="https://de1.example/json/"
        )

        assert session.get.call_args[0][0] == "https://de1.example/json/stations/bycountry/Chile"

    def test_resolve_base_url_delegates_to_selector(self) -> None:
        """Given several mirrors and no preferred one, when resolving, then a configured mirror is chosen."""
        mirrors = ["https://de1.example/json", "https://nl1.example/json"]
        directory = RadioBrowserStationDirectory(
            mirror_selector=MirrorSelector(mirrors, preferred=None, rng=random.Random(3))
        )

        assert directory.resolve_base_url() in mirrors

    @pytest.mark.asyncio
    async def test_non_success_status_returns_empty_list(self) -> None:
        """Given a 503, when fetching, then an empty list is returned."""
        session = _session_returning(status=503, text="Service Unavailable")

        assert await _directory(session).fetch_stations("/stations/search", {}) == []

    @pytest.mark.asyncio
    async def test_non_list_payload_returns_empty_list(self) -> None:
        """Given an object body, when fetching, then an empty list is returned."""
        session = _session_returning(payload={"error": "nope"})

        assert await _directory(session).fetch_stations("/stations/search", {}) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError(), ValueError("bad json")],
    )
    async def test_transport_failures_return_empty_list(self, error: Exception) -> None:
        """Given a transport, timeout or parse failure, when fetching, then it never raises."""
        session = MagicMock()
        session.get.side_effect = error

        assert await _directory(session).fetch_stations("/stations/search", {}) == []


class TestMirrorSelector:
    """Tests for mirror selection."""

    def test_preferred_mirror_is_used_when_set(self) -> None:
        """Given a preferred mirror, when selecting, then it is returned."""
        selector = MirrorSelector(["https://de1.example/json"], preferred="https://all.example/json/")

        assert selector.select() == "https://all.example/json"

    def test_without_preferred_mirror_a_configured_one_is_chosen(self) -> None:
        """Given no preferred mirror, when selecting, then a configured mirror is returned."""
        mirrors = ["https://de1.example/json", "https://nl1.example/json"]
        selector = MirrorSelector(mirrors, preferred=None, rng=random.Random(7))

        picks = {selector.select() for _ in range(50)}

        assert picks == set(mirrors)

    def test_unusable_preferred_mirror_falls_back_to_random(self) -> None:
        """Given a preferred value that is not a URL, when selecting, then a configured mirror is used."""
        selector = MirrorSelector(["https://de1.example/json"], preferred="fastest")

        assert selector.select() == "https://de1.example/json"

    def test_empty_mirror_list_is_rejected(self) -> None:
        """Given no mirrors, when constructing, then ValueError is raised."""
        with pytest.raises(ValueError, match="mirror"):
            MirrorSelector([])
