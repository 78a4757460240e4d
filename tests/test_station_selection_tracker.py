"""Tests for the stale-result guard."""

import asyncio

import pytest

from radio_orbit.application.services import StationSelectionTracker


def test_only_latest_generation_is_current() -> None:
    """Given two started requests, when checking, then only the latest is current."""
    tracker = StationSelectionTracker()

    first = tracker.begin()
    second = tracker.begin()

    assert not tracker.is_current(first)
    assert tracker.is_current(second)


@pytest.mark.asyncio
async def test_superseded_request_is_reported_stale() -> None:
    """Given a slow request overtaken by a fast one, when both finish, then only the fast one applies."""
    tracker = StationSelectionTracker()
    release_slow = asyncio.Event()

    async def slow() -> str:
        await release_slow.wait()
        return "slow"

    async def fast() -> str:
        return "fast"

    slow_task = asyncio.create_task(tracker.run(slow))
    await asyncio.sleep(0)
    fast_result = await tracker.run(fast)
    release_slow.set()
    slow_result = await slow_task

    assert fast_result == ("fast", True)
    assert slow_result == ("slow", False)
