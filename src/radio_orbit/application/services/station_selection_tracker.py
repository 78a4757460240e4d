"""Guard against applying superseded aggregation results."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StationSelectionTracker:
    """Issues a generation number per request; only the latest may be applied.

    A selection that completes after a newer one has started is reported as
    stale so the caller can discard it. One tracker is shared by every
    selection a caller issues; the command line checks the flag before
    printing, and long-lived callers such as a map view rely on it to drop
    out-of-order responses.
    """

    def __init__(self) -> None:
        self._generation = 0

    @property
    def current_generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        """Start a new request and return its generation."""
        self._generation += 1
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def run(self, operation: Callable[[], Awaitable[T]]) -> tuple[T, bool]:
        """Run an operation and report whether its result is still current."""
        generation = self.begin()
        result = await operation()
        applied = self.is_current(generation)
        if not applied:
            logger.debug(f"Discarding stale result for generation {generation}")
        return result, applied
