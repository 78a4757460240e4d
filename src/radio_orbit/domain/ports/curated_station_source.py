"""Curated station source port."""

from collections.abc import Sequence
from typing import Protocol

from radio_orbit.domain.models.curated_entry import CuratedEntry
from radio_orbit.domain.models.station import Station


class CuratedStationSource(Protocol):
    """Port for the read-only, hand-maintained station overlay."""

    def lookup(self, country_name: str, aliases: Sequence[str]) -> list[CuratedEntry]:
        """Return curated entries for a country, or an empty list."""
        ...

    def stations_for(
        self, country_code: str, country_name: str, aliases: Sequence[str]
    ) -> list[Station]:
        """Return curated entries completed into full stations."""
        ...
