"""Curated station entry model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CuratedEntry:
    """Hand-maintained partial station template.

    Completed into a full Station at aggregation time.
    """

    name: str
    url: str
    city: str = ""
    state: str = ""
    tags: str = ""
    geo_lat: float | None = None
    geo_long: float | None = None
    homepage: str = ""
    favicon: str = ""
    language: str = ""
    codec: str | None = None
    url_resolved: str | None = None
