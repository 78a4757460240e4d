"""Station domain model."""

import math
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Station:
    """Represents a normalized radio stream source.

    String fields are never None; an unknown city is the empty string.
    ``geo_lat`` and ``geo_long`` are either both floats or both None.
    """

    stationuuid: str
    name: str
    url: str
    url_resolved: str
    homepage: str = ""
    favicon: str = ""
    tags: str = ""
    country: str = ""
    countrycode: str = ""
    state: str = ""
    city: str = ""
    language: str = ""
    votes: int = 0
    clickcount: int = 0
    codec: str = ""
    bitrate: int = 0
    geo_lat: float | None = None
    geo_long: float | None = None

    @property
    def is_geolocated(self) -> bool:
        """True when both coordinates are present and numeric."""
        if not isinstance(self.geo_lat, (int, float)) or not isinstance(self.geo_long, (int, float)):
            return False
        return not (math.isnan(self.geo_lat) or math.isnan(self.geo_long))

    @property
    def place(self) -> str:
        """City if known, otherwise state."""
        return self.city or self.state

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict using the directory's field names."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Station":
        """Build a station from a dict produced by ``to_dict``.

        Unknown keys are ignored so older persisted payloads still load.
        """
        known = {key: data[key] for key in cls.__dataclass_fields__ if key in data}
        return cls(**known)
