"""Favorites store backed by a flat key-value JSON document."""

import json
import logging
from pathlib import Path
from typing import Any

from radio_orbit.domain.models.station import Station
from radio_orbit.domain.ports.favorites_store import FavoritesStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "radio-orbit-favorites"


class JsonFavoritesStore(FavoritesStore):
    """Keeps favorites as a serialized list under a fixed key.

    Other keys in the document are preserved on save.
    """

    def __init__(self, path: str | Path, key: str = FAVORITES_KEY) -> None:
        self._path = Path(path).expanduser()
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_document(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read favorites from {self._path}: {e}")
            return {}
        return document if isinstance(document, dict) else {}

    def load(self) -> list[Station]:
        """Load favorites; corrupt entries are skipped."""
        raw = self._read_document().get(self._key)
        if raw is None:
            return []
        if isinstance(raw, str):
            # Value stored as a serialized list, as a browser key-value store would
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as e:
                logger.error(f"Failed to parse favorites: {e}")
                return []
        if not isinstance(raw, list):
            logger.error(f"Favorites under '{self._key}' are not a list")
            return []

        favorites = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            try:
                favorites.append(Station.from_dict(item))
            except TypeError as e:
                logger.warning(f"Skipping malformed favorite: {e}")
        return favorites

    def save(self, favorites: list[Station]) -> None:
        """Rewrite the favorites list in full."""
        document = self._read_document()
        document[self._key] = json.dumps(
            [station.to_dict() for station in favorites], ensure_ascii=False
        )
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self._path)
