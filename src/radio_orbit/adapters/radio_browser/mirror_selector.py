"""Mirror selection for the federated radio-browser service."""

import logging
import random
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class MirrorSelector:
    """Chooses one of several equivalent directory base URLs.

    Any mirror serves the same dataset, so the choice only affects latency.
    """

    def __init__(
        self,
        mirrors: Sequence[str],
        preferred: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if not mirrors:
            raise ValueError("At least one mirror is required")
        self._mirrors = [mirror.rstrip("/") for mirror in mirrors]
        self._preferred = preferred.rstrip("/") if preferred else None
        self._rng = rng or random.Random()

    @property
    def mirrors(self) -> list[str]:
        return list(self._mirrors)

    def select(self) -> str:
        """Return the preferred mirror, or a uniformly random configured one."""
        if self._preferred and self._preferred.startswith(("http://", "https://")):
            return self._preferred
        mirror = self._rng.choice(self._mirrors)
        logger.debug(f"No usable preferred mirror, picked {mirror}")
        return mirror
