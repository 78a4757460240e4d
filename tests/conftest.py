"""Shared test fixtures."""

import pytest

from radio_orbit.domain.models import Station
from tests.fakes import make_station


@pytest.fixture
def curated_pair() -> list[Station]:
    """Two curated stations without click counts."""
    return [
        make_station("m-curated1", name="Curated One", country="Colombia"),
        make_station("m-curated2", name="Curated Two", country="Colombia"),
    ]
