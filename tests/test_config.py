"""Tests for configuration adapters."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from radio_orbit.adapters.config import AppConfig, CuratedStationsLoader


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's .env file out of the tests."""
    monkeypatch.chdir(tmp_path)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.preferred_mirror == "https://all.api.radio-browser.info/json"
    assert len(config.directory_mirrors) == 4
    assert config.directory_limit == 1000
    assert config.search_limit == 500
    assert config.user_agent == "RadioOrbit/2.7"
    assert config.curated_id_mode == "stable"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given prefixed environment variables, when loading config, then they are used."""
    monkeypatch.setenv("RADIO_ORBIT_DIRECTORY_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("RADIO_ORBIT_CURATED_ID_MODE", "RANDOM")
    monkeypatch.setenv("RADIO_ORBIT_DIRECTORY_MIRRORS", '["https://de1.example/json/"]')

    config = AppConfig()

    assert config.directory_timeout_seconds == 3.5
    assert config.curated_id_mode == "random"
    assert config.directory_mirrors == ["https://de1.example/json"]


def test_config_validates_curated_id_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown id mode, when loading config, then validation fails."""
    monkeypatch.setenv("RADIO_ORBIT_CURATED_ID_MODE", "sequential")

    with pytest.raises(ValidationError, match="curated_id_mode must be either"):
        AppConfig()


def test_config_rejects_non_positive_limits() -> None:
    """Given a zero search limit, when loading config, then validation fails."""
    with pytest.raises(ValidationError, match="limits must be positive"):
        AppConfig(search_limit=0)


def test_config_rejects_empty_mirror_list() -> None:
    """Given no mirrors, when loading config, then validation fails."""
    with pytest.raises(ValidationError, match="at least one URL"):
        AppConfig(directory_mirrors=[])


class TestCuratedStationsLoader:
    """Tests for the TOML curated overlay file."""

    def test_no_file_configured_returns_empty_table(self) -> None:
        """Given no file, when loading, then nothing is added."""
        assert CuratedStationsLoader.load(AppConfig()) == {}

    def test_entries_are_parsed_per_country(self, tmp_path: Path) -> None:
        """Given a TOML file, when loading, then entries are parsed in order."""
        path = tmp_path / "curated.toml"
        path.write_text(
            """
[[countries.Peru]]
name = "Radio Lima"
url = "https://example.org/lima.aac"
city = "Lima"
geo_lat = -12.05
geo_long = -77.04

[[countries.Peru]]
name = "No URL"

[[countries.Peru]]
name = "Cusco FM"
url = "https://example.org/cusco"
geo_lat = -13.5
""",
            encoding="utf-8",
        )

        table = CuratedStationsLoader.load(AppConfig(curated_stations_file=str(path)))

        lima, cusco = table["Peru"]
        assert lima.name == "Radio Lima"
        assert lima.geo_lat == -12.05
        assert cusco.name == "Cusco FM"
        assert cusco.geo_lat is None and cusco.geo_long is None

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Given a configured file that does not exist, when loading, then ValueError is raised."""
        config = AppConfig(curated_stations_file=str(tmp_path / "missing.toml"))

        with pytest.raises(ValueError, match="not found"):
            CuratedStationsLoader.load(config)

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Given malformed TOML, when loading, then ValueError is raised."""
        path = tmp_path / "bad.toml"
        path.write_text("[[countries.Peru]\nname = ", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid curated stations file"):
            CuratedStationsLoader.load(AppConfig(curated_stations_file=str(path)))
