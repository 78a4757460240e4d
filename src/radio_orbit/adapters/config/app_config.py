"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MIRRORS = [
    "https://de1.api.radio-browser.info/json",
    "https://at1.api.radio-browser.info/json",
    "https://nl1.api.radio-browser.info/json",
    "https://all.api.radio-browser.info/json",
]


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="RADIO_ORBIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Station directory configuration
    directory_mirrors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MIRRORS),
        description="Interchangeable radio-browser base URLs",
    )
    preferred_mirror: str | None = Field(
        default="https://all.api.radio-browser.info/json",
        description="Mirror to use when set; otherwise a random configured mirror",
    )
    directory_timeout_seconds: float = Field(
        default=10.0, description="Deadline for a single directory request in seconds"
    )
    directory_limit: int = Field(
        default=1000, description="Maximum number of stations requested per directory query"
    )
    search_limit: int = Field(
        default=500, description="Maximum number of stations returned by a global search"
    )
    user_agent: str = Field(default="RadioOrbit/2.7", description="User-Agent for API requests")

    # Curated overlay configuration
    curated_id_mode: str = Field(
        default="stable",
        description="Identifier mode for curated stations: 'stable' or 'random'",
    )
    curated_stations_file: str | None = Field(
        default=None,
        description="Optional TOML file with extra curated stations per country",
    )

    # Favorites persistence
    favorites_file: str = Field(
        default="~/.radio-orbit/storage.json",
        description="Path to the key-value JSON document holding favorites",
    )

    # Assistant configuration
    gemini_api_key: str = Field(default="", description="API key for the Gemini assistant")
    gemini_model: str = Field(default="gemini-1.5-flash", description="Gemini model name")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/models",
        description="Base URL of the Gemini generateContent API",
    )
    gemini_temperature: float = Field(default=0.7, description="Sampling temperature")
    assistant_timeout_seconds: float = Field(
        default=30.0, description="Deadline for an assistant request in seconds"
    )

    # Country geometry documents
    geometry_url: str = Field(
        default="https://d2ad6b4ur7yvpq.cloudfront.net/naturalearth-3.3.0/ne_50m_admin_0_countries.geojson",
        description="Primary country-boundary GeoJSON document",
    )
    geometry_fallback_url: str = Field(
        default="https://d2ad6b4ur7yvpq.cloudfront.net/naturalearth-3.3.0/ne_110m_admin_0_countries.geojson",
        description="Fallback country-boundary GeoJSON document",
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("curated_id_mode")
    @classmethod
    def validate_curated_id_mode(cls, v: str) -> str:
        """Validate curated id mode is either 'stable' or 'random'."""
        if v.lower() not in ("stable", "random"):
            raise ValueError("curated_id_mode must be either 'stable' or 'random'")
        return v.lower()

    @field_validator("directory_limit", "search_limit")
    @classmethod
    def validate_positive_limit(cls, v: int) -> int:
        """Validate result limits are positive."""
        if v <= 0:
            raise ValueError("result limits must be positive")
        return v

    @field_validator("directory_mirrors")
    @classmethod
    def validate_mirrors(cls, v: list[str]) -> list[str]:
        """Strip trailing slashes and reject an empty mirror list."""
        mirrors = [mirror.rstrip("/") for mirror in v if mirror.strip()]
        if not mirrors:
            raise ValueError("directory_mirrors must contain at least one URL")
        return mirrors

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level to upper case."""
        return v.upper()
