"""Filter state model."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class FilterState:
    """Current selection owned by the presentation layer."""

    country_code: str | None = None
    country_name: str | None = None
    city: str | None = None
    search_query: str = ""

    def with_country(self, country_code: str, country_name: str) -> "FilterState":
        """Select a country; clears any selected city."""
        return replace(self, country_code=country_code, country_name=country_name, city=None)

    def with_city(self, city: str) -> "FilterState":
        return replace(self, city=city)

    def cleared_city(self) -> "FilterState":
        return replace(self, city=None)
