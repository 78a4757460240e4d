"""Country alias resolution for directory and curated-table matching."""

_UNITED_STATES = ("USA", "United States", "United States of America")

# Exact (lower-cased) names mapped to their alias group
_EXACT_ALIASES: dict[str, tuple[str, ...]] = {
    "usa": _UNITED_STATES,
    "us": _UNITED_STATES,
    "canada": ("Canada",),
    "mexico": ("Mexico", "México"),
    "méxico": ("Mexico", "México"),
    "uruguay": ("Uruguay",),
    "chile": ("Chile",),
    "ecuador": ("Ecuador",),
    "guam": ("Guam",),
    "colombia": ("Colombia",),
    "spain": ("Spain", "España"),
    "españa": ("Spain", "España"),
}

# Substrings checked in order when no exact match exists
_PARTIAL_ALIASES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("united states", _UNITED_STATES),
    ("dominican", ("Dominican Republic", "Dominican Rep.")),
    ("antarctica", ("Antarctica", "Antártida")),
)


def resolve_country_aliases(name: str) -> tuple[str, ...]:
    """Return the canonical name plus known alternate spellings for a country.

    Unknown countries resolve to a single-element tuple holding the input
    unchanged.
    """
    name_lower = name.lower()
    if name_lower in _EXACT_ALIASES:
        return _EXACT_ALIASES[name_lower]
    for fragment, aliases in _PARTIAL_ALIASES:
        if fragment in name_lower:
            return aliases
    return (name,)

