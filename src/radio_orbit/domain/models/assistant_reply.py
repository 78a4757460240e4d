"""Assistant reply model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssistantReply:
    """Assistant text ready for display plus an optional search request."""

    text: str
    search_term: str | None = None
