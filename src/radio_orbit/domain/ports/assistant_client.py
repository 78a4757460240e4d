"""Assistant client port."""

from typing import Protocol


class AssistantServiceError(Exception):
    """Raised when the assistant service cannot produce a reply."""


class AssistantClient(Protocol):
    """Port for a text-completion assistant."""

    async def generate(self, prompt: str) -> str:
        """Return the assistant's raw reply text.

        Raises:
            AssistantServiceError: If the request fails.
        """
        ...
