"""Gemini assistant client using the generateContent REST API."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from radio_orbit.adapters.api_request_logger import log_api_request
from radio_orbit.domain.ports.assistant_client import AssistantClient, AssistantServiceError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

SYSTEM_INSTRUCTION = (
    'You are a world radio expert called "Orbit AI". '
    "Your mission is to help the user find radio stations. "
    "If the user asks for a genre or place, answer briefly and enthusiastically. "
    'IMPORTANT: Always end your answer with a search suggestion in the format: [SEARCH: "search term"]. '
    'Example: "Sure! In Cali salsa rules. [SEARCH: "Cali Salsa"]"'
)


class GeminiAssistantClient(AssistantClient):
    """Adapter for Google's Gemini text generation API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta/models",
        temperature: float = 0.7,
        timeout_seconds: float = 30.0,
        session: "ClientSession | None" = None,
        system_instruction: str = SYSTEM_INSTRUCTION,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._temperature = temperature
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session = session
        self._system_instruction = system_instruction

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Request body for a single-turn prompt with the system instruction."""
        return {
            "system_instruction": {"parts": [{"text": self._system_instruction}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": float(self._temperature)},
        }

    @staticmethod
    def extract_text(data: dict[str, Any]) -> str:
        """Concatenate the text parts of every candidate."""
        out = ""
        for candidate in data.get("candidates", []) or []:
            content = candidate.get("content") or {}
            for part in content.get("parts", []) or []:
                out += part.get("text", "")
        return out.strip()

    async def generate(self, prompt: str) -> str:
        """Send the prompt and return the reply text.

        Raises:
            AssistantServiceError: On missing credentials, transport errors,
                timeouts or non-success responses.
        """
        if not self._api_key:
            raise AssistantServiceError("Gemini API key is not configured")

        url = f"{self._base_url}/{self._model}:generateContent"
        headers = {"Content-Type": "application/json", "x-goog-api-key": self._api_key}
        payload = self.build_payload(prompt)
        log_api_request("POST", url, headers=headers, payload=payload)

        try:
            if self._session is not None:
                data = await self._post(self._session, url, headers, payload)
            else:
                async with aiohttp.ClientSession() as session:
                    data = await self._post(session, url, headers, payload)
        except asyncio.TimeoutError as e:
            raise AssistantServiceError("Gemini request timed out") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise AssistantServiceError(f"Gemini request failed: {e}") from e

        return self.extract_text(data)

    async def _post(
        self,
        session: "ClientSession",
        url: str,
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        async with session.post(
            url, json=payload, headers=headers, timeout=self._timeout
        ) as response:
            if response.status != 200:
                body = await response.text()
                logger.error(f"Gemini returned status {response.status}: {body[:500]}")
                raise AssistantServiceError(f"Gemini returned status {response.status}")
            data = await response.json(content_type=None)
            if not isinstance(data, dict):
                raise AssistantServiceError("Gemini returned an unexpected payload")
            return data
