"""Gemini assistant adapter."""

from radio_orbit.adapters.gemini.gemini_assistant_client import GeminiAssistantClient

__all__ = ["GeminiAssistantClient"]
