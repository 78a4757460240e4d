"""Outgoing request logging, enabled with RADIO_ORBIT_LOG_REQUESTS=true."""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = frozenset({"authorization", "cookie", "x-api-key", "x-goog-api-key", "key"})
MAX_PAYLOAD_CHARS = 1000


def should_log_requests() -> bool:
    """Check the RADIO_ORBIT_LOG_REQUESTS environment variable."""
    return os.getenv("RADIO_ORBIT_LOG_REQUESTS", "").lower() == "true"


def redact(values: dict[str, Any]) -> dict[str, Any]:
    """Replace values of credential-bearing keys (headers or query params)."""
    return {k: REDACTED if k.lower() in SENSITIVE_KEYS else v for k, v in values.items()}


def describe_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> str:
    """Render a request as a multi-line log message with credentials redacted."""
    full_url = url
    if params:
        query = urlencode(sorted(redact(params).items()), safe="*")
        full_url = f"{url}{'&' if '?' in url else '?'}{query}"

    lines = [f"{method} {full_url}"]
    if headers:
        lines.append(f"Headers: {json.dumps(redact(headers), sort_keys=True)}")
    if payload is not None:
        try:
            body = json.dumps(payload, ensure_ascii=False)
        except (TypeError, ValueError):
            body = str(payload)
        if len(body) > MAX_PAYLOAD_CHARS:
            body = body[:MAX_PAYLOAD_CHARS] + "..."
        lines.append(f"Payload: {body}")
    return "\n".join(lines)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log an outgoing request when request logging is enabled."""
    if not should_log_requests():
        return
    logger.info("API Request:\n" + describe_request(method, url, params, headers, payload))
