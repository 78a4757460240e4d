"""Tests for API request logger."""

from unittest.mock import MagicMock, patch

import pytest

from radio_orbit.adapters.api_request_logger import (
    REDACTED,
    describe_request,
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given RADIO_ORBIT_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("RADIO_ORBIT_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given RADIO_ORBIT_LOG_REQUESTS=True, when checking, then returns True."""
        monkeypatch.setenv("RADIO_ORBIT_LOG_REQUESTS", "True")

        assert should_log_requests() is True


class TestDescribeRequest:
    """Tests for request rendering."""

    def test_params_are_sorted_and_encoded(self) -> None:
        """Given query params, when describing, then they are appended sorted and encoded."""
        text = describe_request("GET", "https://x/json/stations/search", {"name": "Cali Salsa", "limit": "500"})

        assert text == "GET https://x/json/stations/search?limit=500&name=Cali+Salsa"

    def test_credentials_are_redacted(self) -> None:
        """Given an API key header and key param, when describing, then both are redacted."""
        text = describe_request(
            "POST",
            "https://gemini/models/m:generateContent",
            params={"key": "secret"},
            headers={"x-goog-api-key": "secret", "Content-Type": "application/json"},
        )

        assert "secret" not in text
        assert f"key={REDACTED}" in text
        assert "application/json" in text

    def test_long_payloads_are_truncated(self) -> None:
        """Given a large payload, when describing, then the body is truncated."""
        text = describe_request("POST", "https://x", payload={"text": "a" * 5000})

        payload_line = text.splitlines()[-1]
        assert payload_line.endswith("...")
        assert len(payload_line) < 1100


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("radio_orbit.adapters.api_request_logger.should_log_requests", return_value=False)
    @patch("radio_orbit.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when logging a request, then nothing is logged."""
        log_api_request("GET", "https://x")

        mock_logger.info.assert_not_called()

    @patch("radio_orbit.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("radio_orbit.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_request_line(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when logging a request, then the request line is logged."""
        log_api_request("GET", "https://x/json/stations/search", params={"name": "jazz"})

        mock_logger.info.assert_called_once()
        assert "GET https://x/json/stations/search?name=jazz" in mock_logger.info.call_args[0][0]
