"""Gemini REST transport client.

Architectural role:
    Executes `generateContent` HTTP requests against the configured Gemini endpoint.
    One instance is built at application startup and passed explicitly to the
    analysis and image services, so tests can substitute any object exposing
    `generate_content(model, payload)`.

Model invocation flow:
    `service.analyze_profession` / `image.service.generate_illustration`
    -> `asyncio.to_thread(client.generate_content, model, payload)`
    -> parsed JSON response dict.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted once with the
    configured timeout.

Failure handling model:
    Missing credentials and HTTP/network failures are raised as `TransportError`
    with a sanitized, provider-labeled message. Callers decide whether the failure
    is fatal (analysis) or absorbed (image).
"""

import logging

import requests

from ai_vs_professions.core.errors import TransportError
from ai_vs_professions.llm.provider_config import (
    DEBUG,
    GEMINI_BASE_URL,
    GEMINI_KEY_FILE,
    REQUEST_TIMEOUT,
    load_key,
)


logger = logging.getLogger(__name__)


def _build_sanitized_http_error(err: requests.exceptions.RequestException) -> tuple[str, int | None]:
    """Build provider-labeled HTTP error text without exposing raw internals.

    Returns:
        `(message, status_code)`; `status_code` is `None` when no response arrived.
    """
    status_code = None
    if getattr(err, "response", None) is not None:
        status_code = getattr(err.response, "status_code", None)

    if status_code:
        return f"GEMINI HTTP ERROR ({status_code})", status_code
    return "GEMINI HTTP ERROR", None


class GeminiClient:
    """Long-lived HTTP client for the Gemini `generateContent` endpoint.

    Args:
        api_key: API key sent as `x-goog-api-key`. `None` defers the failure to
            the first request.
        base_url: Models collection URL, without a trailing slash.
        timeout: Per-request socket timeout in seconds.
        session: Optional pre-built `requests.Session`.
    """

    def __init__(self, api_key, base_url=GEMINI_BASE_URL, timeout=REQUEST_TIMEOUT, session=None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_env(cls):
        """Build a client from `GEMINI_API_KEY` or `config/gemini.key`."""
        api_key = load_key(GEMINI_KEY_FILE)
        if not api_key:
            logger.warning("No Gemini API key configured; requests will fail")
        return cls(api_key)

    def endpoint(self, model: str) -> str:
        return f"{self.base_url}/{model}:generateContent"

    def generate_content(self, model: str, payload: dict) -> dict:
        """Send one `generateContent` request and return the parsed JSON body.

        Raises:
            TransportError: missing key, network failure, non-2xx status or a
                body that is not JSON.
        """
        if not self.api_key:
            raise TransportError("GEMINI KEY NOT FOUND")

        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        if DEBUG:
            logger.debug("Gemini request model=%s payload=%r", model, payload)

        try:
            response = self.session.post(
                self.endpoint(model),
                headers=headers,
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as err:
            message, status_code = _build_sanitized_http_error(err)
            raise TransportError(message, status_code) from err

        try:
            data = response.json()
        except ValueError as err:
            raise TransportError("GEMINI RESPONSE IS NOT JSON") from err

        if DEBUG:
            logger.debug("Gemini response model=%s body=%r", model, data)

        return data

    def close(self):
        self.session.close()
