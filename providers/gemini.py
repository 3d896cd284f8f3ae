"""Shared transport for the Gemini generateContent REST endpoint."""

import logging

import httpx

from config import settings
from errors import MalformedResponseFailure

logger = logging.getLogger(__name__)


class GeminiClient:
    """Thin wrapper around ``POST /models/{model}:generateContent``.

    Usage:
        client = GeminiClient(api_key="...")
        data = await client.generate_content("gemini-3-flash-preview", body)
        parts = GeminiClient.first_parts(data)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.google_api_key
        self.base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout
        self._transport = transport

    def _get_headers(self) -> dict:
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    async def generate_content(self, model: str, body: dict) -> dict:
        """POST a request body and return the decoded JSON response.

        Raises httpx errors for transport and status failures, and
        MalformedResponseFailure when a 2xx body is not a JSON object.
        """
        url = f"{self.base_url}/models/{model}:generateContent"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, headers=self._get_headers(), json=body)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Gemini API error %d for %s: %s",
                e.response.status_code,
                model,
                e.response.text,
            )
            raise
        except httpx.HTTPError as e:
            logger.error("Gemini request to %s failed: %s", model, e)
            raise

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Gemini returned a non-JSON body for %s: %.200s", model, response.text)
            raise MalformedResponseFailure(f"Gemini returned a non-JSON body ({e})") from e
        if not isinstance(data, dict):
            raise MalformedResponseFailure(f"Gemini returned {type(data).__name__}, expected a JSON object")
        return data

    async def list_models(self) -> list[str]:
        async with httpx.AsyncClient(timeout=10, transport=self._transport) as client:
            response = await client.get(f"{self.base_url}/models", headers=self._get_headers())
            response.raise_for_status()
            data = response.json()
        if not isinstance(data, dict):
            return []
        return [m.get("name", "") for m in data.get("models", []) if isinstance(m, dict)]

    @staticmethod
    def first_parts(data: dict) -> list[dict]:
        """Content parts of the first candidate, or an empty list. Non-object parts are skipped."""
        candidates = data.get("candidates") or []
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            return []
        content = candidates[0].get("content") or {}
        if not isinstance(content, dict):
            return []
        parts = content.get("parts") or []
        if not isinstance(parts, list):
            return []
        return [part for part in parts if isinstance(part, dict)]

    @staticmethod
    def usage(data: dict) -> tuple[int, int]:
        meta = data.get("usageMetadata") or {}
        if not isinstance(meta, dict):
            return 0, 0
        return meta.get("promptTokenCount", 0), meta.get("candidatesTokenCount", 0)
