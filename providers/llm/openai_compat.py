"""OpenAI-compatible LLM provider for vLLM, LM Studio, text-generation-webui, etc."""

import json
import logging
import time

import httpx

from errors import MalformedResponseFailure
from providers.llm.base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 300  # 5 minutes


def _json_object(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError as e:
        raise MalformedResponseFailure(f"OpenAI-compat server returned a non-JSON body ({e})") from e
    if not isinstance(data, dict):
        raise MalformedResponseFailure(f"OpenAI-compat server returned {type(data).__name__}, expected a JSON object")
    return data


def _first_message(data: dict) -> str:
    """Content of the first choice's message, or "" when there are no choices."""
    choices = data.get("choices") or []
    if not choices:
        return ""
    try:
        content = choices[0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseFailure(f"OpenAI-compat response has no message content ({e!r})") from e
    return content or ""


class OpenAICompatProvider(LLMProvider):
    """OpenAI-compatible API provider.

    Works with:
    - vLLM
    - LM Studio
    - text-generation-webui with OpenAI extension
    - Any server implementing OpenAI's /v1/chat/completions endpoint

    These servers have no portable schema enforcement, so a response_schema is
    appended to the system prompt and JSON output is requested via
    response_format.

    Usage:
        provider = OpenAICompatProvider(
            base_url="http://localhost:8000/v1",
            model="qwen2.5-14b",
        )
        response = await provider.complete("You are helpful.", "Hello!")
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000/v1",
        model: str = "qwen2.5-14b",
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @property
    def provider_name(self) -> str:
        return "openai_compat"

    def _get_headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 4096,
        json_mode: bool = False,
        response_schema: dict | None = None,
    ) -> LLMResponse:
        """Generate a completion using the OpenAI-compatible API."""
        start_ms = time.time() * 1000

        system = system_prompt
        if response_schema:
            system = (
                f"{system_prompt}\n\nRespond only with a JSON object matching this schema:\n"
                f"{json.dumps(response_schema, indent=2)}"
            ).strip()

        payload: dict = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": max_tokens,
            "stream": False,
        }

        if json_mode or response_schema:
            payload["response_format"] = {"type": "json_object"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers=self._get_headers(),
                    json=payload,
                )
                response.raise_for_status()

            latency_ms = time.time() * 1000 - start_ms

            data = _json_object(response)
            text = _first_message(data)

            usage = data.get("usage") or {}
            if not isinstance(usage, dict):
                usage = {}
            input_tokens = usage.get("prompt_tokens", 0)
            output_tokens = usage.get("completion_tokens", 0)

            return LLMResponse(
                text=text,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
                model=self.model,
                provider=self.provider_name,
                latency_ms=latency_ms,
            )

        except httpx.HTTPStatusError as e:
            logger.error(
                "OpenAI-compat API error %d: %s",
                e.response.status_code,
                e.response.text,
            )
            raise
        except httpx.ConnectError:
            logger.error("Cannot connect to API at %s. Is the server running?", self.base_url)
            raise
        except httpx.HTTPError as e:
            logger.error("OpenAI-compat call failed: %s", e)
            raise

    async def health_check(self) -> bool:
        """Check if the API server is running and responding."""
        try:
            async with httpx.AsyncClient(timeout=10, transport=self._transport) as client:
                response = await client.get(
                    f"{self.base_url}/models",
                    headers=self._get_headers(),
                )
                response.raise_for_status()
                data = response.json()

                models = [m.get("id", "") for m in data.get("data", [])]
                if self.model in models:
                    return True

                # Some servers don't list models, just check if endpoint works
                logger.info(
                    "API responding but model %s not in list. Available: %s",
                    self.model,
                    ", ".join(models) if models else "unknown",
                )
                return True

        except httpx.HTTPError as e:
            logger.warning("OpenAI-compat health check failed: %s", e)
            return False
