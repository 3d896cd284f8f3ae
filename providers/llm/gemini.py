"""Gemini text provider (structured JSON output via responseSchema)."""

import logging
import time

import httpx

from providers.gemini import GeminiClient
from providers.llm.base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class GeminiLLMProvider(LLMProvider):
    """Gemini generateContent for text completions.

    Usage:
        provider = GeminiLLMProvider(model="gemini-3-flash-preview")
        response = await provider.complete("", "Hello!", json_mode=True)
    """

    def __init__(self, model: str, client: GeminiClient | None = None):
        self.model = model
        self.client = client or GeminiClient()

    @property
    def provider_name(self) -> str:
        return "gemini"

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 4096,
        json_mode: bool = False,
        response_schema: dict | None = None,
    ) -> LLMResponse:
        start_ms = time.time() * 1000

        generation_config: dict = {"maxOutputTokens": max_tokens}
        if json_mode or response_schema:
            generation_config["responseMimeType"] = "application/json"
        if response_schema:
            generation_config["responseSchema"] = response_schema

        body: dict = {
            "contents": [{"role": "user", "parts": [{"text": user_prompt}]}],
            "generationConfig": generation_config,
        }
        if system_prompt:
            body["systemInstruction"] = {"parts": [{"text": system_prompt}]}

        data = await self.client.generate_content(self.model, body)
        latency_ms = time.time() * 1000 - start_ms

        text = "".join(part.get("text", "") for part in GeminiClient.first_parts(data))
        input_tokens, output_tokens = GeminiClient.usage(data)

        return LLMResponse(
            text=text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=self.model,
            provider=self.provider_name,
            latency_ms=latency_ms,
        )

    async def health_check(self) -> bool:
        """Check the API key by listing models."""
        if not self.client.api_key:
            logger.warning("Gemini API key not configured")
            return False
        try:
            models = await self.client.list_models()
            return bool(models)
        except httpx.HTTPError as e:
            logger.warning("Gemini health check failed: %s", e)
            return False
