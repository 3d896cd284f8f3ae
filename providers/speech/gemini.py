"""Gemini text-to-speech provider."""

import logging
import time

import httpx

from providers.gemini import GeminiClient
from providers.speech.base import SpeechProvider, SpeechResult

logger = logging.getLogger(__name__)


class GeminiSpeechProvider(SpeechProvider):
    """Gemini TTS model. Audio comes back as base64 raw PCM (s16le, 24 kHz, mono)."""

    def __init__(self, model: str, client: GeminiClient | None = None):
        self.model = model
        self.client = client or GeminiClient()

    @property
    def provider_name(self) -> str:
        return "gemini"

    async def synthesize(self, text: str, voice: str) -> SpeechResult:
        start_ms = time.time() * 1000

        body = {
            "contents": [{"parts": [{"text": text}]}],
            "generationConfig": {
                "responseModalities": ["AUDIO"],
                "speechConfig": {
                    "voiceConfig": {"prebuiltVoiceConfig": {"voiceName": voice}},
                },
            },
        }

        data = await self.client.generate_content(self.model, body)
        parts = GeminiClient.first_parts(data)
        inline = parts[0].get("inlineData") if parts else None
        if not isinstance(inline, dict):
            inline = {}

        return SpeechResult(
            audio_base64=inline.get("data") or "",
            provider=self.provider_name,
            voice=voice,
            mime_type=inline.get("mimeType"),
            generation_time_ms=time.time() * 1000 - start_ms,
        )

    async def health_check(self) -> bool:
        if not self.client.api_key:
            logger.warning("Gemini API key not configured")
            return False
        try:
            return bool(await self.client.list_models())
        except httpx.HTTPError as e:
            logger.warning("Gemini speech health check failed: %s", e)
            return False
