"""Speech synthesis via the configured speech provider."""

import logging

import httpx

from config import settings
from errors import MalformedResponseFailure, RemoteRequestFailure
from providers.factory import get_speech_provider
from providers.speech.base import SpeechProvider

logger = logging.getLogger(__name__)


class SpeechGenerator:
    def __init__(self, provider: SpeechProvider | None = None, voice: str | None = None):
        self._provider = provider
        self.voice = voice or settings.speech_voice

    @property
    def provider(self) -> SpeechProvider:
        if self._provider is None:
            self._provider = get_speech_provider()
        return self._provider

    async def generate(self, text: str, voice: str | None = None) -> str:
        """Return base64 text of raw 16-bit little-endian mono PCM at 24 kHz."""
        voice = voice or self.voice
        try:
            result = await self.provider.synthesize(text, voice)
        except httpx.HTTPError as e:
            raise RemoteRequestFailure(f"Speech request failed: {str(e) or type(e).__name__}") from e

        if not result.audio_base64:
            raise MalformedResponseFailure(f"No audio data returned from {result.provider}")
        return result.audio_base64
