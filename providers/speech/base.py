"""Abstract base class for speech synthesis providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class SpeechResult:
    """Standardized result from any speech provider."""

    audio_base64: str  # raw PCM, base64 text; empty when the model sent none
    provider: str
    voice: str
    mime_type: str | None = None
    generation_time_ms: float | None = None


class SpeechProvider(ABC):
    """Abstract base class for speech synthesis providers.

    Implementations: GeminiSpeechProvider
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name for logging/tracking."""
        ...

    @abstractmethod
    async def synthesize(self, text: str, voice: str) -> SpeechResult:
        """Synthesize speech for the given text with a named voice preset.

        Raises httpx.HTTPError on transport failure.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        ...
