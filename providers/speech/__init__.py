"""Speech providers: Gemini TTS."""

from providers.speech.base import SpeechProvider, SpeechResult

__all__ = ["SpeechProvider", "SpeechResult"]
