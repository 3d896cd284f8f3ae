"""Provider abstraction layer for text, image, and speech generation.

Supports switching between the Gemini API and local OpenAI-compatible
servers for text via configuration.
"""

from providers.llm.base import LLMProvider, LLMResponse
from providers.image.base import ImageProvider, ImageResult
from providers.speech.base import SpeechProvider, SpeechResult
from providers.factory import get_llm_provider, get_image_provider, get_speech_provider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "ImageProvider",
    "ImageResult",
    "SpeechProvider",
    "SpeechResult",
    "get_llm_provider",
    "get_image_provider",
    "get_speech_provider",
]
