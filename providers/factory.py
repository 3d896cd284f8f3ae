"""Provider factory for selecting LLM, image, and speech providers based on config."""

import logging

from config import settings
from providers.llm.base import LLMProvider
from providers.image.base import ImageProvider
from providers.speech.base import SpeechProvider

logger = logging.getLogger(__name__)

# Cache provider instances
_llm_provider: LLMProvider | None = None
_image_provider: ImageProvider | None = None
_speech_provider: SpeechProvider | None = None


def get_llm_provider(force_new: bool = False) -> LLMProvider:
    """Get the configured LLM provider.

    Supports:
    - gemini: Gemini API with responseSchema JSON output (default)
    - openai_compat: OpenAI-compatible API (vLLM, LM Studio, etc.)

    Args:
        force_new: If True, create a new instance instead of using cached.

    Returns:
        Configured LLMProvider instance.
    """
    global _llm_provider

    if _llm_provider is not None and not force_new:
        return _llm_provider

    provider_type = settings.llm_provider.lower()

    if provider_type == "openai_compat":
        from providers.llm.openai_compat import OpenAICompatProvider

        _llm_provider = OpenAICompatProvider(
            base_url=settings.openai_compat_base_url,
            model=settings.openai_compat_model,
            api_key=settings.openai_compat_api_key or None,
        )
        logger.info("Using OpenAI-compatible LLM provider: %s", settings.openai_compat_model)

    else:
        # Default to Gemini
        from providers.llm.gemini import GeminiLLMProvider

        _llm_provider = GeminiLLMProvider(model=settings.metadata_model)
        logger.info("Using Gemini LLM provider: %s", settings.metadata_model)

    return _llm_provider


def get_image_provider(force_new: bool = False) -> ImageProvider:
    """Get the configured image generation provider.

    Supports:
    - gemini: Gemini image model with inline PNG output (default)
    """
    global _image_provider

    if _image_provider is not None and not force_new:
        return _image_provider

    provider_type = settings.image_provider.lower()
    if provider_type != "gemini":
        logger.warning("Unknown image provider %r, falling back to gemini", provider_type)

    from providers.image.gemini import GeminiImageProvider

    _image_provider = GeminiImageProvider(model=settings.image_model)
    logger.info("Using Gemini image provider: %s", settings.image_model)

    return _image_provider


def get_speech_provider(force_new: bool = False) -> SpeechProvider:
    """Get the configured speech synthesis provider.

    Supports:
    - gemini: Gemini TTS with prebuilt voices (default)
    """
    global _speech_provider

    if _speech_provider is not None and not force_new:
        return _speech_provider

    provider_type = settings.speech_provider.lower()
    if provider_type != "gemini":
        logger.warning("Unknown speech provider %r, falling back to gemini", provider_type)

    from providers.speech.gemini import GeminiSpeechProvider

    _speech_provider = GeminiSpeechProvider(model=settings.speech_model)
    logger.info("Using Gemini speech provider: %s", settings.speech_model)

    return _speech_provider


async def check_all_providers() -> dict[str, bool | str]:
    """Run health checks on all configured providers.

    Returns:
        Dictionary mapping provider type to health status.
    """
    results: dict[str, bool | str] = {}

    try:
        llm = get_llm_provider()
        results["llm"] = await llm.health_check()
        results["llm_provider"] = llm.provider_name
    except Exception as e:
        logger.error("LLM provider health check failed: %s", e)
        results["llm"] = False

    try:
        image = get_image_provider()
        results["image"] = await image.health_check()
        results["image_provider"] = image.provider_name
    except Exception as e:
        logger.error("Image provider health check failed: %s", e)
        results["image"] = False

    try:
        speech = get_speech_provider()
        results["speech"] = await speech.health_check()
        results["speech_provider"] = speech.provider_name
    except Exception as e:
        logger.error("Speech provider health check failed: %s", e)
        results["speech"] = False

    return results


def reset_providers():
    """Reset all cached provider instances.

    Useful for testing or when configuration changes.
    """
    global _llm_provider, _image_provider, _speech_provider
    _llm_provider = None
    _image_provider = None
    _speech_provider = None
