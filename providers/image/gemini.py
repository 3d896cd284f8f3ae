"""Gemini image generation provider (inline PNG returned as a data: URI)."""

import logging
import time

import httpx

from providers.gemini import GeminiClient
from providers.image.base import ImageProvider, ImageResult

logger = logging.getLogger(__name__)


class GeminiImageProvider(ImageProvider):
    """Gemini image model via generateContent.

    The image comes back inline as base64, so the result URL is a data: URI
    that can be dropped straight into an <img> tag.

    Usage:
        provider = GeminiImageProvider(model="gemini-2.5-flash-image")
        result = await provider.generate("A futuristic city at sunset")
    """

    def __init__(self, model: str, client: GeminiClient | None = None):
        self.model = model
        self.client = client or GeminiClient()

    @property
    def provider_name(self) -> str:
        return "gemini"

    async def generate(
        self,
        prompt: str,
        aspect_ratio: str = "16:9",
    ) -> ImageResult:
        """Generate an image. Returns url=None with no error when the model sent no image."""
        start_ms = time.time() * 1000

        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseModalities": ["IMAGE"],
                "imageConfig": {"aspectRatio": aspect_ratio},
            },
        }

        try:
            data = await self.client.generate_content(self.model, body)
        except httpx.HTTPStatusError as e:
            error_msg = f"Gemini image API error {e.response.status_code}: {e.response.text}"
            return ImageResult(url=None, error=error_msg, provider=self.provider_name)
        except httpx.HTTPError as e:
            return ImageResult(url=None, error=str(e) or type(e).__name__, provider=self.provider_name)

        generation_time_ms = time.time() * 1000 - start_ms

        for part in GeminiClient.first_parts(data):
            inline = part.get("inlineData")
            if isinstance(inline, dict) and inline.get("data"):
                # The dashboard always renders thumbnails as PNG
                return ImageResult(
                    url=f"data:image/png;base64,{inline['data']}",
                    error=None,
                    provider=self.provider_name,
                    mime_type=inline.get("mimeType"),
                    generation_time_ms=generation_time_ms,
                )

        logger.warning("Gemini returned no inline image data for prompt: %.80s", prompt)
        return ImageResult(
            url=None,
            error=None,
            provider=self.provider_name,
            generation_time_ms=generation_time_ms,
        )

    async def health_check(self) -> bool:
        if not self.client.api_key:
            logger.warning("Gemini API key not configured")
            return False
        try:
            return bool(await self.client.list_models())
        except httpx.HTTPError as e:
            logger.warning("Gemini image health check failed: %s", e)
            return False
