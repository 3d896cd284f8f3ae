"""Thumbnail generation via the configured image provider."""

import logging

from errors import MalformedResponseFailure, RemoteRequestFailure
from providers.factory import get_image_provider
from providers.image.base import ImageProvider

logger = logging.getLogger(__name__)

THUMBNAIL_PROMPT = "A cinematic, ultra-high-definition YouTube thumbnail: {prompt}"
THUMBNAIL_ASPECT_RATIO = "16:9"


class ThumbnailGenerator:
    def __init__(self, provider: ImageProvider | None = None):
        self._provider = provider

    @property
    def provider(self) -> ImageProvider:
        if self._provider is None:
            self._provider = get_image_provider()
        return self._provider

    async def generate(self, prompt: str) -> str:
        """Render a 16:9 thumbnail and return a renderable reference (data: URI or URL)."""
        result = await self.provider.generate(
            THUMBNAIL_PROMPT.format(prompt=prompt),
            aspect_ratio=THUMBNAIL_ASPECT_RATIO,
        )
        if result.error:
            raise RemoteRequestFailure(result.error)
        if not result.url:
            raise MalformedResponseFailure(f"No image data returned from {result.provider}")

        logger.info(
            "Thumbnail rendered by %s in %.0f ms",
            result.provider,
            result.generation_time_ms or 0.0,
        )
        return result.url
