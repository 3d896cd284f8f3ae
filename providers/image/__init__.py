"""Image providers: Gemini."""

from providers.image.base import ImageProvider, ImageResult

__all__ = ["ImageProvider", "ImageResult"]
