"""Abstract base class for image generation providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ImageResult:
    """Standardized result from any image provider."""

    url: str | None  # Renderable reference: remote URL or data: URI
    error: str | None
    provider: str
    mime_type: str | None = None
    generation_time_ms: float | None = None


class ImageProvider(ABC):
    """Abstract base class for image generation providers.

    Implementations: GeminiImageProvider
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name for logging/tracking."""
        ...

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        aspect_ratio: str = "16:9",
    ) -> ImageResult:
        """Generate an image from a text prompt.

        Args:
            prompt: Text description of the desired image.
            aspect_ratio: Output aspect ratio (e.g., "16:9", "1:1").

        Returns:
            ImageResult with a renderable reference or an error.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the provider is available and responding.

        Returns:
            True if the provider is healthy, False otherwise.
        """
        ...
