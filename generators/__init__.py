"""Remote generation operations: metadata, thumbnail, speech."""

from generators.metadata import MetadataGenerator
from generators.speech import SpeechGenerator
from generators.thumbnail import ThumbnailGenerator

__all__ = ["MetadataGenerator", "SpeechGenerator", "ThumbnailGenerator"]
