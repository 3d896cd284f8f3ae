"""Generation pipeline: topic -> metadata -> thumbnail."""

import logging

from activity_log import ActivityLog
from generators.metadata import MetadataGenerator
from generators.thumbnail import ThumbnailGenerator
from guard import ActivityGuard
from models import ContentMetadata, Severity

logger = logging.getLogger(__name__)


class GenerationPipeline:
    """Runs the two remote steps for a topic, one run at a time.

    Holds the latest metadata and thumbnail. A new metadata result replaces the
    old pair at once (the old thumbnail is dropped), so a thumbnail is never
    shown next to metadata it was not rendered for. A thumbnail failure keeps
    the new metadata with no thumbnail.
    """

    def __init__(
        self,
        log: ActivityLog,
        metadata_generator: MetadataGenerator | None = None,
        thumbnail_generator: ThumbnailGenerator | None = None,
    ):
        self.log = log
        self.metadata_generator = metadata_generator or MetadataGenerator()
        self.thumbnail_generator = thumbnail_generator or ThumbnailGenerator()
        self.guard = ActivityGuard("generation")
        self.metadata: ContentMetadata | None = None
        self.thumbnail_url: str | None = None
        self.runs_completed = 0

    @property
    def generating(self) -> bool:
        return self.guard.active

    async def run(self, topic: str) -> bool:
        """Run the pipeline for ``topic``. Returns False if a run was already active."""
        if not self.guard.try_acquire():
            return False

        try:
            self.log.append(f"Initiating generation for: {topic}", Severity.INFO)

            # 1. Metadata
            self.log.append("Synthesizing metadata structure...", Severity.INFO)
            metadata = await self.metadata_generator.generate(topic)
            self.metadata = metadata
            self.thumbnail_url = None
            self.log.append("Metadata synthesized successfully.", Severity.SUCCESS)
            logger.info("Metadata for %r: %s", topic, metadata.title)

            # 2. Thumbnail
            self.log.append("Rendering neural thumbnail...", Severity.INFO)
            self.thumbnail_url = await self.thumbnail_generator.generate(metadata.thumbnail_prompt)
            self.log.append("Neural canvas render complete.", Severity.SUCCESS)
            self.runs_completed += 1

        except Exception as e:
            detail = str(e) or type(e).__name__
            logger.error("Generation for %r failed: %s", topic, detail)
            self.log.append(f"Generation error: {detail}", Severity.ERROR)
        finally:
            self.guard.release()

        return True
