"""Voice preview: speak the current title through the audio output context."""

import logging
from typing import Callable

from activity_log import ActivityLog
from audio import AudioOutput, decode_pcm
from generators.speech import SpeechGenerator
from guard import ActivityGuard
from models import ContentMetadata, Severity

logger = logging.getLogger(__name__)


class VoicePreview:
    """Fetches speech for the current title, decodes it and plays it.

    The guard is released by exactly one of two paths: the failure branch in
    ``preview`` when anything before playback start fails, or the playback-end
    callback once audio has actually started.
    """

    def __init__(
        self,
        log: ActivityLog,
        metadata_source: Callable[[], ContentMetadata | None],
        speech_generator: SpeechGenerator | None = None,
        output_factory: Callable[[], AudioOutput] = AudioOutput,
    ):
        self.log = log
        self.metadata_source = metadata_source
        self.speech_generator = speech_generator or SpeechGenerator()
        self.output_factory = output_factory
        self.guard = ActivityGuard("voice")
        self._output: AudioOutput | None = None

    @property
    def playing(self) -> bool:
        return self.guard.active

    @property
    def output(self) -> AudioOutput:
        """The process-wide output context, created on first use."""
        if self._output is None:
            self._output = self.output_factory()
        return self._output

    async def preview(self) -> bool:
        """Start a preview. Returns False when there is no metadata or one is already playing."""
        metadata = self.metadata_source()
        if metadata is None:
            return False
        if not self.guard.try_acquire():
            return False

        self.log.append("Synthesizing neural voice output...", Severity.INFO)
        try:
            output = self.output
            payload = await self.speech_generator.generate(metadata.title)
            buffer = decode_pcm(payload)
            output.play(buffer, self._on_ended)
        except Exception as e:
            detail = str(e) or type(e).__name__
            logger.error("Voice preview failed: %s", detail)
            self.log.append(f"Voice synthesis failed: {detail}", Severity.ERROR)
            self.guard.release()
            return True

        logger.info("Playing %.1fs of speech for %r", buffer.duration_seconds, metadata.title)
        self.log.append("Voice stream active.", Severity.SUCCESS)
        return True

    def _on_ended(self) -> None:
        logger.debug("Voice playback ended")
        self.guard.release()

    def close(self) -> None:
        if self._output is not None:
            self._output.close()
