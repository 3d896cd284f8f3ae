"""Dashboard state: composes the log, pipeline, voice preview and auto-pilot."""

import asyncio
import logging
from typing import Callable

from activity_log import ActivityLog
from analytics import get_stats
from audio import AudioOutput
from autopilot import AutopilotScheduler
from config import settings
from generators.metadata import MetadataGenerator
from generators.speech import SpeechGenerator
from generators.thumbnail import ThumbnailGenerator
from models import AppTab, Severity
from pipeline import GenerationPipeline
from voice import VoicePreview

logger = logging.getLogger(__name__)

SEED_ENTRIES = [
    ("Core: Ultra-Fast mode initialized.", Severity.SUCCESS),
    ("Security: Zero-Error Shield Active.", Severity.INFO),
]


def _pending(task: asyncio.Task | None) -> bool:
    return task is not None and not task.done()


class DashboardState:
    """Root of the dashboard: current topic, generated content, flags and log."""

    def __init__(
        self,
        metadata_generator: MetadataGenerator | None = None,
        thumbnail_generator: ThumbnailGenerator | None = None,
        speech_generator: SpeechGenerator | None = None,
        output_factory: Callable[[], AudioOutput] = AudioOutput,
        topic: str | None = None,
        log_capacity: int | None = None,
        autopilot_interval: float | None = None,
    ):
        self.topic = topic or settings.default_topic
        self.active_tab = AppTab.DASHBOARD
        self.log = ActivityLog(capacity=log_capacity or settings.log_capacity, seed=SEED_ENTRIES)
        self.pipeline = GenerationPipeline(
            self.log,
            metadata_generator=metadata_generator,
            thumbnail_generator=thumbnail_generator,
        )
        self.voice = VoicePreview(
            self.log,
            metadata_source=lambda: self.pipeline.metadata,
            speech_generator=speech_generator,
            output_factory=output_factory,
        )
        self.autopilot = AutopilotScheduler(
            self.log,
            interval=autopilot_interval or settings.autopilot_interval,
        )
        self._tasks: set[asyncio.Task] = set()
        self._generation_task: asyncio.Task | None = None
        self._voice_task: asyncio.Task | None = None

    def set_topic(self, topic: str) -> None:
        self.topic = topic.strip() or settings.default_topic

    def set_tab(self, tab: AppTab) -> None:
        self.active_tab = AppTab(tab)

    def set_autopilot(self, enabled: bool) -> None:
        self.autopilot.set_enabled(enabled)

    def start_generation(self, topic: str | None = None) -> bool:
        """Start a pipeline run in the background. False if one is already running."""
        if self.pipeline.generating or _pending(self._generation_task):
            return False
        if topic:
            self.set_topic(topic)
        self._generation_task = self._spawn(self.pipeline.run(self.topic), "generation")
        return True

    def start_voice_preview(self) -> str:
        """Start a voice preview in the background. Returns started, busy or no_content."""
        if self.pipeline.metadata is None:
            return "no_content"
        if self.voice.playing or _pending(self._voice_task):
            return "busy"
        self._voice_task = self._spawn(self.voice.preview(), "voice-preview")
        return "started"

    def _spawn(self, coro, name: str) -> asyncio.Task:
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait for all background runs started so far."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def tasks(self) -> list[dict]:
        metadata = self.pipeline.metadata
        if self.pipeline.generating:
            thumbnail_status = "active"
        elif metadata is not None:
            thumbnail_status = "complete"
        else:
            thumbnail_status = "pending"
        return [
            {"label": "Niche Trend Scan", "status": "complete"},
            {"label": "Gemini Core Sync", "status": "complete"},
            {"label": "Thumbnail Synthesis", "status": thumbnail_status},
            {"label": "SEO Meta Finalization", "status": "complete" if metadata else "pending"},
        ]

    def get_view(self) -> dict:
        """Everything the dashboard renders."""
        metadata = self.pipeline.metadata
        return {
            "topic": self.topic,
            "active_tab": self.active_tab.value,
            "generating": self.pipeline.generating or _pending(self._generation_task),
            "voice_playing": self.voice.playing,
            "autopilot": self.autopilot.enabled,
            "metadata": metadata.model_dump(by_alias=True) if metadata else None,
            "thumbnail_url": self.pipeline.thumbnail_url,
            "logs": self.log.to_list(),
            "tasks": self.tasks(),
            "stats": get_stats(),
        }

    async def close(self) -> None:
        """Tear down: stop auto-pilot, cancel background runs, release audio."""
        await self.autopilot.stop()
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*list(self._tasks), return_exceptions=True)
        self._tasks.clear()
        self.voice.close()
        logger.info("Dashboard state closed")
