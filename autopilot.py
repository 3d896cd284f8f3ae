"""Auto-pilot: periodic synthetic status entries in the activity log."""

import asyncio
import logging
import random

from activity_log import ActivityLog
from models import Severity

logger = logging.getLogger(__name__)

AUTOPILOT_MESSAGES = [
    "Metadata Syncing...",
    "Thumbnails rendering...",
    "Voice synthesis active...",
    "SEO Analysis complete.",
]


class AutopilotScheduler:
    """Idle/Running state machine around one cancellable periodic task.

    Enabling starts a task that appends one entry per interval; disabling
    cancels it. At most one task exists, so a quick off/on never leaves two
    timers running.
    """

    def __init__(
        self,
        log: ActivityLog,
        interval: float = 7.0,
        rng: random.Random | None = None,
    ):
        self.log = log
        self.interval = interval
        self._rng = rng or random.Random()
        self._task: asyncio.Task | None = None
        self.ticks = 0

    @property
    def enabled(self) -> bool:
        return self._task is not None

    def set_enabled(self, enabled: bool) -> None:
        if enabled and self._task is None:
            self.log.append("Auto-Pilot: Scanning niche trends...", Severity.SUCCESS)
            self._task = asyncio.create_task(self._loop(), name="autopilot")
            logger.info("Auto-pilot enabled (every %.1fs)", self.interval)
        elif not enabled and self._task is not None:
            self._task.cancel()
            self._task = None
            logger.info("Auto-pilot disabled after %d ticks", self.ticks)

    async def _loop(self):
        while True:
            await asyncio.sleep(self.interval)
            message = self._rng.choice(AUTOPILOT_MESSAGES)
            self.ticks += 1
            self.log.append(f"Auto: {message}", Severity.INFO)

    async def stop(self):
        """Disable and wait for the task to finish cancelling."""
        task = self._task
        self.set_enabled(False)
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)
