"""Re-entrancy guard shared by the generation pipeline and the voice preview."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ActivityState(Enum):
    IDLE = "idle"
    ACTIVE = "active"


class ActivityGuard:
    """Two-state machine: IDLE -> ACTIVE on acquire, ACTIVE -> IDLE on release.

    ``try_acquire`` checks and transitions in one step. Under a single event
    loop nothing can run between the check and the set.
    """

    def __init__(self, name: str):
        self.name = name
        self._state = ActivityState.IDLE

    @property
    def state(self) -> ActivityState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state is ActivityState.ACTIVE

    def try_acquire(self) -> bool:
        if self._state is ActivityState.ACTIVE:
            logger.debug("%s already active, ignoring request", self.name)
            return False
        self._state = ActivityState.ACTIVE
        return True

    def release(self) -> None:
        if self._state is ActivityState.IDLE:
            logger.warning("%s released while idle", self.name)
            return
        self._state = ActivityState.IDLE
