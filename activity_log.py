"""In-memory activity ring buffer.

Holds the most recent entries shown in the dashboard's activity panel,
most-recent-first. The oldest entry is dropped once capacity is reached.
Appends never suspend, so interleaved coroutines see them in call order.
"""

import logging
from collections import deque
from datetime import datetime

from models import LogEntry, Severity

logger = logging.getLogger("activity")

_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
}


class ActivityLog:
    def __init__(self, capacity: int = 10, seed: list[tuple[str, Severity]] | None = None):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: deque[LogEntry] = deque(maxlen=capacity)
        # seed is given most-recent-first, same as entries()
        for message, severity in reversed(seed or []):
            self.append(message, severity)

    def append(self, message: str, severity: Severity = Severity.INFO) -> LogEntry:
        entry = LogEntry(
            time=datetime.now().strftime("%H:%M:%S"),
            message=message,
            severity=Severity(severity),
        )
        self._entries.appendleft(entry)
        logger.log(_LEVELS.get(entry.severity, logging.INFO), "[%s] %s", entry.severity.value, message)
        return entry

    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    def to_list(self) -> list[dict]:
        return [entry.to_dict() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
