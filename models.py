"""Data model: log entries, generated content metadata, decoded audio."""

from dataclasses import dataclass
from enum import Enum

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


class AppTab(str, Enum):
    DASHBOARD = "dashboard"
    CONTENT = "content"
    VOICE = "voice"
    STATS = "stats"


@dataclass(frozen=True)
class LogEntry:
    """One line of the activity log. Immutable once created."""

    time: str  # HH:MM:SS wall clock
    message: str
    severity: Severity

    def to_dict(self) -> dict:
        return {"time": self.time, "message": self.message, "severity": self.severity.value}


class ContentMetadata(BaseModel):
    """Metadata for one generated video. Either fully populated or absent."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str
    hashtags: list[str] = Field(min_length=1)
    thumbnail_prompt: str = Field(alias="thumbnailPrompt")


@dataclass
class AudioBuffer:
    """Decoded mono PCM, float32 samples in [-1.0, 1.0)."""

    samples: np.ndarray
    sample_rate: int
    channels: int = 1

    @property
    def frame_count(self) -> int:
        return len(self.samples)

    @property
    def duration_seconds(self) -> float:
        return self.frame_count / self.sample_rate if self.sample_rate else 0.0
