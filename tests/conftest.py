import pytest

from activity_log import ActivityLog
from tests.fakes import (
    FakeMetadataGenerator,
    FakeSpeechGenerator,
    FakeThumbnailGenerator,
    OutputFactory,
)


@pytest.fixture
def log():
    return ActivityLog(capacity=10)


@pytest.fixture
def metadata_generator():
    return FakeMetadataGenerator()


@pytest.fixture
def thumbnail_generator():
    return FakeThumbnailGenerator()


@pytest.fixture
def speech_generator():
    return FakeSpeechGenerator()


@pytest.fixture
def output_factory():
    return OutputFactory()
