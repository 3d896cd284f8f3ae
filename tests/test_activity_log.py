import logging
import re

import pytest

from activity_log import ActivityLog
from models import Severity


@pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 25])
def test_keeps_last_ten_most_recent_first(count):
    log = ActivityLog(capacity=10)
    for i in range(count):
        log.append(f"event {i}")

    assert len(log) == min(count, 10)
    expected = [f"event {i}" for i in reversed(range(count))][:10]
    assert [entry.message for entry in log.entries()] == expected


def test_seed_entries_keep_given_order():
    log = ActivityLog(
        capacity=10,
        seed=[("Core: Ultra-Fast mode initialized.", Severity.SUCCESS), ("Security: Zero-Error Shield Active.", Severity.INFO)],
    )
    entries = log.entries()
    assert [e.message for e in entries] == ["Core: Ultra-Fast mode initialized.", "Security: Zero-Error Shield Active."]
    assert [e.severity for e in entries] == [Severity.SUCCESS, Severity.INFO]


def test_seed_entries_are_evicted_like_any_other():
    log = ActivityLog(capacity=3, seed=[("seed a", Severity.INFO), ("seed b", Severity.INFO)])
    log.append("one")
    log.append("two")
    assert [e.message for e in log.entries()] == ["two", "one", "seed a"]


def test_entry_has_clock_time_and_severity():
    log = ActivityLog()
    entry = log.append("Metadata synthesized successfully.", Severity.SUCCESS)

    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", entry.time)
    assert entry.to_dict() == {
        "time": entry.time,
        "message": "Metadata synthesized successfully.",
        "severity": "success",
    }


def test_default_severity_is_info():
    log = ActivityLog()
    assert log.append("hello").severity is Severity.INFO


def test_entries_are_immutable():
    entry = ActivityLog().append("frozen")
    with pytest.raises(AttributeError):
        entry.message = "changed"


def test_rejects_zero_capacity():
    with pytest.raises(ValueError):
        ActivityLog(capacity=0)


def test_errors_are_mirrored_to_operator_log(caplog):
    log = ActivityLog()
    with caplog.at_level(logging.INFO, logger="activity"):
        log.append("Generation error: boom", Severity.ERROR)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert "Generation error: boom" in record.getMessage()
