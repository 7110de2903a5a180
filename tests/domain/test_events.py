from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from lib_log_vivid.domain.events import LogEvent


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tests.records",
        level=logging.WARNING,
        pathname="/srv/app/worker.py",
        lineno=12,
        msg="queue %s at %d%%",
        args=("jobs", 90),
        exc_info=None,
        func="poll",
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_from_record_copies_every_field() -> None:
    record = _record(marker="SUCCESS", tenant="acme")

    event = LogEvent.from_record(record, sequence_number=9)

    assert event.message == "queue %s at %d%%"
    assert event.formatted_message == "queue jobs at 90%"
    assert event.level == logging.WARNING
    assert event.level_name == "WARNING"
    assert event.logger_name == "tests.records"
    assert event.thread_name == record.threadName
    assert event.timestamp == datetime.fromtimestamp(record.created, tz=timezone.utc)
    assert event.caller is not None
    assert (event.caller.pathname, event.caller.lineno, event.caller.func_name) == ("/srv/app/worker.py", 12, "poll")
    assert event.markers == ("SUCCESS",)
    assert dict(event.context) == {"tenant": "acme"}
    assert event.sequence_number == 9
    assert event.arguments == ("jobs", 90)


def test_from_record_does_not_mutate_the_record() -> None:
    record = _record()
    before = dict(record.__dict__)

    LogEvent.from_record(record)

    assert record.__dict__ == before


def test_event_requires_aware_timestamp(make_event) -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        make_event(timestamp=datetime(2025, 1, 1))


def test_event_context_is_read_only(make_event) -> None:
    event = make_event()
    with pytest.raises(TypeError):
        event.context["new"] = "value"  # type: ignore[index]


def test_replace_returns_new_event(make_event) -> None:
    event = make_event()
    changed = event.replace(sequence_number=43)

    assert changed.sequence_number == 43
    assert event.sequence_number == 42
