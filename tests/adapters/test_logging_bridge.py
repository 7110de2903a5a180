from __future__ import annotations

import io
import logging
from typing import Iterator

import pytest

from lib_log_vivid.adapters.decorated_event import DecoratedEvent
from lib_log_vivid.adapters.fan_out import FanOutSink
from lib_log_vivid.adapters.logging_bridge import HandlerSink, MarkerFilter, VividHandler
from lib_log_vivid.domain.palettes import RESET
from lib_log_vivid.domain.themes import Theme


class _ListSink:
    name = "list"

    def __init__(self) -> None:
        self.events: list[DecoratedEvent] = []

    def emit(self, event: DecoratedEvent) -> None:
        self.events.append(event)


class _ExplodingSink:
    name = "exploding"

    def emit(self, event: object) -> None:
        raise ValueError("nope")


@pytest.fixture
def bridge_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("tests.bridge")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_records_are_decorated_and_fanned_out(bridge_logger: logging.Logger) -> None:
    first, second = _ListSink(), _ListSink()
    handler = VividHandler(theme="tech", color_enabled=False)
    handler.add_sink(first)
    handler.fan_out.add_sink(second)
    bridge_logger.addHandler(handler)

    bridge_logger.info("deployed %s", "v2", extra={"tenant": "acme"})

    assert len(first.events) == 1
    event = first.events[0]
    assert second.events[0] is event
    assert event.message == " 💡 deployed v2"
    assert event.original.message == "deployed %s"
    assert event.arguments == ("v2",)
    assert event.logger_name == "tests.bridge"
    assert event.context["tenant"] == "acme"
    assert event.caller is not None and event.caller.func_name == "test_records_are_decorated_and_fanned_out"


def test_sequence_numbers_increase(bridge_logger: logging.Logger) -> None:
    sink = _ListSink()
    handler = VividHandler(color_enabled=False)
    handler.add_sink(sink)
    bridge_logger.addHandler(handler)

    for index in range(3):
        bridge_logger.debug("tick %d", index)

    assert [event.sequence_number for event in sink.events] == [1, 2, 3]


def test_handler_sink_republishes_rendered_message(bridge_logger: logging.Logger) -> None:
    stream = io.StringIO()
    downstream = logging.StreamHandler(stream)
    downstream.setFormatter(logging.Formatter("%(levelname)s|%(threadName)s|%(tenant)s|%(message)s"))
    handler = VividHandler(theme="classic", color_enabled=True)
    handler.add_sink(HandlerSink(downstream))
    bridge_logger.addHandler(handler)

    bridge_logger.error("rate is 100%% of %s", "quota", extra={"tenant": "acme"})

    line = stream.getvalue().strip()
    level, thread, tenant, message = line.split("|", 3)
    assert (level, tenant) == ("ERROR", "acme")
    assert thread
    assert message == "\x1b[31m ❌ rate is 100% of quota" + RESET


def test_handler_sink_preserves_markers_and_time(make_event) -> None:
    event = DecoratedEvent(make_event(markers=("SUCCESS",)), Theme.CLASSIC, apply_colors=False)

    record = HandlerSink.to_record(event)

    assert record.getMessage() == " ✅ job 7 finished"
    assert record.args is None
    assert record.marker == "SUCCESS"
    assert record.threadName == "worker-1"
    assert record.created == event.timestamp.timestamp()
    assert (record.pathname, record.lineno, record.funcName) == ("/srv/app/jobs.py", 42, "run")
    assert record.request_id == "req-1"
    assert record.sequence_number == 42


def test_handler_sink_honours_downstream_level(make_event) -> None:
    stream = io.StringIO()
    downstream = logging.StreamHandler(stream)
    downstream.setLevel(logging.ERROR)
    sink = HandlerSink(downstream)

    sink.emit(DecoratedEvent(make_event(), Theme.CLASSIC, apply_colors=False))
    assert stream.getvalue() == ""

    sink.emit(DecoratedEvent(make_event(level=logging.ERROR, level_name="ERROR"), Theme.CLASSIC, apply_colors=False))
    assert stream.getvalue() == " ❌ job 7 finished\n"


def test_handler_sink_names_follow_handler() -> None:
    named = logging.StreamHandler(io.StringIO())
    named.set_name("stderr")

    assert HandlerSink(named).name == "stderr"
    assert HandlerSink(logging.NullHandler()).name == "NullHandler"
    assert HandlerSink(logging.NullHandler(), name="explicit").name == "explicit"


def test_sink_errors_go_through_handle_error(bridge_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
    handled: list[logging.LogRecord] = []
    after = _ListSink()
    handler = VividHandler(fan_out=FanOutSink(color_enabled=False, sinks=[_ExplodingSink(), after]))
    monkeypatch.setattr(handler, "handleError", handled.append)
    bridge_logger.addHandler(handler)

    bridge_logger.warning("still delivered")

    assert len(after.events) == 1
    assert len(handled) == 1
    assert handled[0].getMessage() == "still delivered"


def test_close_detaches_and_closes_sinks() -> None:
    downstream = logging.StreamHandler(io.StringIO())
    sink = HandlerSink(downstream)
    handler = VividHandler(color_enabled=False)
    handler.add_sink(sink)

    handler.close()

    assert len(handler.fan_out) == 0


def test_marker_filter_distinguishes_extension_severities() -> None:
    success_only = MarkerFilter("SUCCESS")
    either = MarkerFilter("success", "completed")

    success = logging.makeLogRecord({"msg": "a", "marker": "SUCCESS"})
    completed = logging.makeLogRecord({"msg": "b", "marker": "COMPLETED"})
    plain = logging.makeLogRecord({"msg": "c"})

    assert success_only.filter(success) is True
    assert success_only.filter(completed) is False
    assert success_only.filter(plain) is False
    assert either.filter(completed) is True
    assert either.filter(logging.makeLogRecord({"msg": "d", "marker": ("X", "COMPLETED")})) is True
