from __future__ import annotations

from io import StringIO

from rich.console import Console

from lib_log_vivid.adapters.console.rich_console import RichConsoleSink
from lib_log_vivid.adapters.decorated_event import DecoratedEvent
from lib_log_vivid.adapters.fan_out import FanOutSink
from lib_log_vivid.domain.themes import Theme


def test_rich_console_sink_renders_expected_line(record_console, make_event) -> None:
    sink = RichConsoleSink(console=record_console)
    sink.emit(DecoratedEvent(make_event(), Theme.CLASSIC, apply_colors=False))

    output = record_console.export_text()
    assert "2025-09-23T12:00:00+00:00" in output
    assert "INFO tests.events -  ✅ job 7 finished" in output


def test_rich_console_sink_strips_colour_when_console_has_none(record_console, make_event) -> None:
    sink = RichConsoleSink(console=record_console, show_timestamp=False)
    sink.emit(DecoratedEvent(make_event(), Theme.CLASSIC, apply_colors=True))

    output = record_console.export_text()
    assert "\x1b[" not in output
    assert output.strip() == "INFO tests.events -  ✅ job 7 finished"


def test_rich_console_sink_keeps_colour_on_colour_console(make_event) -> None:
    stream = StringIO()
    console = Console(file=stream, force_terminal=True, color_system="standard", width=160)
    sink = RichConsoleSink(console=console, show_timestamp=False)

    sink.emit(DecoratedEvent(make_event(), Theme.CLASSIC, apply_colors=True))

    assert "\x1b[32m" in stream.getvalue()


def test_rich_console_sink_plugs_into_fan_out(record_console, make_event) -> None:
    fan_out = FanOutSink(theme="gaming", color_enabled=False, sinks=[RichConsoleSink(console=record_console)])

    fan_out.emit(make_event(level=30, level_name="WARNING", formatted_message="low hp"))

    assert " ⚔️ low hp" in record_console.export_text()
    assert fan_out.get_sink("console") is not None
