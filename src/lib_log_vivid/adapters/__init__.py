"""Adapters connecting the decoration layer to sinks and the logging engine."""

from __future__ import annotations

from .console import RichConsoleSink
from .decorated_event import DecoratedEvent, decorate_event_message
from .fan_out import FanOutSink, SinkDispatchError
from .logging_bridge import HandlerSink, MarkerFilter, VividHandler

__all__ = [
    "DecoratedEvent",
    "FanOutSink",
    "HandlerSink",
    "MarkerFilter",
    "RichConsoleSink",
    "SinkDispatchError",
    "VividHandler",
    "decorate_event_message",
]
