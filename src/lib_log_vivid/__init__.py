"""Public package surface: themed, coloured decoration for stdlib logging.

``get_logger`` returns handles that decorate messages before handing them to
:mod:`logging`; ``VividHandler`` does the same for records already flowing
through a logging configuration and fans them out to attached sinks.
"""

from __future__ import annotations

from .adapters import FanOutSink, HandlerSink, MarkerFilter, RichConsoleSink, SinkDispatchError, VividHandler
from .application import MessageDecorator
from .config import GlobalConfig, InstanceConfig, load
from .domain import LogEvent, Severity, Theme, color_for, glyph_for, resolve_theme, wrap
from .runtime import (
    CallerResolutionError,
    VividLogger,
    console_logger,
    file_logger,
    get_caller_logger,
    get_logger,
)

__all__ = [
    "CallerResolutionError",
    "FanOutSink",
    "GlobalConfig",
    "HandlerSink",
    "InstanceConfig",
    "LogEvent",
    "MarkerFilter",
    "MessageDecorator",
    "RichConsoleSink",
    "Severity",
    "SinkDispatchError",
    "Theme",
    "VividHandler",
    "VividLogger",
    "color_for",
    "console_logger",
    "file_logger",
    "get_caller_logger",
    "get_logger",
    "glyph_for",
    "load",
    "resolve_theme",
    "wrap",
]
