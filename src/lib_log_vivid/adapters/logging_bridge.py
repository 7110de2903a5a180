"""Bridges between the stdlib :mod:`logging` engine and the fan-out adapter.

Purpose
-------
Plug the decorated fan-out into an ordinary ``logging`` configuration: records
enter through :class:`VividHandler`, and :class:`HandlerSink` republishes the
decorated events to any existing ``logging.Handler``.

Contents
--------
* :class:`VividHandler` - ``logging.Handler`` feeding a :class:`FanOutSink`.
* :class:`HandlerSink` - sink adapter around a downstream handler.
* :class:`MarkerFilter` - filter on the ``SUCCESS``/``COMPLETED`` side tags.

System Role
-----------
Outer adapters; the engine stays a black box that only sees records.
"""

from __future__ import annotations

import itertools
import logging
import threading

from lib_log_vivid.application.ports.sink import LogEventView, SinkPort
from lib_log_vivid.domain.events import LogEvent, MARKER_ATTRIBUTE
from lib_log_vivid.domain.themes import Theme

from .fan_out import FanOutSink


class VividHandler(logging.Handler):
    """Convert records to :class:`LogEvent` and dispatch them through a fan-out.

    Examples
    --------
    >>> import io
    >>> stream = io.StringIO()
    >>> handler = VividHandler(theme='minimal', color_enabled=False)
    >>> handler.add_sink(HandlerSink(logging.StreamHandler(stream)))
    >>> log = logging.getLogger('doctest.vivid')
    >>> log.propagate = False
    >>> log.addHandler(handler)
    >>> log.warning('low disk')
    >>> stream.getvalue()
    ' ! low disk\\n'
    >>> log.removeHandler(handler)
    """

    def __init__(
        self,
        level: int = logging.NOTSET,
        *,
        theme: Theme | str = Theme.CLASSIC,
        color_enabled: bool = True,
        fan_out: FanOutSink | None = None,
    ) -> None:
        super().__init__(level)
        self.fan_out = fan_out if fan_out is not None else FanOutSink(theme=theme, color_enabled=color_enabled)
        self._sequence = itertools.count(1)
        self._sequence_lock = threading.Lock()

    def add_sink(self, sink: SinkPort) -> None:
        self.fan_out.add_sink(sink)

    def detach_sink(self, sink: SinkPort | str) -> bool:
        return self.fan_out.detach_sink(sink)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            with self._sequence_lock:
                sequence_number = next(self._sequence)
            event = LogEvent.from_record(record, sequence_number=sequence_number)
            self.fan_out.emit(event)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        try:
            self.fan_out.detach_all(close=True)
        finally:
            super().close()


class HandlerSink:
    """Republish decorated events to a stdlib ``logging.Handler``.

    The handler receives a fresh record whose message is already rendered, so
    placeholder substitution is not applied twice.
    """

    def __init__(self, handler: logging.Handler, *, name: str | None = None) -> None:
        self._handler = handler
        self._name = name or handler.get_name() or type(handler).__name__

    @property
    def name(self) -> str:
        return self._name

    @property
    def handler(self) -> logging.Handler:
        return self._handler

    def emit(self, event: LogEventView) -> None:
        if event.level < self._handler.level:
            return
        self._handler.handle(self.to_record(event))

    @staticmethod
    def to_record(event: LogEventView) -> logging.LogRecord:
        """Build a ``LogRecord`` carrying ``event`` with its message pre-rendered."""

        caller = event.caller
        record = logging.LogRecord(
            name=event.logger_name,
            level=event.level,
            pathname=caller.pathname if caller else "",
            lineno=caller.lineno if caller else 0,
            msg=event.formatted_message,
            args=None,
            exc_info=event.exc_info,
            func=caller.func_name if caller else None,
        )
        created = event.timestamp.timestamp()
        record.created = created
        record.msecs = (created - int(created)) * 1000
        record.threadName = event.thread_name
        if caller and caller.module:
            record.module = caller.module
        if event.markers:
            setattr(record, MARKER_ATTRIBUTE, event.markers[0] if len(event.markers) == 1 else tuple(event.markers))
        for key, value in event.context.items():
            if key not in record.__dict__:
                setattr(record, key, value)
        record.sequence_number = event.sequence_number
        return record

    def close(self) -> None:
        self._handler.close()


class MarkerFilter(logging.Filter):
    """Pass only records tagged with one of ``markers``.

    Examples
    --------
    >>> only_success = MarkerFilter('success')
    >>> record = logging.makeLogRecord({'msg': 'done', 'marker': 'SUCCESS'})
    >>> only_success.filter(record)
    True
    >>> only_success.filter(logging.makeLogRecord({'msg': 'plain'}))
    False
    """

    def __init__(self, *markers: str) -> None:
        super().__init__()
        self.markers = frozenset(marker.upper() for marker in markers)

    def filter(self, record: logging.LogRecord) -> bool:
        marker = getattr(record, MARKER_ATTRIBUTE, None)
        if not marker:
            return False
        tags = marker if isinstance(marker, (list, tuple)) else (marker,)
        return any(str(tag).upper() in self.markers for tag in tags)


__all__ = ["HandlerSink", "MarkerFilter", "VividHandler"]
