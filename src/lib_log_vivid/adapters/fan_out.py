"""Fan-out sink adapter republishing decorated events to attached sinks.

Purpose
-------
Wrap every incoming event exactly once and deliver the wrapper to a mutable,
ordered set of downstream sinks.

Contents
--------
* :class:`SinkDispatchError` - aggregate of sink failures in one dispatch.
* :class:`FanOutSink` - the adapter; itself a :class:`SinkPort` so chains nest.

System Role
-----------
Event-stream counterpart of the logger handle. Attach/detach calls may race
with producers: the sink list is an immutable tuple replaced under a short
lock, and each dispatch iterates the tuple it read when it started.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterator

from lib_log_vivid.application.ports.sink import LogEventView, SinkPort
from lib_log_vivid.domain.themes import Theme

from .decorated_event import DecoratedEvent


logger = logging.getLogger(__name__)


class SinkDispatchError(RuntimeError):
    """Raised after a dispatch pass in which one or more sinks failed."""

    def __init__(self, failures: list[tuple[str, Exception]]) -> None:
        self.failures = list(failures)
        names = ", ".join(name for name, _ in self.failures)
        super().__init__(f"{len(self.failures)} sink(s) failed: {names}")


class FanOutSink:
    """Decorate events and forward them to every attached sink in order.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_vivid.domain.events import LogEvent
    >>> class Collect:
    ...     name = 'collect'
    ...     def __init__(self):
    ...         self.events = []
    ...     def emit(self, event):
    ...         self.events.append(event)
    >>> sink = Collect()
    >>> fan_out = FanOutSink(theme='minimal', color_enabled=False, sinks=[sink])
    >>> fan_out.emit(LogEvent('ok', 'ok', 20, 'INFO', 'app', 'main', datetime(2025, 1, 1, tzinfo=timezone.utc)))
    >>> sink.events[0].message
    ' ✓ ok'
    """

    def __init__(
        self,
        *,
        name: str = "vivid",
        theme: Theme | str = Theme.CLASSIC,
        color_enabled: bool = True,
        sinks: tuple[SinkPort, ...] | list[SinkPort] = (),
    ) -> None:
        self._name = name
        self._theme = Theme.resolve(theme)
        self._color_enabled = bool(color_enabled)
        self._sinks: tuple[SinkPort, ...] = ()
        self._lock = threading.Lock()
        for sink in sinks:
            self.add_sink(sink)

    @property
    def name(self) -> str:
        return self._name

    @property
    def theme(self) -> Theme:
        return self._theme

    def set_theme(self, theme: Theme | str) -> None:
        self._theme = Theme.resolve(theme)

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    def set_color_enabled(self, enabled: bool) -> None:
        self._color_enabled = bool(enabled)

    def emit(self, event: LogEventView) -> None:
        """Wrap ``event`` once and deliver it to the sinks attached right now.

        Sinks attached after the pass started wait for the next event; sinks
        detached before their turn are skipped. Every remaining sink is
        attempted and failures are raised together as :class:`SinkDispatchError`.
        """

        sinks = self._sinks
        if not sinks:
            return
        wrapped = DecoratedEvent(event, self._theme, self._color_enabled)
        failures: list[tuple[str, Exception]] = []
        for sink in sinks:
            if self._sinks is not sinks and not self.is_attached(sink):
                continue
            try:
                sink.emit(wrapped)
            except Exception as exc:
                failures.append((_sink_name(sink), exc))
        if failures:
            raise SinkDispatchError(failures)

    # Sink administration.

    def add_sink(self, sink: SinkPort) -> None:
        """Attach ``sink``; attaching the same sink twice is a no-op."""

        with self._lock:
            if any(existing is sink for existing in self._sinks):
                return
            self._sinks = self._sinks + (sink,)
        logger.debug("Attached sink %s to %s", _sink_name(sink), self._name)

    def get_sink(self, name: str) -> SinkPort | None:
        for sink in self._sinks:
            if _sink_name(sink) == name:
                return sink
        return None

    def is_attached(self, sink: SinkPort) -> bool:
        return any(existing is sink for existing in self._sinks)

    def detach_sink(self, sink: SinkPort | str) -> bool:
        """Detach ``sink`` (instance or name); return whether anything was removed."""

        with self._lock:
            if isinstance(sink, str):
                remaining = tuple(existing for existing in self._sinks if _sink_name(existing) != sink)
            else:
                remaining = tuple(existing for existing in self._sinks if existing is not sink)
            removed = len(remaining) != len(self._sinks)
            self._sinks = remaining
        return removed

    def detach_all(self, *, close: bool = True) -> None:
        """Detach every sink, closing those that expose ``close()`` when asked."""

        with self._lock:
            detached = self._sinks
            self._sinks = ()
        if not close:
            return
        for sink in detached:
            closer = getattr(sink, "close", None)
            if callable(closer):
                closer()

    def sinks(self) -> tuple[SinkPort, ...]:
        """Return the currently attached sinks in attachment order."""

        return self._sinks

    def __iter__(self) -> Iterator[SinkPort]:
        return iter(self._sinks)

    def __len__(self) -> int:
        return len(self._sinks)

    def __repr__(self) -> str:
        return f"FanOutSink(name={self._name!r}, theme={self._theme.value!r}, sinks={len(self._sinks)})"


def _sink_name(sink: object) -> str:
    return str(getattr(sink, "name", None) or type(sink).__name__)


__all__ = ["FanOutSink", "SinkDispatchError"]
