"""Sink port describing the event contract shared by all downstream consumers.

Purpose
-------
Define the read-only event view and the sink protocol so the fan-out adapter,
the decorated event wrapper and concrete sinks agree on one narrow surface.

Contents
--------
* :class:`LogEventView` - runtime-checkable protocol of event accessors.
* :class:`SinkPort` - runtime-checkable protocol with ``name`` and ``emit``.

System Role
-----------
Both :class:`lib_log_vivid.domain.events.LogEvent` and
:class:`lib_log_vivid.adapters.decorated_event.DecoratedEvent` satisfy
:class:`LogEventView`, which lets wrapped events travel through chained sinks.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Protocol, runtime_checkable

from lib_log_vivid.domain.events import CallerInfo


@runtime_checkable
class LogEventView(Protocol):
    """Read-only accessors of a log event."""

    @property
    def message(self) -> str: ...

    @property
    def formatted_message(self) -> str: ...

    @property
    def level(self) -> int: ...

    @property
    def level_name(self) -> str: ...

    @property
    def logger_name(self) -> str: ...

    @property
    def thread_name(self) -> str | None: ...

    @property
    def timestamp(self) -> datetime: ...

    @property
    def caller(self) -> CallerInfo | None: ...

    @property
    def markers(self) -> tuple[str, ...]: ...

    @property
    def context(self) -> Mapping[str, Any]: ...

    @property
    def sequence_number(self) -> int: ...

    @property
    def arguments(self) -> tuple[Any, ...]: ...

    @property
    def exc_info(self) -> Any: ...


@runtime_checkable
class SinkPort(Protocol):
    """Consume log events."""

    @property
    def name(self) -> str: ...

    def emit(self, event: LogEventView) -> None:
        """Handle ``event``."""


__all__ = ["LogEventView", "SinkPort"]
