"""Domain event mirroring the read-only contract of an engine log event.

Purpose
-------
Provide an immutable representation of the raw events the fan-out adapter
receives, decoupled from :class:`logging.LogRecord` so sinks and wrappers
depend on a narrow field set.

Contents
--------
* :class:`CallerInfo` - source location of the logging call.
* :class:`LogEvent` dataclass with :meth:`LogEvent.from_record`.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Sits in the domain layer; the logging bridge builds events from records and
the decorated event wrapper forwards to them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping


MARKER_ATTRIBUTE = "marker"
"""Record attribute carrying the side-channel marker of extension severities."""

_RESERVED_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {
    "message",
    "asctime",
    "sequence_number",
    MARKER_ATTRIBUTE,
}


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class CallerInfo:
    """Source location captured by the engine for a logging call."""

    pathname: str
    lineno: int
    func_name: str | None = None
    module: str | None = None


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable raw log event handed to the fan-out adapter.

    Attributes
    ----------
    message:
        Message template as passed by the caller (placeholders unresolved).
    formatted_message:
        Message with ``arguments`` substituted by the engine.
    level, level_name:
        Native :mod:`logging` level and its registered name.
    logger_name, thread_name:
        Emitting logger and thread.
    timestamp:
        Time of the event in timezone-aware UTC.
    caller:
        Optional :class:`CallerInfo` for the logging call site.
    markers:
        Side-channel tags (``SUCCESS``/``COMPLETED`` for extension severities).
    context:
        Read-only copy of caller-supplied key/value pairs.
    sequence_number:
        Monotonic number assigned by the producer.
    arguments:
        Positional arguments for placeholder substitution.
    exc_info:
        Exception information passed through unmodified.
    """

    message: str
    formatted_message: str
    level: int
    level_name: str
    logger_name: str
    thread_name: str | None
    timestamp: datetime
    caller: CallerInfo | None = None
    markers: tuple[str, ...] = ()
    context: Mapping[str, Any] = field(default_factory=dict)
    sequence_number: int = 0
    arguments: tuple[Any, ...] = ()
    exc_info: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        object.__setattr__(self, "markers", tuple(self.markers))
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))
        object.__setattr__(self, "arguments", tuple(self.arguments))

    @classmethod
    def from_record(cls, record: logging.LogRecord, *, sequence_number: int = 0) -> "LogEvent":
        """Build an event from a stdlib ``record`` without mutating it."""

        args = record.args
        if isinstance(args, Mapping):
            arguments: tuple[Any, ...] = (args,)
        else:
            arguments = tuple(args or ())
        marker = getattr(record, MARKER_ATTRIBUTE, None)
        markers = tuple(marker) if isinstance(marker, (list, tuple)) else ((marker,) if marker else ())
        context = {key: value for key, value in record.__dict__.items() if key not in _RESERVED_RECORD_ATTRIBUTES}
        return cls(
            message=str(record.msg),
            formatted_message=record.getMessage(),
            level=record.levelno,
            level_name=record.levelname,
            logger_name=record.name,
            thread_name=record.threadName,
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
            caller=CallerInfo(record.pathname, record.lineno, record.funcName, record.module),
            markers=markers,
            context=context,
            sequence_number=sequence_number,
            arguments=arguments,
            exc_info=record.exc_info,
        )

    def replace(self, **changes: Any) -> "LogEvent":
        """Return a copied event with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["CallerInfo", "LogEvent", "MARKER_ATTRIBUTE"]
