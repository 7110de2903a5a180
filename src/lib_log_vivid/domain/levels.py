"""Severity abstraction bridging decorated labels and stdlib logging levels.

Purpose
-------
Offer a closed set of severities richer than the stdlib levels: ``SUCCESS``
and ``COMPLETED`` ride on the native ``INFO`` level and carry a marker so
downstream filters can still tell them apart.

Contents
--------
* :class:`Severity` enum with conversion helpers.
* :func:`severity_label` lenient normaliser used by the decoration paths.
* :func:`label_for_level` mapping native levels back onto severity labels.

System Role
-----------
Shared vocabulary of the theme table, the colour table, the decorator and the
logger handle.
"""

from __future__ import annotations

import logging
from enum import Enum


TRACE_LEVEL = 5
"""Native level registered for :attr:`Severity.TRACE` (below ``DEBUG``)."""

logging.addLevelName(TRACE_LEVEL, "TRACE")


class Severity(Enum):
    """Enumerated decoration severities."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"
    COMPLETED = "COMPLETED"

    @property
    def label(self) -> str:
        """Return the upper-case label keyed by the theme and colour tables."""

        return self.value

    @property
    def native_level(self) -> int:
        """Return the stdlib :mod:`logging` level this severity is emitted at."""

        return _NATIVE_LEVELS[self]

    @property
    def marker(self) -> str | None:
        """Return the side-channel marker for extension severities, else ``None``."""

        return _MARKERS.get(self)

    @property
    def is_extension(self) -> bool:
        return self in _MARKERS

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        normalized = name.strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc


_NATIVE_LEVELS = {
    Severity.TRACE: TRACE_LEVEL,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.SUCCESS: logging.INFO,
    Severity.COMPLETED: logging.INFO,
}

_MARKERS = {
    Severity.SUCCESS: "SUCCESS",
    Severity.COMPLETED: "COMPLETED",
}

_LABELS_BY_LEVEL = {
    TRACE_LEVEL: Severity.TRACE.label,
    logging.DEBUG: Severity.DEBUG.label,
    logging.INFO: Severity.INFO.label,
    logging.WARNING: Severity.WARN.label,
    logging.ERROR: Severity.ERROR.label,
}


def severity_label(severity: Severity | str) -> str:
    """Return the table key for ``severity`` without rejecting unknown labels.

    Examples
    --------
    >>> severity_label(Severity.WARN)
    'WARN'
    >>> severity_label(' success ')
    'SUCCESS'
    >>> severity_label('fatal')
    'FATAL'
    """

    if isinstance(severity, Severity):
        return severity.label
    return str(severity).strip().upper()


def label_for_level(level: int) -> str:
    """Translate a native level into the severity label used for decoration.

    Levels outside the mapped set keep the engine's level name (for example
    ``CRITICAL``), which no theme defines.

    Examples
    --------
    >>> label_for_level(30)
    'WARN'
    >>> label_for_level(50)
    'CRITICAL'
    """

    label = _LABELS_BY_LEVEL.get(level)
    if label is not None:
        return label
    return str(logging.getLevelName(level))


__all__ = ["Severity", "TRACE_LEVEL", "label_for_level", "severity_label"]
