"""Event wrapper that swaps in a decorated message and forwards everything else.

Purpose
-------
Let the fan-out adapter hand sinks an event whose rendered message carries the
theme glyph (and colour) while every other field still reads from the original
event.

Contents
--------
* :func:`decorate_event_message` - glyph + colour transform for events.
* :class:`DecoratedEvent` - composition-based proxy over a
  :class:`~lib_log_vivid.application.ports.sink.LogEventView`.

System Role
-----------
Deliberately narrower than :class:`~lib_log_vivid.application.decorator.MessageDecorator`:
no prefix or suffix, and colour follows the adapter flag alone.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from lib_log_vivid.application.ports.sink import LogEventView
from lib_log_vivid.domain.events import CallerInfo
from lib_log_vivid.domain.levels import label_for_level
from lib_log_vivid.domain.palettes import color_for, wrap
from lib_log_vivid.domain.themes import Theme, glyph_for


def decorate_event_message(event: LogEventView, theme: Theme, apply_colors: bool) -> str:
    """Return ``glyph + formatted_message`` for ``event``, colour-wrapped on request."""

    label = label_for_level(event.level)
    decorated = glyph_for(theme, label) + event.formatted_message
    if apply_colors:
        decorated = wrap(decorated, color_for(label))
    return decorated


class DecoratedEvent:
    """Read-only proxy overriding the message accessors of ``original``.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_vivid.domain.events import LogEvent
    >>> raw = LogEvent('hi', 'hi', 20, 'INFO', 'app', 'main', datetime(2025, 1, 1, tzinfo=timezone.utc))
    >>> wrapped = DecoratedEvent(raw, Theme.MINIMAL, apply_colors=False)
    >>> wrapped.formatted_message, wrapped.thread_name
    (' ✓ hi', 'main')
    """

    __slots__ = ("_original", "_message")

    def __init__(self, original: LogEventView, theme: Theme, apply_colors: bool) -> None:
        object.__setattr__(self, "_original", original)
        object.__setattr__(self, "_message", decorate_event_message(original, theme, apply_colors))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def original(self) -> LogEventView:
        return self._original

    @property
    def message(self) -> str:
        return self._message

    @property
    def formatted_message(self) -> str:
        return self._message

    # Forwarded accessors.

    @property
    def level(self) -> int:
        return self._original.level

    @property
    def level_name(self) -> str:
        return self._original.level_name

    @property
    def logger_name(self) -> str:
        return self._original.logger_name

    @property
    def thread_name(self) -> str | None:
        return self._original.thread_name

    @property
    def timestamp(self) -> datetime:
        return self._original.timestamp

    @property
    def caller(self) -> CallerInfo | None:
        return self._original.caller

    @property
    def markers(self) -> tuple[str, ...]:
        return self._original.markers

    @property
    def context(self) -> Mapping[str, Any]:
        return self._original.context

    @property
    def sequence_number(self) -> int:
        return self._original.sequence_number

    @property
    def arguments(self) -> tuple[Any, ...]:
        return self._original.arguments

    @property
    def exc_info(self) -> Any:
        return self._original.exc_info

    def __repr__(self) -> str:
        return f"DecoratedEvent(message={self._message!r}, original={self._original!r})"


__all__ = ["DecoratedEvent", "decorate_event_message"]
