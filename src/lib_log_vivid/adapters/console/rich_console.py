"""Rich-powered console sink rendering decorated events.

Purpose
-------
Primary human-facing sink for the fan-out adapter. Decorated messages may
already carry ANSI colour; Rich parses those codes so consoles created with
``no_color`` still print plain text.

Contents
--------
* :class:`RichConsoleSink` - sink implementing
  :class:`~lib_log_vivid.application.ports.sink.SinkPort`.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from lib_log_vivid.application.ports.sink import LogEventView


class RichConsoleSink:
    """Print events as ``timestamp level logger - message`` lines."""

    def __init__(
        self,
        *,
        name: str = "console",
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        show_timestamp: bool = True,
    ) -> None:
        """Configure the sink with an optional pre-built Rich console."""
        self._name = name
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color, highlight=False)
        self._show_timestamp = show_timestamp

    @property
    def name(self) -> str:
        return self._name

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, event: LogEventView) -> None:
        """Print ``event``.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> from lib_log_vivid.domain.events import LogEvent
        >>> event = LogEvent('msg', 'msg', 20, 'INFO', 'svc', 'main', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc))
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> RichConsoleSink(console=console).emit(event)
        >>> 'svc - msg' in console.export_text()
        True
        """
        self._console.print(self.render(event), highlight=False, soft_wrap=True)

    def render(self, event: LogEventView) -> Text:
        line = Text()
        if self._show_timestamp:
            line.append(event.timestamp.isoformat(), style="dim")
            line.append(" ")
        line.append(f"{event.level_name:>8} {event.logger_name} - ")
        line.append_text(Text.from_ansi(event.formatted_message))
        return line


__all__ = ["RichConsoleSink"]
