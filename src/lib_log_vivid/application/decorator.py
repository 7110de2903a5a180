"""Message decoration combining configuration, glyph theme and colour table.

Purpose
-------
Turn a severity and a raw message into the final string handed to the logging
engine: ``[prefix ]<glyph><message>[ suffix]``, optionally colour-wrapped.

Contents
--------
* :class:`DecorationSettings` - protocol for the configuration a decorator reads.
* :class:`MessageDecorator` - immutable decorator with three entry points.

System Role
-----------
Application-layer policy used by :class:`lib_log_vivid.runtime.VividLogger`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from lib_log_vivid.config import ConfigSnapshot
from lib_log_vivid.domain.levels import Severity
from lib_log_vivid.domain.palettes import color_for, wrap
from lib_log_vivid.domain.themes import Theme, glyph_for


class DecorationSettings(Protocol):
    """Configuration surface consumed by :class:`MessageDecorator`."""

    def snapshot(self) -> ConfigSnapshot: ...

    def should_apply_colors(self) -> bool: ...


@dataclass(slots=True, frozen=True)
class MessageDecorator:
    """Format messages for one theme against a live configuration.

    Examples
    --------
    >>> from lib_log_vivid.config import GlobalConfig, InstanceConfig
    >>> config = InstanceConfig(GlobalConfig()).set_color_enabled(False)
    >>> MessageDecorator(Theme.CLASSIC, config).format(Severity.INFO, 'Deploy finished')
    ' ✅ Deploy finished'
    """

    theme: Theme
    config: DecorationSettings

    def decorate(self, severity: Severity | str, message: str, use_color: bool) -> str:
        """Build the decorated string for ``message``.

        Colour applies only when ``use_color`` is requested and the resolved
        configuration enables colour.
        """

        settings = self.config.snapshot()
        parts: list[str] = []
        if settings.custom_prefix:
            parts.append(settings.custom_prefix)
            parts.append(" ")
        parts.append(glyph_for(self.theme, severity))
        parts.append(message)
        if settings.custom_suffix:
            parts.append(" ")
            parts.append(settings.custom_suffix)
        decorated = "".join(parts)
        if use_color and settings.color_enabled:
            decorated = wrap(decorated, color_for(severity))
        return decorated

    def format(self, severity: Severity | str, message: str) -> str:
        """Decorate with colour taken from the configuration."""

        return self.decorate(severity, message, self.config.should_apply_colors())

    def format_for_console(self, severity: Severity | str, message: str) -> str:
        return self.decorate(severity, message, True)

    def format_for_file(self, severity: Severity | str, message: str) -> str:
        return self.decorate(severity, message, False)

    def with_theme(self, theme: Theme | str) -> "MessageDecorator":
        return MessageDecorator(Theme.resolve(theme), self.config)


__all__ = ["DecorationSettings", "MessageDecorator"]
