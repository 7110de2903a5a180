"""Logger handle decorating messages before they reach :mod:`logging`."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from lib_log_vivid.application.decorator import MessageDecorator
from lib_log_vivid.config import InstanceConfig
from lib_log_vivid.domain.events import MARKER_ATTRIBUTE
from lib_log_vivid.domain.levels import Severity
from lib_log_vivid.domain.themes import Theme

# Frames between the caller and ``Logger.log`` as counted by Python 3.11+: public method, ``_log``.
_STACKLEVEL = 3


class VividLogger:
    """Decorate messages with the current theme and forward them to a stdlib logger.

    Placeholders (``%s``) are left for the engine to substitute with the
    positional arguments; exceptions pass through untouched.

    Examples
    --------
    >>> from lib_log_vivid.config import GlobalConfig
    >>> handle = VividLogger(logging.getLogger('doctest.handle'), InstanceConfig(GlobalConfig()), Theme.NATURE)
    >>> handle.config.set_color_enabled(False) is handle.config
    True
    >>> handle.format(Severity.ERROR, 'lava')
    ' 🌋 lava'
    """

    def __init__(self, logger: logging.Logger, config: InstanceConfig, theme: Theme | str | None = None) -> None:
        self._logger = logger
        self._config = config
        resolved = Theme.resolve(theme) if theme is not None else config.default_theme
        self._decorator = MessageDecorator(resolved, config)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def config(self) -> InstanceConfig:
        return self._config

    @property
    def theme(self) -> Theme:
        return self._decorator.theme

    def set_theme(self, theme: Theme | str) -> None:
        """Switch themes for every subsequent call; earlier output is untouched."""

        self._decorator = self._decorator.with_theme(theme)

    def with_theme(self, theme: Theme | str) -> "VividLogger":
        self.set_theme(theme)
        return self

    @property
    def decorator(self) -> MessageDecorator:
        return self._decorator

    def unwrap(self) -> logging.Logger:
        """Return the underlying stdlib logger."""

        return self._logger

    def format(self, severity: Severity | str, message: str) -> str:
        return self._decorator.format(severity, message)

    def format_for_console(self, severity: Severity | str, message: str) -> str:
        return self._decorator.format_for_console(severity, message)

    def format_for_file(self, severity: Severity | str, message: str) -> str:
        return self._decorator.format_for_file(severity, message)

    def is_enabled_for(self, severity: Severity | str) -> bool:
        return self._logger.isEnabledFor(_coerce(severity).native_level)

    # Logging calls.

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Severity.TRACE, msg, args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Severity.DEBUG, msg, args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Severity.INFO, msg, args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Severity.WARN, msg, args, **kwargs)

    warning = warn

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Severity.ERROR, msg, args, **kwargs)

    def success(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Severity.SUCCESS, msg, args, **kwargs)

    def completed(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Severity.COMPLETED, msg, args, **kwargs)

    def log(self, severity: Severity | str, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(_coerce(severity), msg, args, **kwargs)

    def _log(
        self,
        severity: Severity,
        msg: str,
        args: tuple[Any, ...],
        *,
        exc_info: Any = None,
        stack_info: bool = False,
        extra: Mapping[str, Any] | None = None,
    ) -> None:
        level = severity.native_level
        if not self._logger.isEnabledFor(level):
            return
        payload = dict(extra) if extra else {}
        if severity.marker is not None:
            payload[MARKER_ATTRIBUTE] = severity.marker
        self._logger.log(
            level,
            self._decorator.format(severity, msg),
            *args,
            exc_info=exc_info,
            stack_info=stack_info,
            extra=payload or None,
            stacklevel=_STACKLEVEL,
        )

    def __repr__(self) -> str:
        return f"VividLogger(name={self.name!r}, theme={self.theme.value!r})"


def _coerce(severity: Severity | str) -> Severity:
    return severity if isinstance(severity, Severity) else Severity.from_name(severity)


__all__ = ["VividLogger"]
