"""Runtime façade creating decorated logger handles.

Purpose
-------
Expose the stable entry points host code uses (:func:`get_logger`,
:func:`get_caller_logger`, :func:`console_logger`, :func:`file_logger`)
instead of wiring configuration, decorator and stdlib logger by hand.

Contents
--------
* Factories returning :class:`VividLogger` handles.
* :class:`CallerResolutionError` raised when stack-derived identity fails.

System Role
-----------
Outer shell of the package. Each handle gets its own
:class:`~lib_log_vivid.config.InstanceConfig` over the shared global config.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Literal

from lib_log_vivid.config import GlobalConfig, InstanceConfig, load
from lib_log_vivid.domain.themes import Theme

from ._identity import CallerResolutionError, caller_identity, identity_for
from ._logger import VividLogger


Target = Literal["console", "file"]


def get_logger(
    identity: str | type | ModuleType,
    *,
    theme: Theme | str | None = None,
    target: Target | None = None,
    global_config: GlobalConfig | None = None,
) -> VividLogger:
    """Return a handle for ``identity`` (logger name, class or module).

    Inputs
    ------
    theme:
        Theme for this handle; ``None`` uses the configured default theme.
    target:
        ``"console"`` forces the colour override on, ``"file"`` forces it off.
        The global colour switch still applies on top of a console override.
    global_config:
        Config to layer over; defaults to the process-wide instance.

    Examples
    --------
    >>> handle = get_logger('doctest.factory', theme='tech', target='file')
    >>> handle.theme, handle.config.is_color_enabled()
    (<Theme.TECH: 'tech'>, False)
    """

    name = identity_for(identity)
    config = InstanceConfig(global_config if global_config is not None else load())
    if target == "console":
        config.set_color_enabled(True)
    elif target == "file":
        config.set_color_enabled(False)
    elif target is not None:
        raise ValueError(f"target must be 'console' or 'file', got {target!r}")
    return VividLogger(logging.getLogger(name), config, theme)


def get_caller_logger(
    *,
    theme: Theme | str | None = None,
    target: Target | None = None,
    global_config: GlobalConfig | None = None,
) -> VividLogger:
    """Return a handle named after the calling module.

    Raises
    ------
    CallerResolutionError
        When the calling frame or its module name is unavailable.
    """

    return get_logger(caller_identity(depth=1), theme=theme, target=target, global_config=global_config)


def console_logger(identity: str | type | ModuleType, *, theme: Theme | str | None = None) -> VividLogger:
    return get_logger(identity, theme=theme, target="console")


def file_logger(identity: str | type | ModuleType, *, theme: Theme | str | None = None) -> VividLogger:
    return get_logger(identity, theme=theme, target="file")


__all__ = [
    "CallerResolutionError",
    "Target",
    "VividLogger",
    "console_logger",
    "file_logger",
    "get_caller_logger",
    "get_logger",
]
