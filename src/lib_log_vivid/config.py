"""Layered decoration configuration: process-wide base plus per-logger overrides.

Purpose
-------
Load the decoration settings once per process from a ``key=value`` file,
expose them as a shared :class:`GlobalConfig`, and let each logger shadow the
colour flag through an :class:`InstanceConfig`.

Contents
--------
* :class:`ConfigSnapshot` - immutable view of the four settings.
* :class:`GlobalConfig` - copy-on-write holder with runtime setters.
* :class:`InstanceConfig` - per-logger override layer.
* :func:`load` / :func:`get_global_config` - lazy, lock-guarded singleton.
* :func:`set_global_config` / :func:`reset_global_config` - test isolation.

System Role
-----------
Feeds the decorator. Loading never raises: an absent or unreadable source
yields the built-in defaults.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values

from lib_log_vivid.domain.themes import Theme


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LOG_VIVID_CONFIG"
"""Environment variable pointing at the configuration file."""

DEFAULT_CONFIG_FILE = "vivid_log.properties"

KEY_THEME = "theme"
KEY_COLOR_ENABLED = "color.enabled"
KEY_CUSTOM_PREFIX = "custom.prefix"
KEY_CUSTOM_SUFFIX = "custom.suffix"


def _parse_bool(value: str | None, default: bool) -> bool:
    """Return ``True`` only for a case-insensitive ``"true"`` literal."""

    if value is None:
        return default
    return value.lower() == "true"


@dataclass(slots=True, frozen=True)
class ConfigSnapshot:
    """Resolved decoration settings observed by a single decoration call."""

    default_theme: Theme = Theme.CLASSIC
    color_enabled: bool = True
    custom_prefix: str = ""
    custom_suffix: str = ""


class GlobalConfig:
    """Process-wide decoration settings.

    The settings live in one immutable :class:`ConfigSnapshot`; setters swap
    the reference under a lock so readers always see a complete snapshot.
    """

    def __init__(self, snapshot: ConfigSnapshot | None = None) -> None:
        self._snapshot = snapshot if snapshot is not None else ConfigSnapshot()
        self._lock = threading.Lock()

    @classmethod
    def from_mapping(cls, source: Mapping[str, str | None]) -> "GlobalConfig":
        """Build a config from a key-value ``source``, defaulting missing keys.

        Examples
        --------
        >>> cfg = GlobalConfig.from_mapping({'theme': 'nature', 'color.enabled': 'FALSE'})
        >>> cfg.default_theme, cfg.color_enabled, cfg.custom_prefix
        (<Theme.NATURE: 'nature'>, False, '')
        """

        return cls(
            ConfigSnapshot(
                default_theme=Theme.resolve(source.get(KEY_THEME) or Theme.CLASSIC.value),
                color_enabled=_parse_bool(source.get(KEY_COLOR_ENABLED), True),
                custom_prefix=source.get(KEY_CUSTOM_PREFIX) or "",
                custom_suffix=source.get(KEY_CUSTOM_SUFFIX) or "",
            )
        )

    def snapshot(self) -> ConfigSnapshot:
        return self._snapshot

    @property
    def default_theme(self) -> Theme:
        return self._snapshot.default_theme

    @property
    def color_enabled(self) -> bool:
        return self._snapshot.color_enabled

    @property
    def custom_prefix(self) -> str:
        return self._snapshot.custom_prefix

    @property
    def custom_suffix(self) -> str:
        return self._snapshot.custom_suffix

    def should_apply_colors(self) -> bool:
        return self._snapshot.color_enabled

    def set_default_theme(self, theme: Theme | str) -> None:
        self._update(default_theme=Theme.resolve(theme))

    def set_color_enabled(self, enabled: bool) -> None:
        self._update(color_enabled=bool(enabled))

    def set_custom_prefix(self, prefix: str) -> None:
        self._update(custom_prefix=prefix or "")

    def set_custom_suffix(self, suffix: str) -> None:
        self._update(custom_suffix=suffix or "")

    def _update(self, **changes: object) -> None:
        with self._lock:
            self._snapshot = replace(self._snapshot, **changes)

    def __repr__(self) -> str:
        return f"GlobalConfig({self._snapshot!r})"


class InstanceConfig:
    """Per-logger view over a :class:`GlobalConfig`.

    Only the colour flag can be overridden; theme, prefix and suffix always
    come from the global layer.
    """

    def __init__(self, global_config: GlobalConfig) -> None:
        self._global = global_config
        self._color_override: bool | None = None

    @property
    def global_config(self) -> GlobalConfig:
        return self._global

    def set_color_enabled(self, enabled: bool) -> "InstanceConfig":
        """Override the colour flag for this instance and return ``self``."""

        self._color_override = bool(enabled)
        return self

    def clear_color_override(self) -> "InstanceConfig":
        self._color_override = None
        return self

    @property
    def color_override(self) -> bool | None:
        return self._color_override

    def is_color_enabled(self) -> bool:
        override = self._color_override
        if override is not None:
            return override
        return self._global.color_enabled

    def should_apply_colors(self) -> bool:
        """Decide whether the auto-detecting entry point colours its output.

        Currently identical to :meth:`is_color_enabled`; kept separate so
        output-stream detection can join the decision later.
        """

        return self.is_color_enabled()

    @property
    def default_theme(self) -> Theme:
        return self._global.default_theme

    @property
    def custom_prefix(self) -> str:
        return self._global.custom_prefix

    @property
    def custom_suffix(self) -> str:
        return self._global.custom_suffix

    def snapshot(self) -> ConfigSnapshot:
        """Return the global snapshot with this instance's override applied.

        The override can switch colour off for this instance but never
        re-enables it against a global disable.

        Examples
        --------
        >>> muted = GlobalConfig(ConfigSnapshot(color_enabled=False))
        >>> InstanceConfig(muted).set_color_enabled(True).snapshot().color_enabled
        False
        >>> InstanceConfig(GlobalConfig()).set_color_enabled(False).snapshot().color_enabled
        False
        """

        base = self._global.snapshot()
        override = self._color_override
        if override is None or not base.color_enabled or override:
            return base
        return replace(base, color_enabled=False)


_GLOBAL: GlobalConfig | None = None
_GLOBAL_LOCK = threading.Lock()


def _resolve_source_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE)


def read_config(path: str | Path | None = None) -> GlobalConfig:
    """Read a fresh :class:`GlobalConfig` from ``path`` (no caching).

    Missing files and read errors fall back to defaults. Values are taken
    literally: no ``${VAR}`` expansion. An unquoted value ending in `` #...`` loses
    that tail as a comment, so quote values that must keep it.
    """

    source_path = _resolve_source_path(path)
    try:
        values = dotenv_values(source_path, interpolate=False) if source_path.is_file() else {}
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        logger.debug("Could not read %s, using defaults: %s", source_path, exc)
        values = {}
    if not values:
        logger.debug("No decoration settings found at %s, using defaults", source_path)
    return GlobalConfig.from_mapping(values)


def load(path: str | Path | None = None) -> GlobalConfig:
    """Return the process-wide config, reading it on first access only.

    ``path`` is consulted only by the call that performs the initial load.
    """

    global _GLOBAL
    current = _GLOBAL
    if current is not None:
        return current
    with _GLOBAL_LOCK:
        if _GLOBAL is None:
            _GLOBAL = read_config(path)
        return _GLOBAL


def get_global_config() -> GlobalConfig:
    """Alias of :func:`load` for call sites that never pass a path."""

    return load()


def set_global_config(config: GlobalConfig) -> None:
    """Install ``config`` as the process-wide instance."""

    global _GLOBAL
    with _GLOBAL_LOCK:
        _GLOBAL = config


def reset_global_config() -> None:
    """Forget the process-wide instance so the next :func:`load` re-reads."""

    global _GLOBAL
    with _GLOBAL_LOCK:
        _GLOBAL = None


__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigSnapshot",
    "DEFAULT_CONFIG_FILE",
    "GlobalConfig",
    "InstanceConfig",
    "get_global_config",
    "load",
    "read_config",
    "reset_global_config",
    "set_global_config",
]
