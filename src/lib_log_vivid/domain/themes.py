"""Glyph themes keyed by severity label.

Purpose
-------
Keep the theme identities (a closed enum) apart from the glyph data (a static
lookup table) so themes stay plain values.

Contents
--------
* :class:`Theme` enum with case-insensitive resolution.
* ``_GLYPH_TABLE`` constant mapping each theme to its severity glyphs.
* :func:`resolve_theme` and :func:`glyph_for` lookup helpers.

System Role
-----------
Consumed by the decorator and the decorated event wrapper; configuration
resolves theme names through :func:`resolve_theme`.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .levels import Severity, severity_label


FALLBACK_GLYPH = " "
"""Glyph returned for labels a theme does not define."""


class Theme(Enum):
    """Named glyph themes."""

    CLASSIC = "classic"
    NATURE = "nature"
    TECH = "tech"
    GAMING = "gaming"
    MINIMAL = "minimal"
    COLORFUL = "colorful"

    @property
    def glyphs(self) -> Mapping[str, str]:
        """Return the read-only severity-label to glyph mapping."""

        return _GLYPH_TABLE[self]

    @classmethod
    def resolve(cls, name: "str | Theme | None") -> "Theme":
        """Return the theme called ``name``, falling back to :attr:`CLASSIC`.

        Examples
        --------
        >>> Theme.resolve('Tech')
        <Theme.TECH: 'tech'>
        >>> Theme.resolve('unknown')
        <Theme.CLASSIC: 'classic'>
        """

        if isinstance(name, Theme):
            return name
        if name is None:
            return cls.CLASSIC
        normalized = str(name).strip().lower()
        for theme in cls:
            if theme.value == normalized:
                return theme
        return cls.CLASSIC


def _table(**glyphs: str) -> Mapping[str, str]:
    return MappingProxyType({label: glyph for label, glyph in glyphs.items()})


_GLYPH_TABLE: Mapping[Theme, Mapping[str, str]] = MappingProxyType(
    {
        Theme.CLASSIC: _table(
            TRACE=" 🔍 ",
            DEBUG=" 🐛 ",
            INFO=" ✅ ",
            WARN=" ⚠️ ",
            ERROR=" ❌ ",
            SUCCESS=" 🎉 ",
            COMPLETED=" ✨ ",
        ),
        Theme.NATURE: _table(
            TRACE=" 🌱 ",
            DEBUG=" 🍃 ",
            INFO=" 🌸 ",
            WARN=" 🌰 ",
            ERROR=" 🌋 ",
            SUCCESS=" 🌺 ",
            COMPLETED=" 🌈 ",
        ),
        Theme.TECH: _table(
            TRACE=" 🔬 ",
            DEBUG=" ⚙️ ",
            INFO=" 💡 ",
            WARN=" ⚡ ",
            ERROR=" 🔥 ",
            SUCCESS=" 🚀 ",
            COMPLETED=" ⭐ ",
        ),
        Theme.GAMING: _table(
            TRACE=" 🎯 ",
            DEBUG=" 🎮 ",
            INFO=" 🏆 ",
            WARN=" ⚔️ ",
            ERROR=" 💀 ",
            SUCCESS=" 🎊 ",
            COMPLETED=" 👑 ",
        ),
        Theme.MINIMAL: _table(
            TRACE=" · ",
            DEBUG=" - ",
            INFO=" ✓ ",
            WARN=" ! ",
            ERROR=" ✗ ",
            SUCCESS=" ✓ ",
            COMPLETED=" ✓ ",
        ),
        Theme.COLORFUL: _table(
            TRACE=" 🔮 ",
            DEBUG=" 🎨 ",
            INFO=" 💙 ",
            WARN=" 💛 ",
            ERROR=" 💥 ",
            SUCCESS=" 💚 ",
            COMPLETED=" 💜 ",
        ),
    }
)
# Every theme defines all seven severity labels.


def resolve_theme(name: "str | Theme | None") -> Theme:
    """Module-level alias of :meth:`Theme.resolve`."""

    return Theme.resolve(name)


def glyph_for(theme: Theme, severity: Severity | str) -> str:
    """Return the glyph ``theme`` shows for ``severity`` or a single space.

    Examples
    --------
    >>> glyph_for(Theme.MINIMAL, Severity.WARN)
    ' ! '
    >>> glyph_for(Theme.MINIMAL, 'CRITICAL')
    ' '
    """

    return _GLYPH_TABLE[theme].get(severity_label(severity), FALLBACK_GLYPH)


__all__ = ["FALLBACK_GLYPH", "Theme", "glyph_for", "resolve_theme"]
