"""Severity colour table and ANSI wrapping.

Purpose
-------
Map each severity onto one Rich colour name and bracket text with the matching
ANSI start/reset sequences.

Contents
--------
* ``COLOR_TABLE`` constant - severity label to Rich style name.
* :func:`color_for` and :func:`wrap` helpers.

System Role
-----------
The colour side of decoration. The table is fixed; themes only swap glyphs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from rich.color import ColorSystem
from rich.style import Style

from .levels import Severity, severity_label


NEUTRAL_COLOR = "default"
"""Colour used for labels outside :data:`COLOR_TABLE` (terminal default foreground)."""

RESET = "\x1b[0m"

COLOR_TABLE: Mapping[str, str] = MappingProxyType(
    {
        Severity.TRACE.label: "bright_black",
        Severity.DEBUG.label: "cyan",
        Severity.INFO.label: "green",
        Severity.WARN.label: "yellow",
        Severity.ERROR.label: "red",
        Severity.SUCCESS.label: "bright_green",
        Severity.COMPLETED.label: "magenta",
    }
)


def color_for(severity: Severity | str) -> str:
    """Return the colour name for ``severity``, neutral when unknown.

    Examples
    --------
    >>> color_for(Severity.ERROR)
    'red'
    >>> color_for('nope')
    'default'
    """

    return COLOR_TABLE.get(severity_label(severity), NEUTRAL_COLOR)


def wrap(text: str, color: str) -> str:
    """Bracket ``text`` with the ANSI sequence for ``color`` and a reset.

    Existing escape sequences inside ``text`` are left untouched. Empty text
    still gets the start and reset codes.

    Examples
    --------
    >>> wrap('boom', 'red') == '\\x1b[31mboom\\x1b[0m'
    True
    >>> wrap('', 'red') == '\\x1b[31m\\x1b[0m'
    True
    """

    style_color = Style.parse(color).color
    if style_color is None:
        return text
    codes = style_color.downgrade(ColorSystem.STANDARD).get_ansi_codes()
    return f"\x1b[{';'.join(codes)}m{text}{RESET}"


__all__ = ["COLOR_TABLE", "NEUTRAL_COLOR", "RESET", "color_for", "wrap"]
