"""Domain entities and value objects used by the decoration layer."""

from __future__ import annotations

from .events import CallerInfo, LogEvent, MARKER_ATTRIBUTE
from .levels import Severity, TRACE_LEVEL, label_for_level, severity_label
from .palettes import COLOR_TABLE, NEUTRAL_COLOR, color_for, wrap
from .themes import FALLBACK_GLYPH, Theme, glyph_for, resolve_theme

__all__ = [
    "COLOR_TABLE",
    "CallerInfo",
    "FALLBACK_GLYPH",
    "LogEvent",
    "MARKER_ATTRIBUTE",
    "NEUTRAL_COLOR",
    "Severity",
    "TRACE_LEVEL",
    "Theme",
    "color_for",
    "glyph_for",
    "label_for_level",
    "resolve_theme",
    "severity_label",
    "wrap",
]
