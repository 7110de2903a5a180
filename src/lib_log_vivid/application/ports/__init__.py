"""Protocols separating the application layer from concrete adapters."""

from __future__ import annotations

from .sink import LogEventView, SinkPort

__all__ = ["LogEventView", "SinkPort"]
