"""Application layer: decoration policy and the ports adapters implement."""

from __future__ import annotations

from .decorator import DecorationSettings, MessageDecorator

__all__ = ["DecorationSettings", "MessageDecorator"]
