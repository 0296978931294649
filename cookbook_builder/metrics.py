"""
Text-metrics capability used by the layout engine.

The engine never measures text itself: the rendering backend supplies an
object with a ``measure_width`` method. ``FixedWidthMetrics`` is a
deterministic stand-in where every character has the same width, useful for
dry runs and for tests that need exact line breaks.
"""

from __future__ import annotations

from typing import Protocol

from .models import TextStyle


class TextMetrics(Protocol):
    def measure_width(self, text: str, style: TextStyle, size: float = 12) -> float:
        ...


class FixedWidthMetrics:
    """Every character is ``char_width`` wide, regardless of style or size."""

    def __init__(self, char_width: float = 1.0):
        self.char_width = char_width

    def measure_width(self, text: str, style: TextStyle = TextStyle.NORMAL, size: float = 12) -> float:
        return len(text) * self.char_width


__all__ = ["TextMetrics", "FixedWidthMetrics"]
