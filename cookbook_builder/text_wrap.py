from __future__ import annotations

from typing import List

from .metrics import TextMetrics
from .models import TextStyle


def wrap_text(
    text: str,
    width: float,
    metrics: TextMetrics,
    style: TextStyle = TextStyle.NORMAL,
    size: float = 12,
) -> List[str]:
    """
    Greedy word-wrap of ``text`` into lines no wider than ``width``.

    Each line break in ``text`` starts a new paragraph, and paragraphs are
    wrapped independently; blank paragraphs are dropped. Within a paragraph,
    words are packed onto the current line while the measured width of
    ``line + " " + word`` stays within the budget. A word that would overflow
    starts the next line; a single word wider than the budget is placed on a
    line of its own (no hyphenation). Empty text yields no lines.
    """
    if text is None:
        return []
    lines: List[str] = []
    for paragraph in text.splitlines():
        lines.extend(_wrap_paragraph(paragraph, width, metrics, style, size))
    return lines


def _wrap_paragraph(
    paragraph: str,
    width: float,
    metrics: TextMetrics,
    style: TextStyle,
    size: float,
) -> List[str]:
    stripped = paragraph.strip()
    if not stripped:
        return []

    # Already fits: keep the text as-is
    if metrics.measure_width(stripped, style, size) <= width:
        return [stripped]

    lines: List[str] = []
    current = ""
    for word in stripped.split():
        if not current:
            current = word
            continue
        candidate = f"{current} {word}"
        if metrics.measure_width(candidate, style, size) <= width:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


__all__ = ["wrap_text"]
