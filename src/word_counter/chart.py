from __future__ import annotations

from typing import List

from .models import Bar, Statistics

BAR_LABELS = ("Words", "Chars", "Sentences")


def compute_bars(stats: Statistics, max_height: int) -> List[Bar]:
    """
    Scale words, characters and sentences against the largest of the three.

    Heights are truncated toward zero; a chart of empty text is all zeros.
    """
    if max_height < 0:
        raise ValueError("max_height must be non-negative.")
    values = (stats.word_count, stats.char_count, stats.sentence_count)
    max_value = max(*values, 1)
    return [
        Bar(label=label, value=value, height=int(value / max_value * max_height))
        for label, value in zip(BAR_LABELS, values)
    ]


def render_bar_chart(bars: List[Bar], min_height: int = 2, fill: str = "#") -> str:
    """Draw one horizontal bar per line; short bars are padded to min_height."""
    if not bars:
        return ""
    label_width = max(len(bar.label) for bar in bars)
    lines: List[str] = []
    for bar in bars:
        length = max(bar.height, min_height)
        lines.append(f"{bar.label:<{label_width}} | {fill * length} {bar.value}")
    return "\n".join(lines)
