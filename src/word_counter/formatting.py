from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from typing import Dict, List

from .config import WordCounterConfig
from .models import Statistics

# Card titles in display order, keyed by Statistics field.
STAT_LABELS: Dict[str, str] = {
    "word_count": "Word Count",
    "char_count": "Character Count",
    "char_no_spaces_count": "Characters (no spaces)",
    "sentence_count": "Sentence Count",
    "readability_score": "Readability Score",
}

_ROUNDING = {
    "half_even": ROUND_HALF_EVEN,
    "half_up": ROUND_HALF_UP,
}


def format_score(score: float, decimals: int = 2, rounding: str = "half_even") -> str:
    """
    Format a readability score with a fixed number of decimal places.

    ``half_up`` rounds ties away from zero. Rounding works on the exact binary
    value of the float, so ``2.675`` stays ``2.67`` under either mode.
    """
    try:
        mode = _ROUNDING[rounding]
    except KeyError:
        raise ValueError(f"Unknown rounding mode '{rounding}'.") from None
    if decimals < 0:
        raise ValueError("decimals must be non-negative.")
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(score).quantize(quantum, rounding=mode)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:.{decimals}f}"


def format_statistics(
    stats: Statistics, config: WordCounterConfig | None = None
) -> Dict[str, str]:
    """Map each card title to its display string."""
    config = config or WordCounterConfig()
    values = stats.to_dict()
    formatted: Dict[str, str] = {}
    for name, label in STAT_LABELS.items():
        if name == "readability_score":
            formatted[label] = format_score(
                stats.readability_score, config.score_decimals, config.rounding
            )
        else:
            formatted[label] = str(values[name])
    return formatted


def render_cards(stats: Statistics, config: WordCounterConfig | None = None) -> str:
    """Render the statistics as aligned ``title  value`` lines."""
    formatted = format_statistics(stats, config)
    title_width = max(len(title) for title in formatted)
    value_width = max(len(value) for value in formatted.values())
    lines: List[str] = [
        f"{title:<{title_width}}  {value:>{value_width}}"
        for title, value in formatted.items()
    ]
    return "\n".join(lines)
