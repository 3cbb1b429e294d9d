from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class Statistics:
    """The five statistics reported for a body of text."""

    word_count: int
    char_count: int
    char_no_spaces_count: int
    sentence_count: int
    readability_score: float

    def to_dict(self) -> dict[str, Any]:
        """Return the statistics as a plain dictionary in field order."""
        return dict(asdict(self))


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True, frozen=True)
class Bar:
    """One bar of the words / chars / sentences comparison chart."""

    label: str
    value: int
    height: int
