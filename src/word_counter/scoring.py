from __future__ import annotations

from typing import Iterable

from .syllables import count_syllables
from .textutils import letters_only

# Flesch-Kincaid Grade Level coefficients.
WORDS_PER_SENTENCE_WEIGHT = 0.39
SYLLABLES_PER_WORD_WEIGHT = 11.8
GRADE_OFFSET = 15.59


def total_syllables(words: Iterable[str]) -> int:
    """Sum syllables over the letter-only form of each word, skipping empties."""
    total = 0
    for word in words:
        alpha = letters_only(word)
        if alpha:
            total += count_syllables(alpha)
    return total


def flesch_kincaid_grade(word_count: int, sentence_count: int, syllables: int) -> float:
    """Return the Flesch-Kincaid grade, or 0.0 when there are no words or sentences."""
    if word_count == 0 or sentence_count == 0:
        return 0.0
    avg_words_per_sentence = word_count / sentence_count
    avg_syllables_per_word = syllables / word_count
    return (
        WORDS_PER_SENTENCE_WEIGHT * avg_words_per_sentence
        + SYLLABLES_PER_WORD_WEIGHT * avg_syllables_per_word
        - GRADE_OFFSET
    )
