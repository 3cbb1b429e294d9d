from __future__ import annotations

import logging

from .models import Statistics
from .scoring import flesch_kincaid_grade, total_syllables
from .textutils import remove_whitespace
from .tokenization import split_sentences, split_words

LOGGER = logging.getLogger(__name__)


def analyze(text: str) -> Statistics:
    """Compute word, character, sentence and readability statistics for text."""
    words = split_words(text)
    word_count = len(words)
    sentence_count = len(split_sentences(text))

    score = 0.0
    if word_count and sentence_count:
        score = flesch_kincaid_grade(word_count, sentence_count, total_syllables(words))

    stats = Statistics(
        word_count=word_count,
        char_count=len(text),
        char_no_spaces_count=len(remove_whitespace(text)),
        sentence_count=sentence_count,
        readability_score=score,
    )
    LOGGER.debug(
        "Analyzed %d chars: %d words, %d sentences, grade %.2f",
        stats.char_count,
        word_count,
        sentence_count,
        score,
    )
    return stats
