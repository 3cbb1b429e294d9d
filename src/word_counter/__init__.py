"""
word_counter package exports the text analysis engine and its host helpers.
"""

from __future__ import annotations

from .analyzer import analyze
from .config import WordCounterConfig, config_from_dict, config_from_yaml, load_config
from .models import Statistics
from .session import TextSession
from .syllables import count_syllables
from .tokenization import split_sentences, split_words

__all__ = [
    "analyze",
    "Statistics",
    "split_words",
    "split_sentences",
    "count_syllables",
    "TextSession",
    "WordCounterConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
]

__version__ = "0.1.0"
