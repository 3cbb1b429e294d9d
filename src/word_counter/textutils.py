from __future__ import annotations

import re

# Python's Unicode whitespace class; matches exactly what str.isspace() accepts.
WHITESPACE_RE = re.compile(r"\s+", re.UNICODE)
NON_LETTER_RE = re.compile(r"[^A-Za-z]")


def is_blank(value: str) -> bool:
    """True when ``value`` is empty or contains only whitespace."""
    return not value.strip()


def remove_whitespace(value: str) -> str:
    """Drop every whitespace character from ``value``."""
    return WHITESPACE_RE.sub("", value)


def letters_only(word: str) -> str:
    """Strip everything outside ASCII A-Z / a-z from a word."""
    return NON_LETTER_RE.sub("", word)
