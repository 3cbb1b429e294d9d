from __future__ import annotations

import re
from typing import List

from .textutils import WHITESPACE_RE, is_blank

SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+\s*", re.UNICODE)


def split_words(text: str) -> List[str]:
    """Split text into whitespace-delimited words, ignoring outer whitespace."""
    stripped = text.strip()
    if not stripped:
        return []
    return WHITESPACE_RE.split(stripped)


def split_sentences(text: str) -> List[str]:
    """
    Split text on runs of ``.``, ``!`` or ``?`` plus any trailing whitespace.

    Empty fragments at the end of the split are discarded, then a final
    fragment that is only whitespace is dropped as well. Empty fragments
    between two boundaries (``".Hi"``) are kept and counted.
    """
    if is_blank(text):
        return []

    fragments = SENTENCE_BOUNDARY_RE.split(text)
    while fragments and fragments[-1] == "":
        fragments.pop()
    if fragments and is_blank(fragments[-1]):
        fragments.pop()
    return fragments
