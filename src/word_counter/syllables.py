from __future__ import annotations

VOWELS = frozenset("aeiouy")


def count_syllables(word: str) -> int:
    """
    Estimate syllables by counting vowel groups.

    ``y`` always counts as a vowel. A trailing silent ``e`` is discounted for
    words longer than two characters unless the word ends in ``le``. Any
    non-empty word has at least one syllable.
    """
    word = word.lower()
    if not word:
        return 0

    count = 0
    last_was_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not last_was_vowel:
            count += 1
        last_was_vowel = is_vowel

    if len(word) > 2 and word.endswith("e") and not word.endswith("le"):
        count -= 1

    return max(1, count)
