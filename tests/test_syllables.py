import pytest

from word_counter.syllables import count_syllables


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("", 0),
        ("a", 1),
        ("the", 1),
        ("apple", 2),
        ("queue", 1),
        ("rhythm", 1),
        ("lazy", 2),
        ("hello", 2),
        ("world", 1),
        ("over", 2),
        ("make", 1),
        ("table", 2),
        ("be", 1),
    ],
)
def test_count_syllables(word: str, expected: int):
    assert count_syllables(word) == expected


def test_count_syllables_is_case_insensitive():
    assert count_syllables("HELLO") == count_syllables("hello") == 2


def test_y_is_always_a_vowel():
    assert count_syllables("yes") == 1
    assert count_syllables("gym") == 1
    assert count_syllables("happy") == 2


def test_non_empty_words_have_at_least_one_syllable():
    for word in ("b", "tsk", "shh", "the", "ee"):
        assert count_syllables(word) >= 1
