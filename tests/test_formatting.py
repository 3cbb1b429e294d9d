import pytest

from word_counter.analyzer import analyze
from word_counter.config import WordCounterConfig
from word_counter.formatting import STAT_LABELS, format_score, format_statistics, render_cards


def test_format_score_uses_two_places_by_default():
    assert format_score(analyze("Hello world.").readability_score) == "2.89"
    assert format_score(0.0) == "0.00"
    assert format_score(-3.4) == "-3.40"


def test_format_score_rounding_modes():
    """0.125 is exact in binary, so it exercises the tie-breaking rule."""
    assert format_score(0.125, 2, "half_even") == "0.12"
    assert format_score(0.125, 2, "half_up") == "0.13"
    assert format_score(-0.125, 2, "half_up") == "-0.13"
    assert format_score(2.5, 0, "half_even") == "2"
    assert format_score(2.5, 0, "half_up") == "3"


def test_format_score_never_shows_negative_zero():
    assert format_score(-0.001) == "0.00"


def test_format_score_rejects_unknown_rounding():
    with pytest.raises(ValueError):
        format_score(1.0, 2, "ceiling")
    with pytest.raises(ValueError):
        format_score(1.0, -1)


def test_format_statistics_orders_cards():
    formatted = format_statistics(analyze("Hello world."))
    assert list(formatted) == list(STAT_LABELS.values())
    assert formatted == {
        "Word Count": "2",
        "Character Count": "12",
        "Characters (no spaces)": "11",
        "Sentence Count": "1",
        "Readability Score": "2.89",
    }


def test_format_statistics_honours_decimals():
    config = WordCounterConfig(score_decimals=4)
    formatted = format_statistics(analyze("The quick brown fox jumps over the lazy dog."), config)
    assert formatted["Readability Score"] == "2.3422"


def test_render_cards_aligns_columns():
    rendered = render_cards(analyze("Hello world."))
    lines = rendered.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("Word Count")
    assert lines[-1].startswith("Readability Score")
    assert lines[-1].endswith("2.89")
    assert len({len(line) for line in lines}) == 1
