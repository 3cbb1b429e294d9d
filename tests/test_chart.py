import pytest

from word_counter.analyzer import analyze
from word_counter.chart import compute_bars, render_bar_chart
from word_counter.models import Bar


def test_compute_bars_scales_against_largest_count():
    bars = compute_bars(analyze("Hello world."), max_height=40)
    assert [bar.label for bar in bars] == ["Words", "Chars", "Sentences"]
    assert [bar.value for bar in bars] == [2, 12, 1]
    assert [bar.height for bar in bars] == [6, 40, 3]


def test_compute_bars_for_empty_text():
    bars = compute_bars(analyze(""), max_height=40)
    assert all(bar.value == 0 and bar.height == 0 for bar in bars)


def test_compute_bars_rejects_negative_height():
    with pytest.raises(ValueError):
        compute_bars(analyze("x"), max_height=-1)


def test_render_bar_chart_pads_labels_and_short_bars():
    bars = [Bar("Words", 2, 6), Bar("Chars", 12, 40), Bar("Sentences", 0, 0)]
    lines = render_bar_chart(bars, min_height=2).splitlines()
    assert lines[0] == "Words     | ###### 2"
    assert lines[1] == "Chars     | " + "#" * 40 + " 12"
    assert lines[2] == "Sentences | ## 0"


def test_render_bar_chart_custom_fill_and_empty():
    assert render_bar_chart([Bar("Words", 1, 3)], min_height=0, fill="*") == "Words | *** 1"
    assert render_bar_chart([]) == ""
