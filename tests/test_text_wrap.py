"""Tests for font-metric text measurement and greedy wrapping."""

from __future__ import annotations

import pytest

from resume_builder.rendering.text import measure_text, split_font_name, wrap_text

FONT = "Helvetica"
SIZE = 10

SENTENCE = (
    "Designed and shipped a multi-tenant billing platform that processed "
    "millions of invoices per month while cutting infrastructure costs by "
    "forty percent through careful capacity planning and caching"
)


def test_measure_uses_font_metrics():
    # Helvetica "H" is 722 units wide at 1000 units per em.
    assert measure_text("H", FONT, SIZE) == pytest.approx(7.22)
    assert measure_text("HH", FONT, 20) == pytest.approx(4 * measure_text("H", FONT, SIZE))


def test_bold_is_wider():
    assert measure_text("Resume", "Helvetica-Bold", SIZE) > measure_text("Resume", FONT, SIZE)


def test_measures_windows_1252_bullet():
    assert measure_text("\u2022", "Times-Roman", SIZE) == pytest.approx(3.5)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Helvetica", ("helvetica", "")),
        ("Helvetica-Bold", ("helvetica", "B")),
        ("Helvetica-Oblique", ("helvetica", "I")),
        ("Times-Roman", ("times", "")),
        ("Times-BoldItalic", ("times", "BI")),
    ],
)
def test_split_font_name(name, expected):
    assert split_font_name(name) == expected


def test_split_font_name_rejects_unknown_style():
    with pytest.raises(ValueError):
        split_font_name("Helvetica-Condensed")


def test_blank_input_gives_no_lines():
    assert wrap_text("", 100, FONT, SIZE) == []
    assert wrap_text("   ", 100, FONT, SIZE) == []


def test_raw_text_is_sanitized():
    assert wrap_text("日本語 text", 100, FONT, SIZE) == ["text"]
    assert wrap_text("Go • Rust", 500, "Times-Roman", SIZE) == ["Go * Rust"]


def test_cleaned_text_keeps_drawable_glyphs():
    lines = wrap_text("Go • Rust", 500, "Times-Roman", SIZE, sanitize=False)
    assert lines == ["Go • Rust"]


def test_short_text_single_line():
    assert wrap_text("Hello world", 500, FONT, SIZE) == ["Hello world"]


def test_lines_fit_within_width():
    width = 150
    lines = wrap_text(SENTENCE, width, FONT, SIZE)
    assert len(lines) > 1
    for line in lines:
        assert measure_text(line, FONT, SIZE) < width


def test_wrapping_keeps_every_word_in_order():
    lines = wrap_text(SENTENCE, 120, FONT, SIZE)
    assert " ".join(lines) == SENTENCE


def test_greedy_packing():
    width = 150
    lines = wrap_text(SENTENCE, width, FONT, SIZE)
    # Adding the next line's first word would have overflowed.
    for current, following in zip(lines, lines[1:]):
        next_word = following.split(" ")[0]
        assert measure_text(f"{current} {next_word}", FONT, SIZE) >= width


def test_overlong_word_sits_alone():
    long_word = "x" * 60
    assert measure_text(long_word, FONT, SIZE) > 100
    assert wrap_text(f"a {long_word} b", 100, FONT, SIZE) == ["a", long_word, "b"]


def test_overlong_first_word():
    long_word = "y" * 80
    assert wrap_text(f"{long_word} tail", 100, FONT, SIZE) == [long_word, "tail"]
