"""Tests for free-text style instruction parsing."""

from __future__ import annotations

import pytest

from resume_builder.services.style_instructions import COLOR_NAMES, parse_style_instruction


class TestParseStyleInstruction:
    def test_nothing_recognised(self):
        assert parse_style_instruction("make it pop") == {}

    def test_named_color_sets_primary(self):
        assert parse_style_instruction("Use NAVY please") == {"primaryColor": COLOR_NAMES["navy"]}

    @pytest.mark.parametrize("word", ["accent", "highlight"])
    def test_named_color_sets_accent(self, word):
        styles = parse_style_instruction(f"orange {word}s")
        assert styles == {"accentColor": COLOR_NAMES["orange"]}

    def test_hex_sets_primary(self):
        assert parse_style_instruction("primary #12ab34") == {"primaryColor": "#12ab34"}

    def test_hex_wins_over_named_primary(self):
        styles = parse_style_instruction("blue, actually #000080")
        assert styles["primaryColor"] == "#000080"

    def test_color_names_match_whole_words(self):
        assert parse_style_instruction("keep it centered") == {}

    @pytest.mark.parametrize(
        ("instruction", "spacing"),
        [
            ("a bit looser", 18),
            ("more spacing between lines", 18),
            ("make it tighter", 12),
            ("compact layout", 12),
        ],
    )
    def test_line_spacing(self, instruction, spacing):
        assert parse_style_instruction(instruction) == {"lineSpacing": spacing}
