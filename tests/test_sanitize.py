"""Tests for text sanitization into printable Latin-1."""

from __future__ import annotations

import pytest

from resume_builder.rendering.sanitize import drawable_glyph, sanitize_text
from resume_builder.rendering.text import wrap_text


class TestSanitizeText:
    def test_none_and_empty(self):
        assert sanitize_text(None) == ""
        assert sanitize_text("") == ""

    def test_non_string_input_is_stringified(self):
        assert sanitize_text(42) == "42"

    def test_smart_quotes_and_dashes(self):
        text = "“Hi” ‘there’ — done… 2019–2021"
        assert sanitize_text(text) == "\"Hi\" 'there' - done... 2019-2021"

    def test_bullet_variants_become_asterisks(self):
        assert sanitize_text("● a ○ b ■ c • d ‣ e ⁃ f") == (
            "* a * b * c * d * e * f"
        )

    def test_triangular_bullets(self):
        assert sanitize_text("▸ item") == "> item"

    def test_non_breaking_space(self):
        assert sanitize_text("a\u00a0b") == "a b"

    def test_arrows(self):
        assert sanitize_text("x → y") == "x -> y"
        assert sanitize_text("←") == "->"

    def test_latin1_letters_kept(self):
        assert sanitize_text("Café Müller ©") == "Café Müller ©"

    def test_unsupported_characters_dropped(self):
        assert sanitize_text("日本語 emoji 🎉") == " emoji "

    def test_control_characters_dropped(self):
        assert sanitize_text("line one\nline two\t!") == "line oneline two!"

    def test_only_unsupported_gives_empty_and_no_lines(self):
        result = sanitize_text("日本🎉​")
        assert result == ""
        assert wrap_text(result, 200, "Helvetica", 10) == []

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain ascii",
            "“quoted” … → ●",
            "Café au lait — ☕",
            "mixed 日本 and • bullets \U0001f680",
        ],
    )
    def test_idempotent(self, text):
        once = sanitize_text(text)
        assert sanitize_text(once) == once


class TestDrawableGlyph:
    def test_encodable_glyphs_kept(self):
        assert drawable_glyph("•") == "•"
        assert drawable_glyph("-") == "-"

    def test_unencodable_glyphs_fall_back(self):
        assert drawable_glyph("●") == "*"
        assert drawable_glyph("■") == "*"
        assert drawable_glyph("▸") == ">"

    def test_unknown_glyph_falls_back_to_asterisk(self):
        assert drawable_glyph("★") == "*"
