"""Tests for rst_sections.decoration rule classification."""
import pytest

from rst_sections.decoration import (
    SECTION_CHARS,
    is_title_text,
    is_underline,
    make_rule,
    rule_width,
)


class TestIsUnderline:
    def test_every_section_char_repeats(self) -> None:
        for char in SECTION_CHARS:
            for n in range(1, 4):
                assert is_underline(char * n)

    def test_empty_line(self) -> None:
        assert not is_underline("")

    def test_letters_rejected(self) -> None:
        assert not is_underline("aa")

    def test_mixed_characters_rejected(self) -> None:
        assert not is_underline("+++=+")

    def test_whitespace_rejected(self) -> None:
        assert not is_underline("   ")
        assert not is_underline("=== ")

    def test_custom_section_chars(self) -> None:
        assert is_underline("~~~", section_chars="~=")
        assert not is_underline("###", section_chars="~=")


class TestIsTitleText:
    def test_text(self) -> None:
        assert is_title_text("Introduction")
        assert is_title_text("  Indented")

    def test_blank_and_rule(self) -> None:
        assert not is_title_text("")
        assert not is_title_text("    ")
        assert not is_title_text("-----")


class TestMakeRule:
    def test_width(self) -> None:
        assert make_rule("=", 5) == "====="

    def test_minimum_width_is_one(self) -> None:
        assert make_rule("-", 0) == "-"

    def test_rejects_non_punctuation(self) -> None:
        with pytest.raises(ValueError):
            make_rule("a", 3)

    def test_rejects_multi_char(self) -> None:
        with pytest.raises(ValueError):
            make_rule("==", 3)


class TestRuleWidth:
    def test_counts_indent(self) -> None:
        assert rule_width("  Head") == 6

    def test_ignores_trailing_whitespace(self) -> None:
        assert rule_width("Head   ") == 4
