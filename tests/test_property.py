"""Tests for the standard property types."""

import pytest

from ecconfig import UnknownValueError
from ecconfig.property import (
    PROPERTY_TYPES,
    STANDARD_KEYS,
    Charset,
    EndOfLine,
    IndentSize,
    IndentStyle,
    InsertFinalNewline,
    LanguageTag,
    MaxLineLength,
    SpellingLanguage,
    TabWidth,
    TrimTrailingWhitespace,
)


class TestKeys:
    def test_standard_keys(self):
        for prop in (
            IndentStyle, IndentSize, TabWidth, EndOfLine, Charset,
            TrimTrailingWhitespace, InsertFinalNewline,
        ):
            assert prop.key in STANDARD_KEYS

    def test_max_line_length_not_standard(self):
        assert MaxLineLength.key not in STANDARD_KEYS

    def test_registry(self):
        assert PROPERTY_TYPES["indent_style"] is IndentStyle
        assert PROPERTY_TYPES["spelling_language"] is SpellingLanguage


class TestChoices:
    @pytest.mark.parametrize("prop, text, expected", [
        (IndentStyle, "tab", IndentStyle.TABS),
        (IndentStyle, "SPACE", IndentStyle.SPACES),
        (EndOfLine, "CRLF", EndOfLine.CRLF),
        (EndOfLine, "cr", EndOfLine.CR),
        (Charset, "UTF-8-BOM", Charset.UTF8BOM),
        (Charset, "latin1", Charset.LATIN1),
    ])
    def test_parse(self, prop, text, expected):
        assert prop.parse(text) is expected

    def test_str(self):
        assert str(IndentStyle.SPACES) == "space"
        assert str(Charset.UTF16LE) == "utf-16le"

    @pytest.mark.parametrize("prop, text", [
        (IndentStyle, "tabs"),
        (EndOfLine, "\\n"),
        (Charset, "ascii"),
    ])
    def test_unknown(self, prop, text):
        with pytest.raises(UnknownValueError):
            prop.parse(text)


class TestValued:
    def test_indent_size(self):
        assert IndentSize.parse("4") == IndentSize(4)
        assert IndentSize.parse("Tab").use_tab_width
        assert str(IndentSize(None)) == "tab"
        assert str(IndentSize(2)) == "2"

    def test_tab_width(self):
        assert TabWidth.parse("8") == TabWidth(8)
        assert TabWidth.parse("+8") == TabWidth(8)
        assert TabWidth.parse("0") == TabWidth(0)

    @pytest.mark.parametrize("text", ["-1", "4.5", "", "four", " 4"])
    def test_invalid_numbers(self, text):
        with pytest.raises(UnknownValueError):
            TabWidth.parse(text)

    def test_booleans(self):
        assert TrimTrailingWhitespace.parse("TRUE") == TrimTrailingWhitespace(True)
        assert InsertFinalNewline.parse("false") == InsertFinalNewline(False)
        assert str(InsertFinalNewline(True)) == "true"
        with pytest.raises(UnknownValueError):
            InsertFinalNewline.parse("yes")

    def test_max_line_length(self):
        assert MaxLineLength.parse("80") == MaxLineLength(80)
        assert MaxLineLength.parse("OFF") == MaxLineLength(None)
        assert str(MaxLineLength(None)) == "off"


class TestSpellingLanguage:
    def test_primary_only(self):
        assert SpellingLanguage.parse("EN").value == LanguageTag("en")

    def test_with_region(self):
        tag = LanguageTag.parse("en-us")
        assert tag == LanguageTag("en", "US")
        assert str(tag) == "en-US"

    @pytest.mark.parametrize("text", ["english", "en_US", "e", "en-USA"])
    def test_invalid(self, text):
        with pytest.raises(UnknownValueError):
            LanguageTag.parse(text)

    def test_round_trip(self):
        assert str(SpellingLanguage.parse("pt-BR")) == "pt-BR"
