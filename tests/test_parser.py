"""Tests for ConfigParser and Section."""

import pytest

from ecconfig import ConfigParser, ParseError, Properties, Section


def validate(text, should_be_root, expected):
    parser = ConfigParser.from_string(text)
    assert parser.is_root == should_be_root
    sections = list(parser)
    assert len(sections) == len(expected)
    for section, pairs in zip(sections, expected):
        got = [(k, v.into_str()) for k, v in section.props.iter_set()]
        assert got == pairs


class TestPreamble:
    def test_empty(self):
        validate("", False, [])

    def test_root(self):
        validate("root = true\nroot = false", False, [])
        validate("root = true", True, [])
        validate("Root = True", True, [])
        validate("# hello world", False, [])

    def test_unknown_keys_ignored(self):
        validate("foo = bar", False, [])
        validate("foo = bar\nroot = true", True, [])

    def test_invalid_root_value_ignored(self):
        validate("root = yes", False, [])

    def test_error_in_preamble(self):
        with pytest.raises(ParseError) as exc_info:
            ConfigParser.from_string("root = true\nnot a pair")
        assert exc_info.value.line_no == 2


class TestSections:
    def test_empty_sections(self):
        validate("[foo]", False, [[]])
        validate("[foo]\n[bar]", False, [[], []])

    def test_pairs_in_order(self):
        validate("[foo]\nbk=bv\nak=av", False, [[("bk", "bv"), ("ak", "av")]])

    def test_pairs_per_section(self):
        validate(
            "[foo]\nbk=bv\n[bar]\nak=av",
            False,
            [[("bk", "bv")], [("ak", "av")]],
        )
        validate("[foo]\nk=a\n[bar]\nk=b", False, [[("k", "a")], [("k", "b")]])

    def test_trailing_newlines(self):
        validate("[foo]\nbar=baz\n", False, [[("bar", "baz")]])
        validate("[foo]\nbar=baz\n\n", False, [[("bar", "baz")]])

    def test_comment_after_header(self):
        validate("[/*] # ignore this comment\nk=v", False, [[("k", "v")]])

    def test_keys_lowercased_values_kept(self):
        validate("[foo]\nIndent_Style = Tab", False, [[("indent_style", "Tab")]])

    def test_later_pair_replaces(self):
        validate("[foo]\nk=a\nk=b", False, [[("k", "b")]])

    def test_section_pattern(self):
        parser = ConfigParser.from_string("[*.{c,h}]\nk=v")
        section = next(parser)
        assert section.pattern == "*.{c,h}"
        assert section.applies_to("/src/main.c")
        assert not section.applies_to("/src/main.py")

    def test_error_ends_iteration(self):
        parser = ConfigParser.from_string("[a]\nk=v\nbroken\n[b]\nk=w")
        with pytest.raises(ParseError) as exc_info:
            next(parser)
        assert exc_info.value.line_no == 3
        assert list(parser) == []

    def test_only_newline_ends_a_line(self):
        text = "; note\u2028more\n[*]\nk = a\x0cb\nj = c\u2029d\r\n"
        section = next(ConfigParser.from_string(text))
        assert section.props["k"].value == "a\x0cb"
        assert section.props["j"].value == "c\u2029d"

    def test_line_breaks_do_not_shift_errors(self):
        parser = ConfigParser.from_string("[*]\n# a\u2028b\nbroken\n")
        with pytest.raises(ParseError) as exc_info:
            next(parser)
        assert exc_info.value.line_no == 3

    def test_line_no(self):
        parser = ConfigParser.from_string("root=true\n\n[a]\nk=v")
        assert parser.line_no == 3
        list(parser)
        assert parser.line_no == 4


class TestSourceTracking:
    def test_values_remember_source(self, tmp_path):
        path = tmp_path / ".editorconfig"
        parser = ConfigParser.from_string("[*]\n\nindent_size = 2\n", path=path)
        value = next(parser).props["indent_size"]
        assert value.source == (path, 3)

    def test_no_source_without_path(self):
        value = next(ConfigParser.from_string("[*]\nk=v")).props["k"]
        assert value.source is None


class TestApply:
    def test_apply_to_matching_sections(self):
        text = "[*]\nindent_style = space\n[*.py]\nindent_size = 4\n[*.js]\nindent_size = 2\n"
        props = Properties()
        ConfigParser.from_string(text).apply_to(props, "/src/app.py")
        assert props["indent_style"].value == "space"
        assert props["indent_size"].value == "4"

    def test_later_sections_win(self):
        text = "[*]\nk = a\n[*.txt]\nk = b\n"
        props = Properties()
        ConfigParser.from_string(text).apply_to(props, "/notes.txt")
        assert props["k"].value == "b"

    def test_section_insert(self):
        section = Section("*.md")
        section.insert("Max_Line_Length", "80")
        props = Properties()
        section.apply_to(props, "/README.md")
        assert props["max_line_length"].value == "80"
        props = Properties()
        section.apply_to(props, "/README.rst")
        assert len(props) == 0
