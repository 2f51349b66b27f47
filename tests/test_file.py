"""Tests for config file discovery and config_for."""

import logging

import pytest

from ecconfig import ConfigFile, ConfigFiles, ParseError, Properties, config_for
from ecconfig.property import Charset, IndentSize, TabWidth


def as_dict(props):
    return {k: v.value for k, v in props.items()}


class TestConfigFile:
    def test_open(self, project):
        config = ConfigFile.open(project / ".editorconfig")
        assert config.is_root
        assert [s.pattern for s in config] == ["*", "*.py"]

    def test_missing(self, tmp_path):
        with pytest.raises(OSError):
            ConfigFile.open(tmp_path / "nope")

    def test_bom_is_skipped(self, tmp_path):
        path = tmp_path / ".editorconfig"
        path.write_bytes(b"\xef\xbb\xbfroot = true\n[*]\nk = v\n")
        config = ConfigFile.open(path)
        assert config.is_root

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / ".editorconfig"
        path.write_bytes(b"[*]\nk = \xff\n")
        with pytest.raises(ParseError):
            ConfigFile.open(path)

    def test_unicode_line_separator_in_comment(self, tmp_path):
        path = tmp_path / ".editorconfig"
        path.write_text("root = true\n# see\u2028below\n[*]\nk = v\n", encoding="utf-8")
        config = ConfigFile.open(path)
        assert [s.props["k"].value for s in config] == ["v"]

    def test_paths_relative_to_file(self, project):
        config = ConfigFile.open(project / "src" / ".editorconfig")
        props = Properties()
        config.apply_to(props, project / "src" / "lib" / "util.py")
        assert props.get_property(Charset) is Charset.UTF8

    def test_root_pattern_does_not_reach_outside(self, project):
        config = ConfigFile.open(project / "src" / ".editorconfig")
        props = Properties()
        config.apply_to(props, project / "src" / "app.py")
        assert "charset" not in props


class TestConfigFiles:
    def test_order_farthest_first(self, project):
        files = ConfigFiles.open(project / "src" / "app.py")
        assert [f.path for f in files] == [
            project / ".editorconfig",
            project / "src" / ".editorconfig",
        ]
        assert len(files) == 2
        assert files[0].is_root

    def test_stops_at_root(self, project):
        (project / "src" / ".editorconfig").write_text("root = true\n[*]\nk = v\n")
        files = ConfigFiles.open(project / "src" / "app.py")
        assert [f.path for f in files] == [project / "src" / ".editorconfig"]

    def test_custom_name(self, project):
        (project / "src" / ".myconfig").write_text("root = true\n[*]\nk = v\n")
        files = ConfigFiles.open(project / "src" / "app.py", ".myconfig")
        assert [f.path for f in files] == [project / "src" / ".myconfig"]

    def test_absolute_name(self, project, tmp_path):
        other = tmp_path / "elsewhere.ini"
        other.write_text("[*]\nk = v\n")
        files = ConfigFiles.open(project / "src" / "app.py", other)
        assert [f.path for f in files] == [other]

    def test_relative_target(self, project, monkeypatch):
        monkeypatch.chdir(project / "src")
        files = ConfigFiles.open("app.py")
        assert len(files) == 2

    def test_logs_discovery(self, project, caplog):
        with caplog.at_level(logging.DEBUG, logger="ecconfig.file"):
            ConfigFiles.open(project / "src" / "app.py")
        assert "Loaded" in caplog.text
        assert "Stopping at root config" in caplog.text

    def test_parse_error_propagates(self, project):
        (project / "src" / ".editorconfig").write_text("[*]\nnot a pair\n")
        with pytest.raises(ParseError) as exc_info:
            config_for(project / "src" / "app.py")
        assert exc_info.value.line_no == 2


class TestConfigFor:
    def test_nested_override(self, project):
        props = config_for(project / "src" / "app.py")
        assert as_dict(props) == {
            "end_of_line": "LF",
            "insert_final_newline": "true",
            "indent_style": "space",
            "indent_size": "2",
            "tab_width": "2",
        }
        assert list(props) == [
            "end_of_line", "insert_final_newline", "indent_style",
            "indent_size", "tab_width",
        ]

    def test_typed_access(self, project):
        props = config_for(project / "src" / "lib" / "util.py")
        assert props.get_property(IndentSize) == IndentSize(2)
        assert props.get_property(TabWidth) == TabWidth(2)
        assert props.get_property(Charset) is Charset.UTF8

    def test_unmatched_file(self, project):
        props = config_for(project / "README")
        assert as_dict(props) == {"end_of_line": "LF", "insert_final_newline": "true"}

    def test_source_tracking(self, project):
        props = config_for(project / "src" / "app.py")
        assert props["indent_size"].source == (project / "src" / ".editorconfig", 2)

    def test_no_config_files(self, tmp_path):
        props = config_for(tmp_path / "a.txt", ".no-such-config")
        assert len(props) == 0

    def test_legacy(self, tmp_path):
        (tmp_path / ".editorconfig").write_text("root = true\n[*]\nindent_style = tab\n")
        assert "indent_size" in config_for(tmp_path / "a.c")
        assert "indent_size" not in config_for(tmp_path / "a.c", legacy=True)
