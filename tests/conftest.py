"""Shared fixtures for ecconfig tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path):
    """A small tree with a root config and a nested override.

    tmp_path/
      .editorconfig          root = true; [*] and [*.py]
      src/.editorconfig      [*.py] indent_size = 2; [/lib/*] charset
      src/app.py
      src/lib/util.py
    """
    (tmp_path / ".editorconfig").write_text(
        "root = true\n"
        "\n"
        "[*]\n"
        "end_of_line = LF\n"
        "insert_final_newline = true\n"
        "\n"
        "[*.py]\n"
        "indent_style = space\n"
        "indent_size = 4\n"
    )
    src = tmp_path / "src"
    (src / "lib").mkdir(parents=True)
    (src / ".editorconfig").write_text(
        "[*.py]\n"
        "indent_size = 2\n"
        "\n"
        "[/lib/*]\n"
        "charset = utf-8\n"
    )
    (src / "app.py").write_text("")
    (src / "lib" / "util.py").write_text("")
    return tmp_path
