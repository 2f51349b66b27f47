"""Line-level reading of EditorConfig files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from typing import NamedTuple, Union

from .exceptions import ParseError

# "[header]" followed by a comment, e.g. "[*.py] # python"
_HEADER_COMMENT_RE = re.compile(r"\[(.*)\]\s*[#;].*")


class Header(NamedTuple):
    """A section header line; *pattern* is the text between the brackets."""
    pattern: str


class Pair(NamedTuple):
    """A ``key = value`` line."""
    key: str
    value: str


#: None stands for a blank or comment line.
Line = Union[None, Header, Pair]


def parse_line(line: str) -> Line:
    """Classify one line of an EditorConfig file.

    Returns None for blank lines and comments, a :class:`Header`, or a
    :class:`Pair`.  Nothing is lowercased.  Raises
    :class:`~ecconfig.exceptions.ParseError` for anything else.
    """
    text = line.lstrip()
    if text.startswith((";", "#")):
        return None
    text = text.rstrip()
    if not text:
        return None
    if text.startswith("["):
        if text.endswith("]"):
            pattern = text[1:-1]
        else:
            m = _HEADER_COMMENT_RE.fullmatch(text)
            if m is None:
                raise ParseError("unterminated section header")
            pattern = m.group(1)
        if not pattern:
            raise ParseError("empty section header")
        return Header(pattern)
    key, eq, value = text.partition("=")
    if not eq:
        raise ParseError("expected a section header or key = value")
    key = key.rstrip()
    value = value.lstrip()
    if not key or not value:
        raise ParseError("missing key or value")
    return Pair(key, value)


class LineReader:
    """Iterator of parsed lines that keeps track of the line number.

    Parse errors are raised with the 1-based line number and the *path*
    the lines came from, if given.
    """

    def __init__(self, lines: Iterable[str], *, path: str | os.PathLike | None = None):
        self._lines = iter(lines)
        self.path = path
        self.line_no = 0
        self.line = ""

    def __iter__(self) -> Iterator[Line]:
        return self

    def __next__(self) -> Line:
        self.line = next(self._lines)
        self.line_no += 1
        try:
            return parse_line(self.line)
        except ParseError as exc:
            raise ParseError(
                exc.message, line_no=self.line_no, path=self.path,
            ) from None
