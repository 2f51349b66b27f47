"""Exceptions for ecconfig."""

from __future__ import annotations

import os


class ParseError(ValueError):
    """Raised when a line of an EditorConfig file cannot be parsed.

    ``line_no`` (1-based) and ``path`` are filled in when known, and are
    included in the message as ``path:line: message``.
    """

    def __init__(
        self,
        message: str = "invalid line",
        *,
        line_no: int | None = None,
        path: str | os.PathLike | None = None,
    ):
        self.message = message
        self.line_no = line_no
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        where = []
        if self.path is not None:
            where.append(os.fsdecode(self.path))
        if self.line_no is not None:
            where.append(str(self.line_no))
        if where:
            return f"{':'.join(where)}: {self.message}"
        return self.message


class UnknownValueError(ValueError):
    """Raised when a property value is not one the property understands."""
