"""EditorConfig glob patterns.

Create a :class:`Glob` from a section header, then test paths against it
with :meth:`Glob.matches`.  Compilation never fails: malformed brackets and
braces are matched literally.
"""

from __future__ import annotations

import os

from ._match import MAX_DEPTH, evaluate
from ._parse import parse
from ._split import Splitter
from ._types import (
    Alternation,
    AnyChar,
    AnySeq,
    CharClass,
    End,
    LiteralSuffix,
    Matcher,
    NumericRange,
    Program,
    ProgramBuilder,
    Separator,
    SymbolSet,
)


class Glob:
    """A compiled glob pattern.

    Immutable and safe to share between threads; every :meth:`matches` call
    keeps its state on its own stack.
    """

    __slots__ = ("_pattern", "_program", "_max_depth")

    def __init__(self, pattern: str = "", *, max_depth: int = MAX_DEPTH):
        object.__setattr__(self, "_pattern", pattern)
        object.__setattr__(self, "_program", parse(pattern))
        object.__setattr__(self, "_max_depth", max_depth)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Glob({self._pattern!r})"

    def __eq__(self, other):
        if isinstance(other, Glob):
            return (self._program, self._max_depth) == (other._program, other._max_depth)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._program, self._max_depth))

    @property
    def pattern(self) -> str:
        """The pattern text this glob was compiled from."""
        return self._pattern

    @property
    def program(self) -> Program:
        """The compiled matcher program."""
        return self._program

    @property
    def max_depth(self) -> int:
        """Ceiling on saved choice points while matching."""
        return self._max_depth

    def matches(self, path: str | bytes | os.PathLike) -> bool:
        """Return True if *path* matches this pattern.

        The path is never resolved or touched on disk.  Paths whose
        components cannot be read as bytes on this platform never match.
        """
        splitter = Splitter.new(path)
        if splitter is None:
            return False
        return evaluate(self._program, splitter, self._max_depth) is not None


__all__ = [
    "Glob", "MAX_DEPTH", "parse", "evaluate", "Splitter",
    "Program", "ProgramBuilder", "Matcher", "SymbolSet",
    "Separator", "AnyChar", "AnySeq", "LiteralSuffix", "CharClass",
    "NumericRange", "Alternation", "End",
]
