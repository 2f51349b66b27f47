"""Compile EditorConfig glob patterns into matcher programs.

Compilation is total: every string produces a program.  Malformed
constructs (an unclosed ``[``, an unclosed ``{``, an empty class) fall back
to matching their delimiters literally instead of raising.
"""

from __future__ import annotations

import logging
import re

from ._types import (
    Alternation,
    AnyChar,
    AnySeq,
    CharClass,
    End,
    NumericRange,
    Program,
    ProgramBuilder,
    Separator,
    SymbolSet,
)

logger = logging.getLogger(__name__)

_NUMRANGE_RE = re.compile(r"(-?[0-9]+)\.\.(-?[0-9]+)\}")


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

def _grow_char_class(segment: str, pos: int, chars: set[str]) -> int | None:
    """Collect class members starting at *pos* (just past ``[`` / ``[!``).

    Returns the index just past the closing ``]``, or None if the class
    never closes.
    """
    n = len(segment)
    prev = "["
    at_start = True
    while pos < n:
        c = segment[pos]
        pos += 1
        if c == "]":
            return pos
        if c == "\\":
            if pos >= n:
                return None
            prev = segment[pos]
            pos += 1
            chars.add(prev)
        elif c == "-" and not at_start:
            if pos >= n:
                return None
            nc = segment[pos]
            pos += 1
            if nc == "]":
                chars.add("-")
                return pos
            if nc == "\\":
                if pos >= n:
                    return None
                nc = segment[pos]
                pos += 1
            chars.update(chr(o) for o in range(ord(prev), ord(nc) + 1))
            prev = nc
        else:
            chars.add(c)
            prev = c
        at_start = False
    return None


def _parse_char_class(out: ProgramBuilder, segment: str, pos: int, fuse: bool) -> int:
    """Compile a class whose ``[`` ends just before *pos*; return the new position."""
    if pos >= len(segment):
        out.push_literal("[", fuse=fuse)
        return pos
    invert = segment[pos] == "!"
    chars: set[str] = set()
    end = _grow_char_class(segment, pos + 1 if invert else pos, chars)
    if end is None:
        out.push_literal("[", fuse=fuse)
        return pos
    chars.discard("/")
    if not chars:
        if invert:
            out.push(AnyChar(), fuse=fuse)
        else:
            out.push_literal("[", fuse=fuse)
            out.push_literal("]", fuse=fuse)
    elif len(chars) == 1 and not invert:
        out.push_literal(next(iter(chars)), fuse=fuse)
    else:
        out.push(CharClass(SymbolSet(chars), not invert), fuse=fuse)
    return end


# ---------------------------------------------------------------------------
# Numeric ranges
# ---------------------------------------------------------------------------

def _parse_numeric_range(segment: str, pos: int) -> tuple[int, int, int] | None:
    """Parse ``<int>..<int>}`` at *pos*; return ``(low, high, end)`` or None."""
    m = _NUMRANGE_RE.match(segment, pos)
    if m is None:
        return None
    a, b = int(m.group(1)), int(m.group(2))
    return min(a, b), max(a, b), m.end()


# ---------------------------------------------------------------------------
# Alternation groups
# ---------------------------------------------------------------------------

class _Group:
    """An open ``{...}`` group: the program before it plus finished branches."""

    __slots__ = ("prefix", "branches")

    def __init__(self, prefix: ProgramBuilder):
        self.prefix = prefix
        self.branches: list[ProgramBuilder] = []

    def close(self, fuse: bool) -> ProgramBuilder:
        """Build the group after a matching ``}``."""
        out = self.prefix
        if not self.branches:
            out.push_literal("{", fuse=fuse)
            out.push_literal("}", fuse=fuse)
        elif len(self.branches) == 1:
            out.push_literal("{", fuse=fuse)
            out.extend(self.branches[0], fuse=fuse)
            out.push_literal("}", fuse=fuse)
        else:
            out.push(Alternation(_order_branches(self.branches)), fuse=fuse)
        return out

    def abandon(self, fuse: bool) -> ProgramBuilder:
        """Rebuild the group literally when its ``}`` never came."""
        out = self.prefix
        out.push_literal("{", fuse=fuse)
        for i, branch in enumerate(self.branches):
            if i:
                out.push_literal(",", fuse=fuse)
            out.extend(branch, fuse=fuse)
        return out


def _order_branches(branches: list[ProgramBuilder]) -> tuple[Program, ...]:
    """Empty branches first, then authoring order, without duplicates."""
    built = [b.build() for b in branches]
    built.sort(key=bool)
    return tuple(dict.fromkeys(built))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def parse(pattern: str, *, fuse: bool = True) -> Program:
    """Compile *pattern* into a :class:`Program`.

    With ``fuse=False`` adjacent literals and wildcards are kept as separate
    nodes; the result matches exactly the same paths.
    """
    out = ProgramBuilder()
    groups: list[_Group] = []
    for segment in pattern.split("/"):
        out.push(Separator(), fuse=fuse)
        n = len(segment)
        i = 0
        while i < n:
            c = segment[i]
            i += 1
            if c == "\\":
                if i < n:
                    out.push_literal(segment[i], fuse=fuse)
                    i += 1
            elif c == "?":
                out.push(AnyChar(), fuse=fuse)
            elif c == "*":
                if i < n and segment[i] == "*":
                    i += 1
                    out.push(AnySeq(True), fuse=fuse)
                else:
                    out.push(AnySeq(False), fuse=fuse)
            elif c == "[":
                i = _parse_char_class(out, segment, i, fuse)
            elif c == "{":
                numrange = _parse_numeric_range(segment, i)
                if numrange is not None:
                    low, high, i = numrange
                    out.push(NumericRange(low, high), fuse=fuse)
                else:
                    groups.append(_Group(out))
                    out = ProgramBuilder()
            elif c == "," and groups:
                groups[-1].branches.append(out)
                out = ProgramBuilder()
            elif c == "}" and groups:
                group = groups.pop()
                group.branches.append(out)
                out = group.close(fuse)
            else:
                out.push_literal(c, fuse=fuse)
    while groups:
        group = groups.pop()
        group.branches.append(out)
        out = group.abandon(fuse)
    if "/" in pattern:
        out.nodes[0] = End()
    if isinstance(out.nodes[-1], Separator):
        out.push(AnySeq(False), fuse=fuse)
    program = out.build()
    logger.debug("Compiled glob %r into %r", pattern, program)
    return program
