"""Matcher nodes and programs for compiled glob patterns."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Iterator, Union


# ---------------------------------------------------------------------------
# SymbolSet
# ---------------------------------------------------------------------------

class SymbolSet:
    """Sorted, deduplicated tuple of characters with binary-search lookup."""

    __slots__ = ("_chars",)

    def __init__(self, chars: Iterable[str] = ()):
        self._chars = tuple(sorted(set(chars)))

    def __contains__(self, ch: object) -> bool:
        i = bisect_left(self._chars, ch)
        return i < len(self._chars) and self._chars[i] == ch

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other):
        if isinstance(other, SymbolSet):
            return self._chars == other._chars
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"SymbolSet({''.join(self._chars)!r})"


# ---------------------------------------------------------------------------
# Matcher nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Separator:
    """Exactly one path-component boundary."""


@dataclass(frozen=True)
class AnyChar:
    """Exactly one character inside a component (``?``)."""


@dataclass(frozen=True)
class AnySeq:
    """Zero or more characters (``*``), or across components too (``**``)."""
    crosses_separators: bool = False


@dataclass(frozen=True)
class LiteralSuffix:
    """Literal text anchored at the current tail position."""
    text: str


@dataclass(frozen=True)
class CharClass:
    """One character that is (or, when not *inclusive*, is not) in *symbols*."""
    symbols: SymbolSet
    inclusive: bool = True


@dataclass(frozen=True)
class NumericRange:
    """A trailing decimal integer in ``[low, high]``."""
    low: int
    high: int


@dataclass(frozen=True)
class Alternation:
    """Any one of several sub-programs (``{a,b}``)."""
    branches: tuple[Program, ...]


@dataclass(frozen=True)
class End:
    """Nothing but the root may remain upstream (anchored patterns)."""


Matcher = Union[
    Separator, AnyChar, AnySeq, LiteralSuffix, CharClass, NumericRange,
    Alternation, End,
]


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Program:
    """Immutable, ordered sequence of matcher nodes."""
    nodes: tuple[Matcher, ...] = ()

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Matcher]:
        return iter(self.nodes)

    def __bool__(self) -> bool:
        return bool(self.nodes)


class ProgramBuilder:
    """Mutable builder for a :class:`Program`.

    Consecutive separators always collapse into one, the same way paths
    collapse ``a//b`` into ``a/b``.  With *fuse* (the default), :meth:`push`
    also merges adjacent literals and adjacent wildcards; those merges only
    make the program shorter.
    """

    __slots__ = ("nodes",)

    def __init__(self, nodes: Iterable[Matcher] = ()):
        self.nodes: list[Matcher] = list(nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def push(self, node: Matcher, *, fuse: bool = True) -> None:
        """Append one node, fusing it into the previous one when safe."""
        last = self.nodes[-1] if self.nodes else None
        if isinstance(node, Separator) and isinstance(last, Separator):
            return
        if fuse and last is not None:
            if isinstance(node, LiteralSuffix) and isinstance(last, LiteralSuffix):
                self.nodes[-1] = LiteralSuffix(last.text + node.text)
                return
            if isinstance(node, AnySeq) and isinstance(last, AnySeq):
                self.nodes[-1] = AnySeq(
                    last.crosses_separators or node.crosses_separators
                )
                return
        self.nodes.append(node)

    def push_literal(self, ch: str, *, fuse: bool = True) -> None:
        """Append one character with no special meaning."""
        if ch == "/":
            self.push(Separator(), fuse=fuse)
        else:
            self.push(LiteralSuffix(ch), fuse=fuse)

    def extend(self, program: Program | ProgramBuilder, *, fuse: bool = True) -> None:
        """Append every node of *program*."""
        for node in program.nodes:
            self.push(node, fuse=fuse)

    def build(self) -> Program:
        return Program(tuple(self.nodes))
