"""Backtracking evaluation of glob programs.

The evaluator is an explicit loop over a stack of choice points instead of
recursion.  Programs are consumed from their last node to their first,
mirroring the tail-first :class:`~ecconfig.glob._split.Splitter`.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Union

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
    Separator,
)

logger = logging.getLogger(__name__)

# Section headers may be up to 1024 characters long, and the shortest
# repeatable unit that adds a choice point is two characters (``*x``).
MAX_DEPTH = 512


# ---------------------------------------------------------------------------
# Continuations and choice points
# ---------------------------------------------------------------------------

class _Frame(NamedTuple):
    """Unconsumed nodes ``nodes[:pos]`` of one program, then *parent*."""
    nodes: tuple[Matcher, ...]
    pos: int
    parent: _Frame | None


class _Rewind(NamedTuple):
    """Retry an ``AnySeq`` node after it has swallowed one more character."""
    splitter: Splitter
    frame: _Frame


class _Alternatives(NamedTuple):
    """Untried branches of an ``Alternation`` node."""
    splitter: Splitter
    frame: _Frame
    branches: tuple[Program, ...]
    index: int


_ChoicePoint = Union[_Rewind, _Alternatives]


def _enter(program: Program, parent: _Frame | None) -> _Frame:
    return _Frame(program.nodes, len(program.nodes), parent)


def _frame_key(frame: _Frame | None) -> tuple[tuple[int, int], ...]:
    """Identify a continuation by the node tuples and offsets on its chain."""
    key = []
    while frame is not None:
        key.append((id(frame.nodes), frame.pos))
        frame = frame.parent
    return tuple(key)


# ---------------------------------------------------------------------------
# Deterministic nodes
# ---------------------------------------------------------------------------

def _step(node: Matcher, splitter: Splitter) -> Splitter | None:
    """Apply a node that never creates a choice point."""
    if isinstance(node, LiteralSuffix):
        return splitter.match_suffix(node.text)
    if isinstance(node, Separator):
        return splitter.match_separator()
    if isinstance(node, AnyChar):
        return splitter.match_any_char(False)
    if isinstance(node, CharClass):
        popped = splitter.next_char()
        if popped is None:
            return None
        rest, ch = popped
        if ch == "/" or (ch in node.symbols) != node.inclusive:
            return None
        return rest
    if isinstance(node, NumericRange):
        return splitter.match_number(node.low, node.high)
    if isinstance(node, End):
        return splitter.match_end()
    raise TypeError(f"Unknown matcher node: {node!r}")


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------

def evaluate(
    program: Program,
    splitter: Splitter,
    max_depth: int = MAX_DEPTH,
) -> Splitter | None:
    """Run *program* against *splitter*.

    Returns the splitter left over after a successful match (whatever part
    of the path the program did not need), or None if nothing matched.

    Each (continuation, path position) state is resumed from a choice point
    at most once, which keeps the running time polynomial in the length of
    the program and the path.
    """
    cont: _Frame | None = _enter(program, None)
    choices: list[_ChoicePoint] = []
    resumed: set[tuple] = set()
    while True:
        while cont is not None and cont.pos == 0:
            cont = cont.parent
        if cont is None:
            return splitter

        here = cont
        node = cont.nodes[cont.pos - 1]
        cont = _Frame(cont.nodes, cont.pos - 1, cont.parent)

        if isinstance(node, AnySeq):
            longer = splitter.match_any_char(node.crosses_separators)
            if longer is not None:
                if len(choices) >= max_depth:
                    logger.debug("Glob choice stack exceeded %d entries", max_depth)
                    return None
                choices.append(_Rewind(longer, here))
            continue

        if isinstance(node, Alternation):
            branches = node.branches
            if len(branches) > 1:
                if len(choices) >= max_depth:
                    logger.debug("Glob choice stack exceeded %d entries", max_depth)
                    return None
                choices.append(_Alternatives(splitter, cont, branches, 1))
            cont = _enter(branches[0], cont)
            continue

        advanced = _step(node, splitter)
        if advanced is not None:
            splitter = advanced
            continue

        # Backtrack to the most recent choice point.  A state that was
        # resumed before has already failed, so it is skipped.
        while True:
            if not choices:
                return None
            choice = choices.pop()
            if isinstance(choice, _Rewind):
                splitter, cont = choice.splitter, choice.frame
            else:
                splitter = choice.splitter
                nxt = choice.index + 1
                if nxt < len(choice.branches):
                    choices.append(choice._replace(index=nxt))
                cont = _enter(choice.branches[choice.index], choice.frame)
            state = (_frame_key(cont), splitter.position)
            if state not in resumed:
                resumed.add(state)
                break
