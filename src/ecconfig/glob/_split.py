"""Tail-first path decomposition for glob matching.

A :class:`Splitter` walks a path from its last component toward the root,
and within a component from its last byte toward its first.  Every
operation returns a new splitter (or None on failure) and never mutates
``self``, so a splitter doubles as a snapshot for backtracking.
"""

from __future__ import annotations

import os
from pathlib import PurePath

from .._compat import component_bytes

_DIGITS = b"0123456789"
_MINUS = ord("-")
_ZERO = ord("0")


def _path_components(path: str | bytes | os.PathLike) -> tuple[str, ...]:
    """Split *path* into its non-root components, leaf last.

    The root or drive, when present, is dropped; a relative path is treated
    as if it hung off an implicit root.
    """
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        raw = os.fsdecode(raw)
    pure = PurePath(raw)
    parts = pure.parts
    if pure.anchor:
        parts = parts[1:]
    return parts


def _last_scalar_start(part: bytes) -> int:
    """Index of the first byte of the last UTF-8 sequence in *part*."""
    i = len(part) - 1
    stop = max(0, len(part) - 4)
    while i > stop and 0x80 <= part[i] < 0xC0:
        i -= 1
    return i


class Splitter:
    """Immutable cursor over a path, consumed from the end."""

    __slots__ = ("_parts", "_index", "_part")

    def __init__(self, parts: tuple[str, ...], index: int, part: bytes):
        self._parts = parts
        self._index = index
        self._part = part

    def __repr__(self) -> str:
        return f"Splitter(index={self._index}, part={self._part!r})"

    @classmethod
    def new(cls, path: str | bytes | os.PathLike) -> Splitter | None:
        """Position a splitter at the last component of *path*."""
        parts = _path_components(path)
        return cls._enter(parts, len(parts) - 1)

    @classmethod
    def _enter(cls, parts: tuple[str, ...], index: int) -> Splitter | None:
        if index < 0:
            return cls(parts, -1, b"")
        data = component_bytes(parts[index])
        if data is None:
            return None
        return cls(parts, index, data)

    def _with_part(self, part: bytes) -> Splitter:
        return Splitter(self._parts, self._index, part)

    # ------------------------------------------------------------------
    @property
    def position(self) -> tuple[int, int]:
        """Component index and bytes left in it; equal for equal cursors."""
        return self._index, len(self._part)

    @property
    def at_boundary(self) -> bool:
        """True once the current component has been fully consumed."""
        return not self._part

    def match_separator(self) -> Splitter | None:
        """Cross into the previous component; only valid at a boundary."""
        if self._part or self._index < 0:
            return None
        return Splitter._enter(self._parts, self._index - 1)

    def match_any_char(self, crosses_separators: bool) -> Splitter | None:
        """Consume one character, or a boundary if *crosses_separators*."""
        if self._part:
            return self._with_part(self._part[:_last_scalar_start(self._part)])
        if crosses_separators:
            return self.match_separator()
        return None

    def next_char(self) -> tuple[Splitter, str] | None:
        """Pop one character; a boundary pops as a synthetic ``/``."""
        part = self._part
        if not part:
            crossed = self.match_separator()
            if crossed is None:
                return None
            return crossed, "/"
        start = _last_scalar_start(part)
        try:
            ch = part[start:].decode("utf-8")
        except UnicodeDecodeError:
            return None
        return self._with_part(part[:start]), ch

    def match_suffix(self, text: str) -> Splitter | None:
        """Strip *text* from the end of the current component."""
        try:
            suffix = text.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError:
            return None
        if not suffix:
            return self
        if self._part.endswith(suffix):
            return self._with_part(self._part[:-len(suffix)])
        return None

    def match_number(self, low: int, high: int) -> Splitter | None:
        """Consume the longest trailing integer that lies in ``[low, high]``.

        Candidates are the trailing digit runs from longest to shortest; the
        whole run may take a preceding ``-`` as its sign.  A run with more
        than one digit may not start with ``0``.
        """
        part = self._part
        end = len(part)
        start = end
        while start > 0 and part[start - 1] in _DIGITS:
            start -= 1
        run = end - start
        if not run:
            return None
        widest = len(str(max(abs(low), abs(high))))
        for length in range(min(run, widest), 0, -1):
            begin = end - length
            if length > 1 and part[begin] == _ZERO:
                continue
            value = int(part[begin:end])
            if length == run and start > 0 and part[start - 1] == _MINUS:
                if low <= -value <= high:
                    return self._with_part(part[:start - 1])
            if low <= value <= high:
                return self._with_part(part[:begin])
        return None

    def match_end(self) -> Splitter | None:
        """Succeed when only the root remains above the current component."""
        if self._part or self._index != 0:
            return None
        return Splitter(self._parts, -1, b"")
