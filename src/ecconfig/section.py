"""A section of an EditorConfig file: a glob and its properties."""

from __future__ import annotations

import os

from .glob import Glob
from .properties import Properties
from .rawvalue import RawValue


class Section:
    """Properties that apply to files matching one header pattern."""

    def __init__(self, pattern: str):
        self._glob = Glob(pattern)
        self._props = Properties()

    def __repr__(self) -> str:
        return f"Section({self.pattern!r}, {len(self._props)} properties)"

    @property
    def pattern(self) -> str:
        return self._glob.pattern

    @property
    def glob(self) -> Glob:
        return self._glob

    @property
    def props(self) -> Properties:
        return self._props

    def insert(self, key: str, value: RawValue | str) -> None:
        """Add a pair, lowercasing the key.  Later pairs replace earlier ones."""
        self._props[key.lower()] = value

    def applies_to(self, path: str | bytes | os.PathLike) -> bool:
        return self._glob.matches(path)

    def apply_to(self, props: Properties, path: str | bytes | os.PathLike) -> None:
        """Copy this section's properties into *props* if *path* matches."""
        if self.applies_to(path):
            self._props.apply_to(props)
