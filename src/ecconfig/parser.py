"""Parser for the text of an EditorConfig file."""

from __future__ import annotations

import io
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ._lines import Header, LineReader
from .properties import Properties
from .rawvalue import RawValue
from .section import Section


class ConfigParser:
    """Reads the preamble of an EditorConfig file, then yields its sections.

    The preamble (everything before the first header) is read eagerly on
    construction; only ``root`` is recognised there and other keys are
    ignored.  Iterating yields :class:`~ecconfig.section.Section` objects
    in file order.  A malformed line raises
    :class:`~ecconfig.exceptions.ParseError` and ends the iteration.

    When *path* is given, every value remembers the file and line it came
    from (see :attr:`RawValue.source`).
    """

    def __init__(self, lines: Iterable[str], *, path: str | os.PathLike | None = None):
        self.path = Path(path) if path is not None else None
        self.is_root = False
        self._reader = LineReader(lines, path=self.path)
        self._header: str | None = None
        for line in self._reader:
            if line is None:
                continue
            if isinstance(line, Header):
                self._header = line.pattern
                break
            if line.key.lower() == "root":
                value = line.value.lower()
                if value in ("true", "false"):
                    self.is_root = value == "true"

    @classmethod
    def from_string(cls, text: str, *, path: str | os.PathLike | None = None) -> ConfigParser:
        # Only "\n" ends a line; other Unicode line breaks stay in the text.
        return cls(io.StringIO(text, newline="\n"), path=path)

    @property
    def line_no(self) -> int:
        """Number of lines read so far."""
        return self._reader.line_no

    def __iter__(self) -> Iterator[Section]:
        return self

    def __next__(self) -> Section:
        if self._header is None:
            raise StopIteration
        section = Section(self._header)
        self._header = None
        for line in self._reader:
            if line is None:
                continue
            if isinstance(line, Header):
                self._header = line.pattern
                break
            value = RawValue(line.value)
            if self.path is not None:
                value = value.with_source(self.path, self._reader.line_no)
            section.insert(line.key, value)
        return section

    def apply_to(self, props: Properties, path: str | bytes | os.PathLike) -> None:
        """Apply every remaining section to *props* for a file at *path*."""
        for section in self:
            section.apply_to(props, path)
