"""Finding and opening EditorConfig files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path, PurePath

from .exceptions import ParseError
from .parser import ConfigParser
from .properties import Properties
from .section import Section

logger = logging.getLogger(__name__)

DEFAULT_NAME = ".editorconfig"


def _absolute(path: str | os.PathLike) -> Path:
    """Join a relative *path* onto the working directory without resolving it."""
    path = Path(path)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


class ConfigFile:
    """An EditorConfig file whose preamble has been read.

    Iterating yields the file's sections.  The whole file is read when it
    is opened, so no file handle is held.
    """

    def __init__(self, path: str | os.PathLike, parser: ConfigParser):
        self.path = Path(path)
        self.parser = parser

    def __repr__(self) -> str:
        return f"ConfigFile({str(self.path)!r}, is_root={self.is_root})"

    @classmethod
    def open(cls, path: str | os.PathLike) -> ConfigFile:
        """Read the file at *path*.

        Raises :class:`OSError` if it cannot be read and
        :class:`~ecconfig.exceptions.ParseError` if it is not valid UTF-8
        or its preamble is malformed.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ParseError(f"not valid UTF-8: {exc.reason}", path=path) from None
        return cls(path, ConfigParser.from_string(text, path=path))

    @property
    def is_root(self) -> bool:
        return self.parser.is_root

    def __iter__(self) -> Iterator[Section]:
        return iter(self.parser)

    def apply_to(self, props: Properties, path: str | os.PathLike) -> None:
        """Apply the file's sections to *props* for a file at *path*.

        *path* is made relative to the directory holding this file first,
        so that ``/`` and ``**`` in headers cannot reach above it.
        """
        path = PurePath(path)
        try:
            path = path.relative_to(self.path.parent)
        except ValueError:
            pass
        self.parser.apply_to(props, path)


class ConfigFiles:
    """The EditorConfig files that apply to one target, in application order.

    Files nearer the filesystem root come first, so applying them in order
    lets nearer files override farther ones.
    """

    def __init__(self, files: list[ConfigFile]):
        self._files = files

    def __repr__(self) -> str:
        return f"ConfigFiles({[str(f.path) for f in self._files]!r})"

    def __iter__(self) -> Iterator[ConfigFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __getitem__(self, index: int) -> ConfigFile:
        return self._files[index]

    @classmethod
    def open(
        cls,
        target: str | os.PathLike,
        config_name: str | os.PathLike | None = None,
    ) -> ConfigFiles:
        """Collect the config files for a file at *target*.

        *config_name* defaults to ``.editorconfig``.  A relative name is
        looked up in every ancestor directory of *target*, stopping after
        the first file with ``root = true``; files that cannot be read are
        skipped.  An absolute name is used as the only config file.

        *target* is not resolved, but a relative target is joined onto the
        current working directory.
        """
        name = Path(config_name if config_name is not None else DEFAULT_NAME)
        if name.is_absolute():
            logger.debug("Using config file %s", name)
            return cls([ConfigFile.open(name)])

        files = []
        for directory in _absolute(target).parents:
            candidate = directory / name
            try:
                config = ConfigFile.open(candidate)
            except OSError as exc:
                logger.debug("Skipping %s: %s", candidate, exc.strerror or exc)
                continue
            logger.debug("Loaded %s", candidate)
            files.append(config)
            if config.is_root:
                logger.debug("Stopping at root config %s", candidate)
                break
        files.reverse()
        return cls(files)

    def apply_to(self, props: Properties, target: str | os.PathLike) -> None:
        """Apply every file, farthest first, to *props* for *target*."""
        target = _absolute(target)
        for config in self._files:
            config.apply_to(props, target)
