from __future__ import annotations

import os

from .exceptions import ParseError, UnknownValueError
from .file import ConfigFile, ConfigFiles
from .glob import Glob
from .parser import ConfigParser
from .properties import Properties
from .rawvalue import UNSET, RawValue
from .section import Section
from . import property, version

__version__ = "0.1.0"


def config_for(
    path: str | os.PathLike,
    config_name: str | os.PathLike | None = None,
    *,
    legacy: bool = False,
) -> Properties:
    """Return the properties that apply to a file at *path*.

    Reads every applicable EditorConfig file (see :meth:`ConfigFiles.open`),
    applies their matching sections farthest first, then fills in the
    ``indent_size``/``tab_width`` fallbacks.  *path* is never resolved;
    relative paths are joined onto the working directory.
    """
    props = Properties()
    ConfigFiles.open(path, config_name).apply_to(props, path)
    props.use_fallbacks(legacy)
    return props


__all__ = [
    "config_for", "Glob", "ConfigParser", "ConfigFile", "ConfigFiles",
    "Section", "Properties", "RawValue", "UNSET",
    "ParseError", "UnknownValueError", "property", "version",
]
