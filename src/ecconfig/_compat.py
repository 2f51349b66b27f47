"""Platform shims for raw path access.

Path components are matched as bytes.  On byte-native platforms (POSIX and
WASI) ``os.fsencode`` gives a lossless view of the original bytes; elsewhere
the component is encoded as UTF-8, which fails for names that are not valid
Unicode.  Either way a failed conversion yields ``None`` instead of raising,
and callers treat that as "no match".
"""

from __future__ import annotations

import os
import sys

BYTE_NATIVE = os.name == "posix" or sys.platform == "wasi"


def fs_bytes(name: str) -> bytes | None:
    """Return the raw bytes of one path component, or None."""
    try:
        return os.fsencode(name)
    except UnicodeEncodeError:
        return None


def utf8_bytes(name: str) -> bytes | None:
    """Return the UTF-8 bytes of one path component, or None."""
    try:
        return name.encode("utf-8")
    except UnicodeEncodeError:
        return None


component_bytes = fs_bytes if BYTE_NATIVE else utf8_bytes
