"""The EditorConfig core version this package follows.

Compliance is checked by running ``ecconfig-parse`` against the
EditorConfig core test suite.
"""

STRING = "0.16.0"
MAJOR = 0
MINOR = 16
PATCH = 0

#: Versions before this one had no ``indent_style = tab`` fallback.
LEGACY_BEFORE = (0, 10, 0)


def parse_version(text: str) -> tuple[int, int, int]:
    """Parse ``MAJOR.MINOR.PATCH`` (missing trailing parts count as 0)."""
    parts = text.strip().split(".")
    if not 1 <= len(parts) <= 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"invalid version: {text!r}")
    numbers = [int(p) for p in parts] + [0] * (3 - len(parts))
    return numbers[0], numbers[1], numbers[2]
