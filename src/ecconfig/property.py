"""Types for the common EditorConfig properties.

Every property type has a ``key`` class attribute naming the property, a
``parse(value)`` classmethod that raises
:class:`~ecconfig.exceptions.UnknownValueError` for values it does not
understand, and a ``str()`` form that parses back to an equal value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Protocol, TypeVar

from .exceptions import UnknownValueError

P = TypeVar("P", bound="PropertyType")

_UINT_RE = re.compile(r"\+?[0-9]+")


class PropertyType(Protocol):
    """Structural type shared by all property classes."""
    key: ClassVar[str]

    @classmethod
    def parse(cls: type[P], value: str) -> P: ...


def _property(key: str) -> Callable[[type], type]:
    """Class decorator attaching the property *key*."""
    def decorate(cls: type) -> type:
        cls.key = key
        return cls
    return decorate


def _parse_uint(value: str) -> int:
    if _UINT_RE.fullmatch(value) is None:
        raise UnknownValueError(f"not a whole number: {value!r}")
    return int(value)


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise UnknownValueError(f"not a boolean: {value!r}")


# ---------------------------------------------------------------------------
# Choice properties
# ---------------------------------------------------------------------------

class _ChoiceProperty(str, Enum):
    """Base for properties limited to a fixed set of lowercase words."""

    def __str__(self) -> str:          # noqa: D105
        return self.value

    @classmethod
    def parse(cls, value: str):
        try:
            return cls(value.lower())
        except ValueError:
            raise UnknownValueError(
                f"unknown value for {cls.key}: {value!r}"
            ) from None


@_property("indent_style")
class IndentStyle(_ChoiceProperty):
    """The ``indent_style`` property: ``tab`` or ``space``."""
    TABS = "tab"
    SPACES = "space"


@_property("end_of_line")
class EndOfLine(_ChoiceProperty):
    """The ``end_of_line`` property."""
    LF = "lf"
    CRLF = "crlf"
    CR = "cr"


@_property("charset")
class Charset(_ChoiceProperty):
    """The ``charset`` property."""
    UTF8 = "utf-8"
    LATIN1 = "latin1"
    UTF16LE = "utf-16le"
    UTF16BE = "utf-16be"
    UTF8BOM = "utf-8-bom"


# ---------------------------------------------------------------------------
# Valued properties
# ---------------------------------------------------------------------------

# Sizes of 0 are accepted: the format only asks for whole numbers.

@_property("indent_size")
@dataclass(frozen=True)
class IndentSize:
    """The ``indent_size`` property: a whole number, or ``tab``.

    ``value`` is None for ``tab``, meaning "use ``tab_width``".
    """
    value: int | None = None

    def __str__(self) -> str:
        return "tab" if self.value is None else str(self.value)

    @property
    def use_tab_width(self) -> bool:
        return self.value is None

    @classmethod
    def parse(cls, value: str) -> IndentSize:
        if value.lower() == "tab":
            return cls(None)
        return cls(_parse_uint(value))


@_property("tab_width")
@dataclass(frozen=True)
class TabWidth:
    """The ``tab_width`` property."""
    value: int

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, value: str) -> TabWidth:
        return cls(_parse_uint(value))


@_property("trim_trailing_whitespace")
@dataclass(frozen=True)
class TrimTrailingWhitespace:
    """The ``trim_trailing_whitespace`` property."""
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"

    @classmethod
    def parse(cls, value: str) -> TrimTrailingWhitespace:
        return cls(_parse_bool(value))


@_property("insert_final_newline")
@dataclass(frozen=True)
class InsertFinalNewline:
    """The ``insert_final_newline`` property."""
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"

    @classmethod
    def parse(cls, value: str) -> InsertFinalNewline:
        return cls(_parse_bool(value))


@_property("max_line_length")
@dataclass(frozen=True)
class MaxLineLength:
    """The ``max_line_length`` property: a whole number, or ``off`` (None)."""
    value: int | None = None

    def __str__(self) -> str:
        return "off" if self.value is None else str(self.value)

    @classmethod
    def parse(cls, value: str) -> MaxLineLength:
        if value.lower() == "off":
            return cls(None)
        return cls(_parse_uint(value))


# ---------------------------------------------------------------------------
# Spelling language
# ---------------------------------------------------------------------------

_TAG_RE = re.compile(r"([A-Za-z]{2})(?:-([A-Za-z]{2}))?")


@dataclass(frozen=True)
class LanguageTag:
    """The subset of BCP 47 tags allowed by EditorConfig, e.g. ``en-US``."""
    primary: str
    region: str | None = None

    def __str__(self) -> str:
        if self.region is None:
            return self.primary
        return f"{self.primary}-{self.region}"

    @classmethod
    def parse(cls, value: str) -> LanguageTag:
        m = _TAG_RE.fullmatch(value)
        if m is None:
            raise UnknownValueError(f"not a language tag: {value!r}")
        region = m.group(2)
        return cls(m.group(1).lower(), region.upper() if region else None)


@_property("spelling_language")
@dataclass(frozen=True)
class SpellingLanguage:
    """The ``spelling_language`` property."""
    value: LanguageTag

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, value: str) -> SpellingLanguage:
        return cls(LanguageTag.parse(value))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

#: Keys whose values are case-insensitive and reported lowercased.
#: ``max_line_length`` and ``spelling_language`` are deliberately absent.
STANDARD_KEYS: tuple[str, ...] = (
    "indent_size",
    "indent_style",
    "tab_width",
    "end_of_line",
    "charset",
    "trim_trailing_whitespace",
    "insert_final_newline",
)

PROPERTY_TYPES: dict[str, type] = {
    cls.key: cls
    for cls in (
        IndentStyle, IndentSize, TabWidth, EndOfLine, Charset,
        TrimTrailingWhitespace, InsertFinalNewline, MaxLineLength,
        SpellingLanguage,
    )
}
