"""Unparsed EditorConfig property values."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from .property import PropertyType

P = TypeVar("P", bound="PropertyType")


@dataclass(frozen=True)
class RawValue:
    """An unparsed property value.

    Conceptually an optional non-empty string: the empty string means the
    value is not set.  ``source`` records the file and 1-based line number
    the value was read from; it is ignored by comparisons.
    """
    value: str = ""
    source: tuple[Path, int] | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.value

    def is_unset(self) -> bool:
        """True if no value is set.  A literal ``unset`` does not count."""
        return not self.value

    def is_unset_keyword(self) -> bool:
        """True if the value is the ``unset`` keyword, in any case."""
        return self.value.lower() == "unset"

    def filter_unset(self) -> RawValue:
        """Return :data:`UNSET` if the value is the ``unset`` keyword, else self."""
        if self.is_unset_keyword():
            return UNSET
        return self

    def into_option(self) -> str | None:
        """The value, or None when unset."""
        return self.value or None

    def into_str(self) -> str:
        """The value, or ``"unset"`` when unset."""
        return self.value or "unset"

    def parse(self, prop: type[P]) -> P | None:
        """Parse the value as *prop*.

        Returns None when the value is unset or is the ``unset`` keyword.
        Raises :class:`~ecconfig.exceptions.UnknownValueError` when the value
        is set but not valid for *prop*.
        """
        this = self.filter_unset()
        if this.is_unset():
            return None
        return prop.parse(this.value)

    def to_lowercase(self) -> RawValue:
        return replace(self, value=self.value.lower())

    def with_source(self, path: str | Path, line_no: int) -> RawValue:
        """Return a copy that remembers where it was read from."""
        return replace(self, source=(Path(path), line_no))


UNSET = RawValue()
