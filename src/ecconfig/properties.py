"""Insertion-ordered map of EditorConfig properties."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from typing import TypeVar

from .property import IndentSize, IndentStyle, PropertyType, TabWidth
from .rawvalue import UNSET, RawValue

P = TypeVar("P", bound=PropertyType)


def _key_of(key: str | type) -> str:
    return key if isinstance(key, str) else key.key


def _as_raw(value: RawValue | str) -> RawValue:
    return value if isinstance(value, RawValue) else RawValue(str(value))


class Properties(MutableMapping):
    """Map of property keys to :class:`RawValue` objects.

    Keys keep the order in which they were first inserted; replacing a
    value does not move its key.  The map is case-sensitive: callers are
    expected to lowercase keys (as :class:`~ecconfig.section.Section`
    does).  Plain strings assigned to a key are wrapped in a RawValue.
    """

    def __init__(self, pairs: Iterable[tuple[str, RawValue | str]] = ()):
        self._pairs: dict[str, RawValue] = {}
        for key, value in pairs:
            self[key] = value

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v.value!r}" for k, v in self._pairs.items())
        return f"Properties({inner})"

    def __getitem__(self, key: str) -> RawValue:
        return self._pairs[key]

    def __setitem__(self, key: str, value: RawValue | str):
        self._pairs[key] = _as_raw(value)

    def __delitem__(self, key: str):
        del self._pairs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    # ------------------------------------------------------------------
    # Raw and typed access
    # ------------------------------------------------------------------

    def get_raw(self, key: str | type) -> RawValue:
        """Return the raw value for a key or property type.

        Missing keys give :data:`~ecconfig.rawvalue.UNSET`.  The ``unset``
        keyword is returned as-is; see :meth:`RawValue.filter_unset`.
        """
        return self._pairs.get(_key_of(key), UNSET)

    def get_property(self, prop: type[P]) -> P | None:
        """Return the parsed value of *prop*, or None if it is not set.

        Raises :class:`~ecconfig.exceptions.UnknownValueError` if the stored
        value is not valid for *prop*.
        """
        return self.get_raw(prop).parse(prop)

    def insert_property(self, value: PropertyType) -> None:
        """Store a typed property value under its own key."""
        self[type(value).key] = RawValue(str(value))

    def try_insert(self, key: str | type, value: RawValue | str) -> bool:
        """Set *key* only if it is missing or has an empty value.

        Returns True if the map was changed.
        """
        key = _key_of(key)
        if not self.get_raw(key).is_unset():
            return False
        self[key] = value
        return True

    def iter_set(self) -> Iterator[tuple[str, RawValue]]:
        """Yield ``(key, value)`` pairs with non-empty values, oldest first."""
        for key, value in self._pairs.items():
            if not value.is_unset():
                yield key, value

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def apply_to(self, props: Properties) -> None:
        """Copy every set value into *props*, replacing what is there."""
        for key, value in self.iter_set():
            props[key] = value

    def use_fallbacks(self, legacy: bool = False) -> None:
        """Fill in ``indent_size`` and ``tab_width`` from each other.

        * ``indent_style = tab`` without an ``indent_size`` implies
          ``indent_size = tab`` (skipped when *legacy* is true, which
          mimics EditorConfig before 0.10.0).
        * ``indent_size = tab`` takes the value of ``tab_width`` if set.
        * A numeric ``indent_size`` supplies a missing ``tab_width``.

        A value set to the ``unset`` keyword counts as missing.
        """
        size_key, width_key = IndentSize.key, TabWidth.key

        if not legacy and self.get_raw(size_key).filter_unset().is_unset():
            style = self.get_raw(IndentStyle.key).filter_unset()
            if style.value.lower() == IndentStyle.TABS.value:
                self[size_key] = "tab"

        size = self.get_raw(size_key).filter_unset()
        width = self.get_raw(width_key).filter_unset()
        if size.value.lower() == "tab":
            if not width.is_unset():
                self[size_key] = width
        elif not size.is_unset() and width.is_unset():
            self[width_key] = size
