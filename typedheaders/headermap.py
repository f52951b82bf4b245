"""A multi-valued, case-insensitive header map with typed access."""

from __future__ import annotations

import string
from collections.abc import Iterator
from typing import TypeVar

from typedheaders.core import Header, InvalidHeader, make_value

__all__ = ["HeaderMap"]

H = TypeVar("H", bound=Header)

_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


def _normalize_name(name: str) -> str:
    if not isinstance(name, str) or not name or not set(name) <= _TOKEN_CHARS:
        raise ValueError(f"invalid header name: {name!r}")
    return name.lower()


class HeaderMap:
    """Header names mapped to one or more raw values, in insertion order.

    Names are case-insensitive; ``len`` counts values, not names, and
    iteration yields ``(name, value)`` pairs.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[bytes]] = {}

    def append(self, name: str, value: bytes | str | int) -> None:
        """Add a value under ``name``, keeping any existing values."""
        self._entries.setdefault(_normalize_name(name), []).append(make_value(value))

    def insert(self, name: str, value: bytes | str | int) -> None:
        """Set ``name`` to exactly one value, dropping any existing values."""
        self._entries[_normalize_name(name)] = [make_value(value)]

    def get(self, name: str) -> bytes | None:
        """Return the first value under ``name``, or None."""
        values = self._entries.get(_normalize_name(name))
        return values[0] if values else None

    def get_all(self, name: str) -> list[bytes]:
        """Return every value under ``name``, in order."""
        return list(self._entries.get(_normalize_name(name), ()))

    def remove(self, name: str) -> bytes | None:
        """Remove all values under ``name`` and return the first, or None."""
        values = self._entries.pop(_normalize_name(name), None)
        return values[0] if values else None

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            return _normalize_name(name) in self._entries
        except ValueError:
            return False

    def __len__(self) -> int:
        return sum(len(values) for values in self._entries.values())

    def __iter__(self) -> Iterator[tuple[str, bytes]]:
        for name, values in self._entries.items():
            for value in values:
                yield name, value

    def __repr__(self) -> str:
        return f"HeaderMap({list(self)!r})"

    def typed_insert(self, header: Header) -> None:
        """Store a typed header, replacing any values already under its name.

        If the header encodes to no values at all, the map is left unchanged.
        """
        name = type(header).name
        for index, value in enumerate(header.encode()):
            if index == 0:
                self.insert(name, value)
            else:
                self.append(name, value)

    def typed_get(self, header_type: type[H]) -> H | None:
        """Decode the header if present; None if missing or invalid."""
        try:
            return self.typed_try_get(header_type)
        except InvalidHeader:
            return None

    def typed_try_get(self, header_type: type[H]) -> H | None:
        """Decode the header if present; None if missing, InvalidHeader if invalid."""
        values = self.get_all(header_type.name)
        if not values:
            return None
        return header_type.decode(iter(values))