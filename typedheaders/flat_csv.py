"""A single header value holding a separator-delimited list, plus list helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

from typedheaders.core import InvalidHeader, make_value, value_str

__all__ = ["FlatCsv", "from_comma_delimited", "fmt_comma_delimited"]

T = TypeVar("T")

_SEPARATORS = (",", ";")


@dataclass(frozen=True)
class FlatCsv:
    """One raw header value whose items are split by ``separator``.

    Separators inside double quotes do not split items.
    """

    value: bytes
    separator: str = ","

    def __init__(self, value: bytes | str, separator: str = ",") -> None:
        if separator not in _SEPARATORS:
            raise ValueError(f"unsupported separator: {separator!r}")
        object.__setattr__(self, "value", make_value(value))
        object.__setattr__(self, "separator", separator)

    @classmethod
    def from_values(cls, values: Iterable[bytes | str], separator: str = ",") -> FlatCsv:
        """Merge several raw values into one, joined by the separator and a space."""
        joiner = (separator + " ").encode("ascii")
        return cls(joiner.join(make_value(value) for value in values), separator)

    def __iter__(self) -> Iterator[str]:
        text = value_str(self.value)
        if text is None:
            return
        in_quotes = False
        start = 0
        for index, char in enumerate(text):
            if in_quotes:
                if char == '"':
                    in_quotes = False
            elif char == self.separator:
                yield text[start:index].strip()
                start = index + 1
            elif char == '"':
                in_quotes = True
        yield text[start:].strip()

    def to_value(self) -> bytes:
        """Return the merged raw value."""
        return self.value


def from_comma_delimited(values: Iterable[bytes], parse: Callable[[str], T]) -> list[T]:
    """Parse every non-empty comma-separated item of the text values.

    Values that are not visible ASCII are skipped; an item that ``parse``
    rejects with ValueError raises InvalidHeader.
    """
    items: list[T] = []
    for value in values:
        text = value_str(value)
        if text is None:
            continue
        for part in text.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                items.append(parse(part))
            except ValueError as exc:
                raise InvalidHeader(f"invalid list item: {part!r}") from exc
    return items


def fmt_comma_delimited(items: Iterable[Any]) -> str:
    """Join the string forms of ``items`` with ", "."""
    return ", ".join(str(item) for item in items)