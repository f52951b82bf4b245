"""Shared building blocks: the header error, the typed-header base and value helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar, TypeVar

__all__ = ["InvalidHeader", "Header", "just_one", "make_value", "value_str"]

T = TypeVar("T")
H = TypeVar("H", bound="Header")


class InvalidHeader(ValueError):
    """Raised when header values cannot be decoded or built."""

    def __init__(self, message: str = "invalid HTTP header") -> None:
        super().__init__(message)


class Header(ABC):
    """A typed HTTP header.

    Subclasses set ``name`` to the lower-case header field name, decode a
    typed value from the raw values found under that name, and encode
    themselves back into raw values.
    """

    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def decode(cls: type[H], values: Iterable[bytes]) -> H:
        """Build the header from raw values, raising InvalidHeader on failure."""

    @abstractmethod
    def encode(self) -> Iterable[bytes]:
        """Return the raw values that represent this header."""


def just_one(values: Iterable[T]) -> T | None:
    """Return the only item of ``values``, or None if there are zero or several."""
    iterator = iter(values)
    sentinel = object()
    first = next(iterator, sentinel)
    if first is sentinel:
        return None
    if next(iterator, sentinel) is not sentinel:
        return None
    return first  # type: ignore[return-value]


def _is_valid_byte(byte: int) -> bool:
    return byte == 0x09 or (byte >= 0x20 and byte != 0x7F)


def make_value(value: bytes | bytearray | str | int) -> bytes:
    """Turn ``value`` into a validated raw header value.

    Strings are encoded as UTF-8 and integers are written in decimal.
    Control characters other than tab are rejected with InvalidHeader.
    """
    if isinstance(value, bool):
        raise TypeError("a bool is not a header value")
    if isinstance(value, int):
        raw = str(value).encode("ascii")
    elif isinstance(value, str):
        raw = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raise TypeError(f"cannot make a header value from {type(value).__name__}")
    if not all(_is_valid_byte(byte) for byte in raw):
        raise InvalidHeader(f"illegal header value: {raw!r}")
    return raw


def value_str(value: bytes) -> str | None:
    """Return ``value`` as text if it is visible ASCII (or tab), else None."""
    if all(byte == 0x09 or 0x20 <= byte < 0x7F for byte in value):
        return value.decode("ascii")
    return None