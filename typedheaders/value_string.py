"""A header value that is also valid text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from typedheaders.core import InvalidHeader, just_one, make_value, value_str

__all__ = ["HeaderValueString"]


@dataclass(frozen=True, order=True)
class HeaderValueString:
    """Text that is guaranteed to be a legal header value."""

    text: str

    def __post_init__(self) -> None:
        make_value(self.text)

    @classmethod
    def from_value(cls, value: bytes) -> HeaderValueString:
        """Accept a raw value made of visible ASCII, raising InvalidHeader otherwise."""
        text = value_str(value)
        if text is None:
            raise InvalidHeader("header value is not visible ASCII")
        return cls(text)

    @classmethod
    def from_values(cls, values: Iterable[bytes]) -> HeaderValueString:
        """Decode exactly one raw value, raising InvalidHeader otherwise."""
        value = just_one(values)
        if value is None:
            raise InvalidHeader("expected exactly one header value")
        return cls.from_value(value)

    @classmethod
    def from_str(cls, text: str) -> HeaderValueString:
        """Accept any text without control characters, raising InvalidHeader otherwise."""
        return cls(text)

    def to_value(self) -> bytes:
        """Return the raw header value."""
        return make_value(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return repr(self.text)