"""A whole number of seconds, as used by Max-Age style headers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta

from typedheaders.core import InvalidHeader, just_one, make_value, value_str

__all__ = ["Seconds"]

_DIGITS = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1


@dataclass(frozen=True, order=True)
class Seconds:
    """A non-negative count of whole seconds."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("seconds must be an int")
        if not 0 <= self.value <= _U64_MAX:
            raise ValueError(f"seconds out of range: {self.value}")

    @classmethod
    def from_value(cls, value: bytes) -> Seconds | None:
        """Parse a raw decimal value, returning None if it is not one."""
        text = value_str(value)
        if text is None or not _DIGITS.fullmatch(text):
            return None
        number = int(text)
        if number > _U64_MAX:
            return None
        return cls(number)

    @classmethod
    def from_values(cls, values: Iterable[bytes]) -> Seconds:
        """Decode exactly one raw value, raising InvalidHeader otherwise."""
        value = just_one(values)
        secs = None if value is None else cls.from_value(value)
        if secs is None:
            raise InvalidHeader("invalid seconds value")
        return secs

    @classmethod
    def from_timedelta(cls, duration: timedelta) -> Seconds:
        """Build from a duration of whole seconds."""
        if duration.microseconds:
            raise ValueError("duration must be a whole number of seconds")
        return cls(duration.days * 86400 + duration.seconds)

    def to_timedelta(self) -> timedelta:
        """Return the count as a duration."""
        return timedelta(seconds=self.value)

    def to_value(self) -> bytes:
        """Return the raw decimal header value."""
        return make_value(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.value}s"