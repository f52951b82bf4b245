"""The Prefer and Preference-Applied headers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import ClassVar

from typedheaders.core import Header, InvalidHeader, make_value
from typedheaders.flat_csv import fmt_comma_delimited, from_comma_delimited

__all__ = ["Preference", "Prefer", "PreferenceApplied"]

_U32 = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1

_KNOWN = frozenset(
    {
        ("respond-async", ""),
        ("return", "representation"),
        ("return", "minimal"),
        ("handling", "strict"),
        ("handling", "lenient"),
    }
)


def _split_param(part: str) -> tuple[str, str]:
    name, sep, value = part.partition("=")
    if not sep:
        return name.strip(), ""
    return name.strip(), value.strip().strip('"')


def _parse_u32(text: str) -> int:
    if not _U32.fullmatch(text):
        raise InvalidHeader(f"invalid wait value: {text!r}")
    number = int(text)
    if number > _U32_MAX:
        raise InvalidHeader(f"wait value out of range: {text!r}")
    return number


@dataclass(frozen=True)
class Preference:
    """One preference: a name, an optional value and optional parameters.

    The well-known preferences are class attributes; ``wait`` builds the
    ``wait=<seconds>`` preference. Anything else is an extension, whose
    value is ``""`` when none was given.
    """

    name: str
    value: str = ""
    params: tuple[tuple[str, str], ...] = field(default=())

    RESPOND_ASYNC: ClassVar[Preference]
    RETURN_REPRESENTATION: ClassVar[Preference]
    RETURN_MINIMAL: ClassVar[Preference]
    HANDLING_STRICT: ClassVar[Preference]
    HANDLING_LENIENT: ClassVar[Preference]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple((str(k), str(v)) for k, v in self.params))

    @classmethod
    def wait(cls, seconds: int) -> Preference:
        """Create a ``wait=<seconds>`` preference."""
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise TypeError("wait seconds must be an int")
        if not 0 <= seconds <= _U32_MAX:
            raise ValueError(f"wait seconds out of range: {seconds}")
        return cls("wait", str(seconds))

    @property
    def wait_seconds(self) -> int | None:
        """The seconds of a ``wait`` preference, or None for any other."""
        if self.name == "wait" and _U32.fullmatch(self.value):
            return int(self.value)
        return None

    @property
    def is_extension(self) -> bool:
        """Whether this is not one of the well-known preferences."""
        if self.params:
            return True
        return (self.name, self.value) not in _KNOWN and self.wait_seconds is None

    @classmethod
    def parse(cls, text: str) -> Preference:
        """Parse ``token[=value]*(;param[=value])``, raising InvalidHeader when invalid.

        Well-known preferences may not carry parameters, and ``wait``
        needs a whole number of seconds.
        """
        parts = [_split_param(part) for part in text.split(";")]
        (name, value), rest = parts[0], tuple(parts[1:])
        if (name, value) in _KNOWN:
            if rest:
                raise InvalidHeader(f"{name} takes no parameters")
            return cls(name, value)
        if name == "wait":
            if rest:
                raise InvalidHeader("wait takes no parameters")
            return cls.wait(_parse_u32(value))
        return cls(name, value, rest)

    def without_params(self) -> Preference:
        """Return the same preference with its parameters dropped."""
        return Preference(self.name, self.value)

    def __str__(self) -> str:
        out = self.name
        if self.value:
            out += f"={self.value}"
        for key, val in self.params:
            out += f"; {key}"
            if val:
                out += f"={val}"
        return out


Preference.RESPOND_ASYNC = Preference("respond-async")
Preference.RETURN_REPRESENTATION = Preference("return", "representation")
Preference.RETURN_MINIMAL = Preference("return", "minimal")
Preference.HANDLING_STRICT = Preference("handling", "strict")
Preference.HANDLING_LENIENT = Preference("handling", "lenient")


def _decode_preferences(values: Iterable[bytes]) -> tuple[Preference, ...]:
    preferences = from_comma_delimited(values, Preference.parse)
    if not preferences:
        raise InvalidHeader("no preferences given")
    return tuple(preferences)


@dataclass(frozen=True)
class Prefer(Header):
    """The Prefer header: behaviours the client asks the server to use."""

    name: ClassVar[str] = "prefer"

    preferences: tuple[Preference, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferences", tuple(self.preferences))

    def __iter__(self) -> Iterator[Preference]:
        return iter(self.preferences)

    def __len__(self) -> int:
        return len(self.preferences)

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> Prefer:
        return cls(_decode_preferences(values))

    def encode(self) -> list[bytes]:
        return [make_value(str(self))]

    def __str__(self) -> str:
        return fmt_comma_delimited(self.preferences)


@dataclass(frozen=True)
class PreferenceApplied(Header):
    """The Preference-Applied header: which preferences the server honoured.

    Parameters of preferences are not written out.
    """

    name: ClassVar[str] = "preference-applied"

    preferences: tuple[Preference, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "preferences", tuple(self.preferences))

    def __iter__(self) -> Iterator[Preference]:
        return iter(self.preferences)

    def __len__(self) -> int:
        return len(self.preferences)

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> PreferenceApplied:
        return cls(_decode_preferences(values))

    def encode(self) -> list[bytes]:
        return [make_value(str(self))]

    def __str__(self) -> str:
        return fmt_comma_delimited(pref.without_params() for pref in self.preferences)