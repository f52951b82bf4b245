"""Simple typed headers: TE, Transfer-Encoding, Upgrade, User-Agent and Vary."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from typedheaders.core import Header, InvalidHeader, make_value, value_str
from typedheaders.flat_csv import FlatCsv
from typedheaders.value_string import HeaderValueString

__all__ = ["Te", "TransferEncoding", "Upgrade", "InvalidUserAgent", "UserAgent", "Vary"]


@dataclass(frozen=True)
class Te(Header):
    """The TE header: transfer codings the client accepts besides chunked."""

    name: ClassVar[str] = "te"

    csv: FlatCsv

    @classmethod
    def trailers(cls) -> Te:
        """Create a ``TE: trailers`` header."""
        return cls(FlatCsv(b"trailers"))

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> Te:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[bytes]:
        return [self.csv.to_value()]


@dataclass(frozen=True)
class TransferEncoding(Header):
    """The Transfer-Encoding header: codings applied to the payload body."""

    name: ClassVar[str] = "transfer-encoding"

    csv: FlatCsv

    @classmethod
    def chunked(cls) -> TransferEncoding:
        """Create a ``Transfer-Encoding: chunked`` header."""
        return cls(FlatCsv(b"chunked"))

    def is_chunked(self) -> bool:
        """Whether the last coding applied is ``chunked``."""
        text = value_str(self.csv.to_value())
        if text is None:
            return False
        return text.split(",")[-1].strip() == "chunked"

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> TransferEncoding:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[bytes]:
        return [self.csv.to_value()]


@dataclass(frozen=True)
class Upgrade(Header):
    """The Upgrade header: protocols the sender would like to switch to."""

    name: ClassVar[str] = "upgrade"

    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", make_value(self.value))

    @classmethod
    def websocket(cls) -> Upgrade:
        """Create an ``Upgrade: websocket`` header."""
        return cls(b"websocket")

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> Upgrade:
        first = next(iter(values), None)
        if first is None:
            raise InvalidHeader("missing Upgrade value")
        return cls(first)

    def encode(self) -> list[bytes]:
        return [self.value]


class InvalidUserAgent(ValueError):
    """Raised when text is not a legal User-Agent value."""

    def __init__(self, message: str = "InvalidUserAgent") -> None:
        super().__init__(message)


@dataclass(frozen=True, order=True)
class UserAgent(Header):
    """The User-Agent header, kept as unsplit text."""

    name: ClassVar[str] = "user-agent"

    value: HeaderValueString

    @classmethod
    def parse(cls, text: str) -> UserAgent:
        """Build from text, raising InvalidUserAgent if it is not a legal value."""
        try:
            return cls(HeaderValueString.from_str(text))
        except InvalidHeader as exc:
            raise InvalidUserAgent() from exc

    def as_str(self) -> str:
        """Return the agent string."""
        return str(self.value)

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> UserAgent:
        return cls(HeaderValueString.from_values(values))

    def encode(self) -> list[bytes]:
        return [self.value.to_value()]


@dataclass(frozen=True)
class Vary(Header):
    """The Vary header: ``*`` or a list of request header names."""

    name: ClassVar[str] = "vary"

    csv: FlatCsv

    @classmethod
    def any(cls) -> Vary:
        """Create a ``Vary: *`` header."""
        return cls(FlatCsv(b"*"))

    def is_any(self) -> bool:
        """Whether the list includes ``*``."""
        return any(item == "*" for item in self.csv)

    def iter_strs(self) -> Iterator[str]:
        """Iterate the header names listed."""
        return iter(self.csv)

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> Vary:
        return cls(FlatCsv.from_values(values))

    def encode(self) -> list[bytes]:
        return [self.csv.to_value()]