"""The Strict-Transport-Security (HSTS) header."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from typedheaders.core import Header, InvalidHeader, just_one, make_value, value_str
from typedheaders.seconds import Seconds

__all__ = ["StrictTransportSecurity"]

_WS = " \t\r\n\x0b\x0c"


@dataclass(frozen=True)
class StrictTransportSecurity(Header):
    """Declares that a host must only be reached over secure connections.

    Build it with ``including_subdomains`` or ``excluding_subdomains`` so the
    choice about subdomains is always explicit.
    """

    name: ClassVar[str] = "strict-transport-security"

    _max_age: Seconds
    _include_subdomains: bool

    @classmethod
    def including_subdomains(cls, max_age: timedelta) -> StrictTransportSecurity:
        """Create a policy that also covers subdomains."""
        return cls(Seconds.from_timedelta(max_age), True)

    @classmethod
    def excluding_subdomains(cls, max_age: timedelta) -> StrictTransportSecurity:
        """Create a policy that does not cover subdomains."""
        return cls(Seconds.from_timedelta(max_age), False)

    def include_subdomains(self) -> bool:
        """Whether the policy covers subdomains."""
        return self._include_subdomains

    def max_age(self) -> timedelta:
        """How long the host is to be regarded as a known HSTS host."""
        return self._max_age.to_timedelta()

    @classmethod
    def _from_text(cls, text: str) -> StrictTransportSecurity:
        max_age: Seconds | None = None
        include = False
        for raw in text.split(";"):
            directive = raw.strip(_WS)
            if directive.lower() == "includesubdomains":
                if include:
                    raise InvalidHeader("duplicate includeSubdomains directive")
                include = True
                continue
            key, sep, rest = directive.partition("=")
            if not sep or key.strip(_WS).lower() != "max-age":
                continue
            secs = Seconds.from_value(rest.strip(_WS).strip('"').encode("utf-8"))
            if secs is None:
                raise InvalidHeader("invalid max-age directive")
            if max_age is not None:
                raise InvalidHeader("duplicate max-age directive")
            max_age = secs
        if max_age is None:
            raise InvalidHeader("missing max-age directive")
        return cls(max_age, include)

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> StrictTransportSecurity:
        value = just_one(values)
        text = None if value is None else value_str(value)
        if text is None:
            raise InvalidHeader("expected exactly one text value")
        return cls._from_text(text)

    def encode(self) -> list[bytes]:
        if self._include_subdomains:
            return [make_value(f"max-age={self._max_age}; includeSubdomains")]
        return [make_value(f"max-age={self._max_age}")]

    def __repr__(self) -> str:
        return (
            f"StrictTransportSecurity(max_age={self._max_age!r}, "
            f"include_subdomains={self._include_subdomains})"
        )