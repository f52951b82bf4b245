"""The Warning header."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from typedheaders.core import Header, InvalidHeader, just_one, make_value, value_str
from typedheaders.http_date import HttpDate

__all__ = ["WarningHeader"]

_U16 = re.compile(r"\+?[0-9]+")
_U16_MAX = 2**16 - 1


def _parse_code(text: str) -> int:
    if not _U16.fullmatch(text):
        raise InvalidHeader(f"invalid warn code: {text!r}")
    code = int(text)
    if code > _U16_MAX:
        raise InvalidHeader(f"warn code out of range: {text!r}")
    return code


@dataclass(frozen=True)
class WarningHeader(Header):
    """Extra information about a message: code, agent, text and optional date."""

    name: ClassVar[str] = "warning"

    code: int
    agent: str
    text: str
    date: HttpDate | None = None

    @classmethod
    def parse(cls, text: str) -> WarningHeader:
        """Parse ``code agent "text" ["date"]``, raising InvalidHeader when invalid.

        A date that cannot be parsed is left out rather than rejected.
        """
        words = text.split()
        if len(words) < 2:
            raise InvalidHeader("warning needs a code and an agent")
        code = _parse_code(words[0])
        agent = words[1]
        quoted = text.split('"')[1:]
        if not quoted:
            raise InvalidHeader("warning needs a quoted text")
        date = None
        if len(quoted) > 2:
            try:
                date = HttpDate.parse(quoted[2])
            except InvalidHeader:
                date = None
        return cls(code, agent, quoted[0], date)

    def __str__(self) -> str:
        out = f'{self.code:03d} {self.agent} "{self.text}"'
        if self.date is not None:
            out += f' "{self.date}"'
        return out

    @classmethod
    def decode(cls, values: Iterable[bytes]) -> WarningHeader:
        value = just_one(values)
        text = None if value is None else value_str(value)
        if text is None:
            raise InvalidHeader("expected exactly one text value")
        return cls.parse(text)

    def encode(self) -> list[bytes]:
        return [make_value(str(self))]