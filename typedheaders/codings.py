"""Character sets and content/transfer encodings named in headers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from typedheaders.core import InvalidHeader

__all__ = ["Charset", "Encoding"]


def _ascii_upper(text: str) -> str:
    return "".join(char.upper() if char.isascii() else char for char in text)


class Charset(Enum):
    """A MIME charset; its string form is the registered name."""

    US_ASCII = "US-ASCII"
    ISO_8859_1 = "ISO-8859-1"
    ISO_8859_2 = "ISO-8859-2"
    ISO_8859_3 = "ISO-8859-3"
    ISO_8859_4 = "ISO-8859-4"
    ISO_8859_5 = "ISO-8859-5"
    ISO_8859_6 = "ISO-8859-6"
    ISO_8859_7 = "ISO-8859-7"
    ISO_8859_8 = "ISO-8859-8"
    ISO_8859_9 = "ISO-8859-9"
    ISO_8859_10 = "ISO-8859-10"
    SHIFT_JIS = "Shift-JIS"
    EUC_JP = "EUC-JP"
    ISO_2022_KR = "ISO-2022-KR"
    EUC_KR = "EUC-KR"
    ISO_2022_JP = "ISO-2022-JP"
    ISO_2022_JP_2 = "ISO-2022-JP-2"
    ISO_8859_6_E = "ISO-8859-6-E"
    ISO_8859_6_I = "ISO-8859-6-I"
    ISO_8859_8_E = "ISO-8859-8-E"
    ISO_8859_8_I = "ISO-8859-8-I"
    GB_2312 = "GB2312"
    BIG_5 = "5"
    KOI8_R = "KOI8-R"

    @classmethod
    def parse(cls, text: str) -> Charset:
        """Look up a charset by name, ignoring ASCII case."""
        wanted = _ascii_upper(text)
        for member in cls:
            if member.value.upper() == wanted:
                return member
        raise InvalidHeader(f"unknown charset: {text!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Encoding:
    """A coding used in Transfer-Encoding or Accept-Encoding.

    The well-known codings are available as class attributes; any other
    token is kept as it is.
    """

    token: str

    CHUNKED: ClassVar[Encoding]
    BROTLI: ClassVar[Encoding]
    GZIP: ClassVar[Encoding]
    DEFLATE: ClassVar[Encoding]
    COMPRESS: ClassVar[Encoding]
    IDENTITY: ClassVar[Encoding]
    TRAILERS: ClassVar[Encoding]

    @classmethod
    def parse(cls, text: str) -> Encoding:
        """Build from a token; never fails, and matching is case-sensitive."""
        return cls(text)

    @property
    def is_extension(self) -> bool:
        """Whether this is not one of the well-known codings."""
        return self.token not in _KNOWN

    def __str__(self) -> str:
        return self.token


Encoding.CHUNKED = Encoding("chunked")
Encoding.BROTLI = Encoding("br")
Encoding.GZIP = Encoding("gzip")
Encoding.DEFLATE = Encoding("deflate")
Encoding.COMPRESS = Encoding("compress")
Encoding.IDENTITY = Encoding("identity")
Encoding.TRAILERS = Encoding("trailers")

_KNOWN = frozenset({"chunked", "br", "gzip", "deflate", "compress", "identity", "trailers"})