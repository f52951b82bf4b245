import pytest

from typedheaders.codings import Charset, Encoding
from typedheaders.core import InvalidHeader


def test_charset_parse():
    assert Charset.parse("us-ascii") is Charset.US_ASCII
    assert Charset.parse("US-Ascii") is Charset.US_ASCII
    assert Charset.parse("US-ASCII") is Charset.US_ASCII
    assert Charset.parse("Shift-JIS") is Charset.SHIFT_JIS


def test_charset_parse_unknown():
    with pytest.raises(InvalidHeader):
        Charset.parse("abcd")


def test_charset_display():
    assert str(Charset.parse("us-ascii")) == "US-ASCII"


@pytest.mark.parametrize("charset", list(Charset))
def test_charset_round_trip(charset):
    assert Charset.parse(str(charset)) is charset


def test_charset_big5_name():
    assert str(Charset.BIG_5) == "5"
    assert Charset.parse("5") is Charset.BIG_5


@pytest.mark.parametrize(
    "text, expected",
    [
        ("chunked", Encoding.CHUNKED),
        ("br", Encoding.BROTLI),
        ("gzip", Encoding.GZIP),
        ("deflate", Encoding.DEFLATE),
        ("compress", Encoding.COMPRESS),
        ("identity", Encoding.IDENTITY),
        ("trailers", Encoding.TRAILERS),
    ],
)
def test_encoding_known(text, expected):
    parsed = Encoding.parse(text)
    assert parsed == expected
    assert parsed.is_extension is False
    assert str(parsed) == text


def test_encoding_extension():
    parsed = Encoding.parse("x-custom")
    assert parsed.is_extension is True
    assert str(parsed) == "x-custom"


def test_encoding_case_sensitive():
    assert Encoding.parse("GZIP").is_extension is True
    assert Encoding.parse("GZIP") != Encoding.GZIP