import pytest

from typedheaders.core import Header, InvalidHeader
from typedheaders.headermap import HeaderMap


class Dnt(Header):
    name = "dnt"

    def __init__(self, enabled):
        self.enabled = enabled

    @classmethod
    def decode(cls, values):
        value = next(iter(values), None)
        if value == b"0":
            return cls(False)
        if value == b"1":
            return cls(True)
        raise InvalidHeader()

    def encode(self):
        return [b"1" if self.enabled else b"0"]


class Multi(Header):
    name = "x-multi"

    def __init__(self, items):
        self.items = list(items)

    @classmethod
    def decode(cls, values):
        return cls(values)

    def encode(self):
        return list(self.items)


def test_append_and_get_all():
    headers = HeaderMap()
    headers.append("Vary", "gzip")
    headers.append("vary", "chunked")
    assert headers.get_all("VARY") == [b"gzip", b"chunked"]
    assert headers.get("vary") == b"gzip"
    assert len(headers) == 2


def test_insert_replaces():
    headers = HeaderMap()
    headers.append("te", "trailers")
    headers.append("te", "deflate")
    headers.insert("TE", "trailers")
    assert headers.get_all("te") == [b"trailers"]


def test_contains_and_remove():
    headers = HeaderMap()
    headers.append("Upgrade", "websocket")
    assert "upgrade" in headers
    assert headers.remove("UPGRADE") == b"websocket"
    assert "upgrade" not in headers
    assert headers.remove("upgrade") is None
    assert headers.get("upgrade") is None


def test_iter_yields_pairs_in_order():
    headers = HeaderMap()
    headers.append("A", "1")
    headers.append("B", "2")
    headers.append("a", "3")
    assert list(headers) == [("a", b"1"), ("a", b"3"), ("b", b"2")]


def test_invalid_name_rejected():
    headers = HeaderMap()
    with pytest.raises(ValueError):
        headers.append("bad name", "x")


def test_invalid_value_rejected():
    headers = HeaderMap()
    with pytest.raises(InvalidHeader):
        headers.insert("dnt", "1\n")


def test_typed_insert_and_get():
    headers = HeaderMap()
    headers.typed_insert(Dnt(True))
    assert headers.get_all("DNT") == [b"1"]
    assert headers.typed_get(Dnt).enabled is True


def test_typed_insert_replaces_existing():
    headers = HeaderMap()
    headers.append("dnt", "0")
    headers.append("dnt", "garbage")
    headers.typed_insert(Dnt(True))
    assert headers.get_all("dnt") == [b"1"]


def test_typed_insert_multiple_values_appends():
    headers = HeaderMap()
    headers.append("x-multi", "old")
    headers.typed_insert(Multi([b"gzip", b"chunked"]))
    assert headers.get_all("x-multi") == [b"gzip", b"chunked"]


def test_typed_insert_no_values_keeps_existing():
    headers = HeaderMap()
    headers.append("x-multi", "old")
    headers.typed_insert(Multi([]))
    assert headers.get_all("x-multi") == [b"old"]


def test_typed_get_missing():
    headers = HeaderMap()
    assert headers.typed_get(Dnt) is None
    assert headers.typed_try_get(Dnt) is None


def test_typed_get_invalid():
    headers = HeaderMap()
    headers.insert("dnt", "maybe")
    assert headers.typed_get(Dnt) is None
    with pytest.raises(InvalidHeader):
        headers.typed_try_get(Dnt)


def test_typed_round_trip_multi():
    headers = HeaderMap()
    headers.typed_insert(Multi([b"a", b"b"]))
    assert headers.typed_get(Multi).items == [b"a", b"b"]