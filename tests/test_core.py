import pytest

from typedheaders.core import Header, InvalidHeader, just_one, make_value, value_str


class Dnt(Header):
    name = "dnt"

    def __init__(self, enabled):
        self.enabled = enabled

    @classmethod
    def decode(cls, values):
        value = just_one(values)
        if value is None:
            raise InvalidHeader()
        if value == b"0":
            return cls(False)
        if value == b"1":
            return cls(True)
        raise InvalidHeader()

    def encode(self):
        return [make_value("1" if self.enabled else "0")]


def test_just_one_single():
    assert just_one([b"a"]) == b"a"


def test_just_one_empty():
    assert just_one([]) is None


def test_just_one_many():
    assert just_one(iter([b"a", b"b"])) is None


def test_make_value_from_str():
    assert make_value("websocket") == b"websocket"


def test_make_value_from_int():
    assert make_value(31536000) == b"31536000"


def test_make_value_keeps_tab_and_obs_text():
    raw = b"a\tb\xc3\xa9"
    assert make_value(raw) == raw


@pytest.mark.parametrize("raw", [b"a\nb", b"\x00", b"x\x7f", "line\r"])
def test_make_value_rejects_control_chars(raw):
    with pytest.raises(InvalidHeader):
        make_value(raw)


def test_make_value_rejects_bool():
    with pytest.raises(TypeError):
        make_value(True)


def test_value_str_ascii():
    assert value_str(b"gzip, chunked") == "gzip, chunked"


def test_value_str_non_ascii_is_none():
    assert value_str("caf\u00e9".encode("utf-8")) is None


def test_invalid_header_is_value_error():
    with pytest.raises(ValueError):
        make_value(b"bad\nvalue")


def test_custom_header_decode_and_encode():
    assert Dnt.decode([make_value("1")]).enabled is True
    assert Dnt.decode([make_value("0")]).enabled is False
    assert just_one(Dnt(True).encode()) == b"1"


def test_custom_header_decode_invalid():
    with pytest.raises(InvalidHeader):
        Dnt.decode([make_value("maybe")])
    with pytest.raises(InvalidHeader):
        Dnt.decode([make_value("1"), make_value("0")])


def test_header_round_trip():
    for enabled in (True, False):
        encoded = just_one(Dnt(enabled).encode())
        assert Dnt.decode([make_value(encoded)]).enabled is enabled