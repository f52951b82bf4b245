import pytest

from typedheaders.core import InvalidHeader
from typedheaders.quality import Quality, QualityValue, q


def test_fmt_q_1():
    assert str(QualityValue("foo")) == "foo"


def test_fmt_q_0001():
    assert str(QualityValue("foo", Quality(1))) == "foo; q=0.001"


def test_fmt_q_05():
    assert str(QualityValue("foo", Quality(500))) == "foo; q=0.5"


def test_fmt_q_0():
    assert str(QualityValue("foo", Quality(0))) == "foo; q=0"


def test_from_str1():
    assert QualityValue.parse("chunked") == QualityValue("chunked", Quality(1000))


def test_from_str2():
    assert QualityValue.parse("chunked; q=1") == QualityValue("chunked", Quality(1000))


def test_from_str3():
    assert QualityValue.parse("gzip; q=0.5") == QualityValue("gzip", Quality(500))


def test_from_str4():
    assert QualityValue.parse("gzip; q=0.273") == QualityValue("gzip", Quality(273))


def test_from_str5():
    with pytest.raises(InvalidHeader):
        QualityValue.parse("gzip; q=0.2739999")


def test_from_str6():
    with pytest.raises(InvalidHeader):
        QualityValue.parse("gzip; q=2")


def test_ordering():
    x = QualityValue.parse("gzip; q=0.5")
    y = QualityValue.parse("gzip; q=0.273")
    assert x > y
    assert y < x


def test_quality():
    assert q(0.5) == Quality(500)


def test_quality_int():
    assert q(532) == Quality(532)


def test_quality_invalid():
    with pytest.raises(ValueError):
        q(-1.0)


def test_quality_invalid2():
    with pytest.raises(ValueError):
        q(2.0)


def test_quality_int_invalid():
    with pytest.raises(ValueError):
        q(1001)


def test_fuzzing_bugs():
    with pytest.raises(InvalidHeader):
        QualityValue.parse("99999;")
    parsed = QualityValue.parse("\x0d;;;=\ud6aa==")
    assert parsed.value == "\x0d;;;=\ud6aa=="
    assert parsed.quality == Quality(1000)


def test_parse_item_error_raises():
    with pytest.raises(InvalidHeader):
        QualityValue.parse("abc; q=0.5", int)


def test_parse_item_converter():
    parsed = QualityValue.parse("42;q=0.8", int)
    assert parsed == QualityValue(42, Quality(800))


def test_round_trip():
    original = QualityValue("text/html", Quality(250))
    assert QualityValue.parse(str(original)) == original


def test_default_quality():
    assert Quality() == Quality(1000)