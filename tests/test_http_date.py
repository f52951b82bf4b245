from datetime import datetime, timezone

import pytest

from typedheaders.core import InvalidHeader
from typedheaders.http_date import HttpDate


def nov_07():
    return HttpDate.from_timestamp(784198117)


def test_display_is_imf_fixdate():
    assert str(nov_07()) == "Mon, 07 Nov 1994 08:48:37 GMT"


def test_imf_fixdate():
    assert HttpDate.parse("Mon, 07 Nov 1994 08:48:37 GMT") == nov_07()


def test_rfc_850():
    assert HttpDate.parse("Monday, 07-Nov-94 08:48:37 GMT") == nov_07()


def test_asctime():
    assert HttpDate.parse("Mon Nov  7 08:48:37 1994") == nov_07()


def test_no_date():
    with pytest.raises(InvalidHeader):
        HttpDate.parse("this-is-no-date")


def test_wrong_weekday_rejected():
    with pytest.raises(InvalidHeader):
        HttpDate.parse("Sun, 07 Nov 1994 08:48:37 GMT")


def test_impossible_day_rejected():
    with pytest.raises(InvalidHeader):
        HttpDate.parse("Mon, 31 Nov 1994 08:48:37 GMT")


def test_to_value_and_back():
    date = nov_07()
    assert date.to_value() == b"Mon, 07 Nov 1994 08:48:37 GMT"
    assert HttpDate.from_value(date.to_value()) == date
    assert HttpDate.from_values([date.to_value()]) == date


def test_from_value_invalid_is_none():
    assert HttpDate.from_value(b"this-is-no-date") is None


def test_from_values_rejects_multiple():
    value = nov_07().to_value()
    with pytest.raises(InvalidHeader):
        HttpDate.from_values([value, value])
    with pytest.raises(InvalidHeader):
        HttpDate.from_values([])


def test_datetime_round_trip_truncates():
    moment = datetime(1994, 11, 7, 8, 48, 37, 999999, tzinfo=timezone.utc)
    date = HttpDate.from_datetime(moment)
    assert date == nov_07()
    assert date.to_datetime() == moment.replace(microsecond=0)


def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        HttpDate.from_datetime(datetime(1994, 11, 7))


def test_ordering():
    assert HttpDate.from_timestamp(0) < nov_07()
    assert str(HttpDate.from_timestamp(0)) == "Thu, 01 Jan 1970 00:00:00 GMT"