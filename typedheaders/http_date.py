"""HTTP timestamps: parsing all three HTTP-date formats, writing IMF-fixdate."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from typedheaders.core import InvalidHeader, just_one, make_value, value_str

__all__ = ["HttpDate"]

_SHORT_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_LONG_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MAX_TIMESTAMP = 253402300799  # 9999-12-31 23:59:59 UTC

_IMF_FIXDATE = re.compile(
    r"([A-Za-z]{3}), ([0-9]{2}) ([A-Za-z]{3}) ([0-9]{4}) ([0-9]{2}):([0-9]{2}):([0-9]{2}) GMT"
)
_RFC850 = re.compile(
    r"([A-Za-z]{6,9}), ([0-9]{2})-([A-Za-z]{3})-([0-9]{2}) ([0-9]{2}):([0-9]{2}):([0-9]{2}) GMT"
)
_ASCTIME = re.compile(
    r"([A-Za-z]{3}) ([A-Za-z]{3}) ([ 0-9][0-9]) ([0-9]{2}):([0-9]{2}):([0-9]{2}) ([0-9]{4})"
)


def _build(
    weekday: str,
    weekdays: tuple[str, ...],
    day: str,
    month: str,
    year: int,
    hour: str,
    minute: str,
    second: str,
) -> datetime:
    if month not in _MONTHS or weekday not in weekdays:
        raise InvalidHeader("invalid HTTP date")
    if not 1970 <= year <= 9999:
        raise InvalidHeader("HTTP date out of range")
    try:
        moment = datetime(
            year,
            _MONTHS.index(month) + 1,
            int(day.strip()),
            int(hour),
            int(minute),
            int(second),
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise InvalidHeader("invalid HTTP date") from exc
    if moment.weekday() != weekdays.index(weekday):
        raise InvalidHeader("weekday does not match date")
    return moment


def _parse_text(text: str) -> datetime:
    text = text.strip(" \t\r\n\f")
    match = _IMF_FIXDATE.fullmatch(text)
    if match:
        wday, day, mon, year, hour, minute, second = match.groups()
        return _build(wday, _SHORT_DAYS, day, mon, int(year), hour, minute, second)
    match = _RFC850.fullmatch(text)
    if match:
        wday, day, mon, year, hour, minute, second = match.groups()
        short_year = int(year)
        full_year = short_year + (2000 if short_year < 70 else 1900)
        return _build(wday, _LONG_DAYS, day, mon, full_year, hour, minute, second)
    match = _ASCTIME.fullmatch(text)
    if match:
        wday, mon, day, hour, minute, second, year = match.groups()
        if day.startswith(" ") and day == " 0":
            raise InvalidHeader("invalid HTTP date")
        return _build(wday, _SHORT_DAYS, day, mon, int(year), hour, minute, second)
    raise InvalidHeader(f"not an HTTP date: {text!r}")


@dataclass(frozen=True, order=True)
class HttpDate:
    """A whole-second UTC timestamp, stored as seconds since the Unix epoch."""

    timestamp: int

    def __post_init__(self) -> None:
        if not 0 <= self.timestamp <= _MAX_TIMESTAMP:
            raise ValueError(f"timestamp out of HTTP date range: {self.timestamp}")

    @classmethod
    def parse(cls, text: str) -> HttpDate:
        """Parse IMF-fixdate, RFC 850 or asctime text, raising InvalidHeader on failure."""
        return cls.from_datetime(_parse_text(text))

    @classmethod
    def from_value(cls, value: bytes) -> HttpDate | None:
        """Parse a raw header value, returning None if it is not a valid date."""
        text = value_str(value)
        if text is None:
            return None
        try:
            return cls.parse(text)
        except InvalidHeader:
            return None

    @classmethod
    def from_values(cls, values: Iterable[bytes]) -> HttpDate:
        """Decode exactly one raw value, raising InvalidHeader otherwise."""
        value = just_one(values)
        date = None if value is None else cls.from_value(value)
        if date is None:
            raise InvalidHeader("invalid HTTP date header")
        return date

    @classmethod
    def from_datetime(cls, moment: datetime) -> HttpDate:
        """Build from a timezone-aware datetime, dropping fractions of a second."""
        if moment.tzinfo is None or moment.utcoffset() is None:
            raise ValueError("an HTTP date needs a timezone-aware datetime")
        return cls((moment - _EPOCH) // timedelta(seconds=1))

    @classmethod
    def from_timestamp(cls, seconds: int) -> HttpDate:
        """Build from whole seconds since the Unix epoch."""
        return cls(int(seconds))

    def to_datetime(self) -> datetime:
        """Return the moment as a UTC datetime."""
        return _EPOCH + timedelta(seconds=self.timestamp)

    def to_value(self) -> bytes:
        """Return the raw header value in IMF-fixdate format."""
        return make_value(str(self))

    def __str__(self) -> str:
        moment = self.to_datetime()
        return (
            f"{_SHORT_DAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
            f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} GMT"
        )

    def __repr__(self) -> str:
        return f"HttpDate({str(self)!r})"