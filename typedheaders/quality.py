"""Quality values (``q=`` weights) attached to items of list headers."""

from __future__ import annotations

import re
import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from typedheaders.core import InvalidHeader

__all__ = ["Quality", "QualityValue", "q"]

T = TypeVar("T")

_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _f32(number: float) -> float:
    """Round ``number`` to single precision."""
    return struct.unpack("<f", struct.pack("<f", number))[0]


@dataclass(frozen=True, order=True)
class Quality:
    """A weight between 0 and 1 with three decimals, stored as 0 to 1000."""

    value: int = 1000

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("a quality is an int from 0 to 1000")
        if not 0 <= self.value <= 1000:
            raise ValueError(f"quality out of range: {self.value}")

    @classmethod
    def _from_float(cls, number: float) -> Quality:
        return cls(int(_f32(_f32(number) * 1000.0)))


@dataclass(frozen=True, eq=True)
class QualityValue(Generic[T]):
    """An item with a quality; ordering compares the qualities only."""

    value: T
    quality: Quality = field(default_factory=Quality)

    def __lt__(self, other: QualityValue[Any]) -> bool:
        if not isinstance(other, QualityValue):
            return NotImplemented
        return self.quality < other.quality

    def __le__(self, other: QualityValue[Any]) -> bool:
        if not isinstance(other, QualityValue):
            return NotImplemented
        return self.quality <= other.quality

    def __gt__(self, other: QualityValue[Any]) -> bool:
        if not isinstance(other, QualityValue):
            return NotImplemented
        return self.quality > other.quality

    def __ge__(self, other: QualityValue[Any]) -> bool:
        if not isinstance(other, QualityValue):
            return NotImplemented
        return self.quality >= other.quality

    @classmethod
    def parse(
        cls, text: str, parse_item: Callable[[str], Any] = str
    ) -> QualityValue[Any]:
        """Parse ``item[; q=weight]``, raising InvalidHeader on a bad item or weight."""
        raw_item = text
        quality = 1.0
        head, sep, tail = text.rpartition(";")
        if sep:
            weight = tail.strip()
            if len(weight.encode("utf-8")) < 2:
                raise InvalidHeader("quality part too short")
            if weight.startswith(("q=", "Q=")):
                q_part = weight[2:]
                if len(q_part.encode("utf-8")) > 5:
                    raise InvalidHeader("quality part too long")
                if not _FLOAT.fullmatch(q_part):
                    raise InvalidHeader(f"invalid quality: {q_part!r}")
                number = float(q_part)
                if not 0.0 <= number <= 1.0:
                    raise InvalidHeader(f"quality out of range: {q_part!r}")
                quality = number
                raw_item = head.strip()
        try:
            item = parse_item(raw_item)
        except ValueError as exc:
            raise InvalidHeader(f"invalid item: {raw_item!r}") from exc
        return cls(item, Quality._from_float(quality))

    def __str__(self) -> str:
        weight = self.quality.value
        if weight == 1000:
            return str(self.value)
        if weight == 0:
            return f"{self.value}; q=0"
        return f"{self.value}; q=0.{f'{weight:03d}'.rstrip('0')}"


def q(value: int | float) -> Quality:
    """Make a Quality from an int in 0..1000 or a float in 0.0..1.0.

    Raises ValueError when the value is out of range.
    """
    if isinstance(value, bool):
        raise TypeError("a bool is not a quality")
    if isinstance(value, int):
        if not 0 <= value <= 1000:
            raise ValueError("int quality must be between 0 and 1000")
        return Quality(value)
    if isinstance(value, float):
        if not 0.0 <= value <= 1.0:
            raise ValueError("float quality must be between 0.0 and 1.0")
        return Quality._from_float(value)
    raise TypeError(f"cannot make a quality from {type(value).__name__}")