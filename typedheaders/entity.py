"""Entity tags and entity-tag ranges as used by ETag and conditional headers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from typedheaders.core import InvalidHeader, just_one, make_value
from typedheaders.flat_csv import FlatCsv

__all__ = ["EntityTag", "EntityTagRange"]

_DQUOTE = ord('"')
_W = ord("W")
_SLASH = ord("/")


def _as_raw(src: bytes | bytearray | str) -> bytes | None:
    try:
        return make_value(src)
    except InvalidHeader:
        return None


@dataclass(frozen=True)
class EntityTag:
    """An entity tag such as ``"xyzzy"`` or ``W/"xyzzy"``, kept as its raw value.

    ``==`` tests whether two tags are identical; use ``strong_eq`` or
    ``weak_eq`` for the comparisons that HTTP defines.
    """

    value: bytes

    @classmethod
    def parse(cls, src: bytes | bytearray | str) -> EntityTag | None:
        """Return the tag held in ``src``, or None if it is not a valid entity tag."""
        raw = _as_raw(src)
        if raw is None:
            return None
        length = len(raw)
        if length < 2 or raw[-1] != _DQUOTE:
            return None
        if raw[0] == _DQUOTE:
            start = 1
        elif raw[0] == _W:
            if length >= 4 and raw[1] == _SLASH and raw[2] == _DQUOTE:
                start = 3
            else:
                return None
        else:
            return None
        if _DQUOTE in raw[start : length - 1]:
            return None
        return cls(raw)

    @classmethod
    def from_values(cls, values: Iterable[bytes]) -> EntityTag:
        """Decode exactly one raw value into a tag, raising InvalidHeader otherwise."""
        value = just_one(values)
        tag = None if value is None else cls.parse(value)
        if tag is None:
            raise InvalidHeader("invalid entity tag")
        return tag

    def tag(self) -> bytes:
        """Return the opaque tag, without quotes or weakness marker."""
        if self.is_weak():
            return self.value[3:-1]
        return self.value[1:-1]

    def is_weak(self) -> bool:
        """Return whether this is a weak tag."""
        return self.value[0] == _W

    def strong_eq(self, other: EntityTag) -> bool:
        """Both tags are strong and their opaque tags match exactly."""
        return not self.is_weak() and not other.is_weak() and self.tag() == other.tag()

    def weak_eq(self, other: EntityTag) -> bool:
        """The opaque tags match, regardless of weakness."""
        return self.tag() == other.tag()

    def to_value(self) -> bytes:
        """Return the raw header value."""
        return self.value

    def __repr__(self) -> str:
        return f"EntityTag({self.value!r})"


@dataclass(frozen=True)
class EntityTagRange:
    """Either ``*`` (any tag) or a list of entity tags, as in If-Match."""

    tags: FlatCsv | None = None

    @classmethod
    def any(cls) -> EntityTagRange:
        """Return the range that matches every tag."""
        return cls(None)

    @property
    def is_any(self) -> bool:
        """Whether this range is ``*``."""
        return self.tags is None

    @classmethod
    def from_values(cls, values: Iterable[bytes]) -> EntityTagRange:
        """Merge the raw values into a range; a lone ``*`` means any tag."""
        flat = FlatCsv.from_values(values)
        if flat.value == b"*":
            return cls.any()
        return cls(flat)

    def _matches_if(self, entity: EntityTag, func: Callable[[EntityTag, EntityTag], bool]) -> bool:
        if self.tags is None:
            return True
        for item in self.tags:
            tag = EntityTag.parse(item)
            if tag is not None and func(tag, entity):
                return True
        return False

    def matches_strong(self, entity: EntityTag) -> bool:
        """Whether any tag of the range strongly matches ``entity``."""
        return self._matches_if(entity, EntityTag.strong_eq)

    def matches_weak(self, entity: EntityTag) -> bool:
        """Whether any tag of the range weakly matches ``entity``."""
        return self._matches_if(entity, EntityTag.weak_eq)

    def to_value(self) -> bytes:
        """Return the raw header value."""
        if self.tags is None:
            return b"*"
        return self.tags.to_value()