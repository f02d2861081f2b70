"""Fixed-capacity nul-terminated byte strings.

A ``FixedString<N>`` occupies exactly N bytes on the wire. The meaningful
text ends at the first nul byte; anything after it is ignored on read and
zero-filled on write.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from codec.stream import ByteReader, ByteWriter
from core.constants import FIXED_STRING_ENCODING
from core.errors import (
    LvdBufferOverflowError,
    LvdMissingTerminatorError,
    LvdTruncatedStreamError,
    LvdUnsupportedVersionError,
    LvdValueError,
)

FixedStringT = TypeVar("FixedStringT", bound="FixedString")

_FIXED_STRING_VERSION = 1


class FixedString:
    """Base class for fixed-capacity strings; subclasses set ``CAPACITY``."""

    CAPACITY: ClassVar[int] = 0

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes = b"") -> None:
        """Build a string from its meaningful bytes.

        Args:
            raw: Bytes before the terminator.

        Raises:
            LvdValueError: If ``raw`` contains a nul byte.
            LvdBufferOverflowError: If ``raw`` leaves no room for the terminator.
        """
        if b"\x00" in raw:
            raise LvdValueError(f"{type(self).__name__} text must not contain a nul byte.")
        if len(raw) >= self.CAPACITY:
            raise LvdBufferOverflowError(capacity=self.CAPACITY, length=len(raw) + 1)
        self._raw = bytes(raw)

    @classmethod
    def from_str(cls: type[FixedStringT], text: str) -> FixedStringT:
        """Encode ``text`` as UTF-8 and validate it against the capacity."""
        return cls(text.encode(FIXED_STRING_ENCODING))

    @property
    def raw(self) -> bytes:
        """Meaningful bytes, without terminator or fill."""
        return self._raw

    @property
    def text(self) -> str:
        """Meaningful bytes decoded for display; invalid sequences are replaced."""
        return self._raw.decode(FIXED_STRING_ENCODING, errors="replace")

    def to_text(self) -> str:
        """Decode the meaningful bytes without loss.

        Raises:
            LvdValueError: If the bytes are not valid UTF-8.
        """
        try:
            return self._raw.decode(FIXED_STRING_ENCODING)
        except UnicodeDecodeError as error:
            raise LvdValueError(
                f"{type(self).__name__} {self._raw!r} is not valid UTF-8 text "
                f"({error.reason} at byte {error.start}); it cannot be written as text."
            ) from error

    def version(self) -> int:
        return _FIXED_STRING_VERSION

    @classmethod
    def decode(cls: type[FixedStringT], reader: ByteReader, version: int) -> FixedStringT:
        if version != _FIXED_STRING_VERSION:
            raise LvdUnsupportedVersionError(cls.__name__, version, reader.position - 1)
        return cls.read_body(reader)

    @classmethod
    def read_body(cls: type[FixedStringT], reader: ByteReader) -> FixedStringT:
        """Read exactly ``CAPACITY`` bytes and keep the text before the nul.

        Raises:
            LvdMissingTerminatorError: If the window holds no nul byte.
            LvdTruncatedStreamError: If the stream ends before the window does.
        """
        offset = reader.position
        terminator = reader.find(0, cls.CAPACITY)
        if terminator is None:
            if reader.remaining < cls.CAPACITY:
                raise LvdTruncatedStreamError(
                    requested=cls.CAPACITY, available=reader.remaining, offset=offset
                )
            raise LvdMissingTerminatorError(capacity=cls.CAPACITY, offset=offset)
        window = reader.read_bytes(cls.CAPACITY)
        return cls(window[:terminator])

    def encode(self, writer: ByteWriter) -> None:
        writer.write_bytes(self._raw)
        writer.write_zeros(self.CAPACITY - len(self._raw))

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._raw))


class FixedString32(FixedString):
    CAPACITY = 32
    __slots__ = ()


class FixedString56(FixedString):
    CAPACITY = 56
    __slots__ = ()


class FixedString64(FixedString):
    CAPACITY = 64
    __slots__ = ()


def fixed_string_type(capacity: int) -> type[FixedString]:
    """Return a ``FixedString`` subclass for an arbitrary capacity.

    The three capacities used by the file format are returned as their
    named classes; other capacities build a fresh subclass.
    """
    for known in (FixedString32, FixedString56, FixedString64):
        if known.CAPACITY == capacity:
            return known
    if capacity <= 0:
        raise LvdValueError(f"FixedString capacity must be positive, got {capacity}.")
    return type(f"FixedString{capacity}", (FixedString,), {"CAPACITY": capacity, "__slots__": ()})
