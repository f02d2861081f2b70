"""Seekable byte stream reader and writer.

This module owns the cursor, byte order, and bounds checks for every
fixed-width read and write. Codecs never touch raw buffers directly.
"""

from __future__ import annotations

import struct
from typing import Any

from core.config import Endian
from core.constants import DEFAULT_MAX_ELEMENT_COUNT
from core.errors import (
    LvdCountLimitError,
    LvdTruncatedStreamError,
    LvdValueError,
)

_BYTE_ORDER_PREFIX = {"big": ">", "little": "<"}


class _ScalarFormats:
    """Precompiled struct formats for one byte order."""

    def __init__(self, endian: Endian) -> None:
        prefix = _BYTE_ORDER_PREFIX[endian]
        self.u8 = struct.Struct(f"{prefix}B")
        self.u32 = struct.Struct(f"{prefix}I")
        self.i32 = struct.Struct(f"{prefix}i")
        self.u64 = struct.Struct(f"{prefix}Q")
        self.f32 = struct.Struct(f"{prefix}f")


_FORMATS = {endian: _ScalarFormats(endian) for endian in ("big", "little")}


class ByteReader:
    """Cursor over an in-memory byte buffer.

    Each decode call owns its own reader; readers are never shared
    between threads.
    """

    def __init__(
        self,
        data: bytes,
        endian: Endian = "big",
        max_element_count: int = DEFAULT_MAX_ELEMENT_COUNT,
    ) -> None:
        """Initialize reader state.

        Args:
            data: Complete input buffer.
            endian: Byte order for every multi-byte read.
            max_element_count: Upper bound accepted by ``read_count``.
        """
        self._data = bytes(data)
        self._position = 0
        self._formats = _FORMATS[endian]
        self.endian = endian
        self.max_element_count = max_element_count

    @property
    def position(self) -> int:
        """Current cursor offset."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._position

    def peek_bytes(self, size: int, offset: int = 0) -> bytes:
        """Return up to ``size`` bytes at ``offset`` past the cursor without consuming."""
        start = self._position + offset
        return self._data[start : start + size]

    def read_bytes(self, size: int) -> bytes:
        """Consume exactly ``size`` bytes.

        Raises:
            LvdTruncatedStreamError: If fewer than ``size`` bytes remain.
        """
        self._require(size)
        start = self._position
        self._position += size
        return self._data[start : self._position]

    def skip(self, size: int) -> None:
        """Advance the cursor by ``size`` bytes."""
        self._require(size)
        self._position += size

    def find(self, byte: int, limit: int) -> int | None:
        """Locate ``byte`` within the next ``limit`` bytes without consuming.

        Returns:
            Offset relative to the cursor, or None when absent.
        """
        window = self._data[self._position : self._position + limit]
        index = window.find(bytes((byte,)))
        return None if index < 0 else index

    def read_u8(self) -> int:
        return self._unpack(self._formats.u8)

    def read_u32(self) -> int:
        return self._unpack(self._formats.u32)

    def read_i32(self) -> int:
        return self._unpack(self._formats.i32)

    def read_u64(self) -> int:
        return self._unpack(self._formats.u64)

    def read_f32(self) -> float:
        return self._unpack(self._formats.f32)

    def read_count(self) -> int:
        """Read a 32-bit element count and validate it before allocation.

        Every element occupies at least its one-byte version selector, so
        a count larger than the remaining byte budget can never be satisfied.

        Raises:
            LvdCountLimitError: If the count exceeds the configured limit or
                the bytes left in the stream.
        """
        offset = self._position
        count = self.read_u32()
        if count > self.max_element_count:
            raise LvdCountLimitError(count=count, limit=self.max_element_count, offset=offset)
        if count > self.remaining:
            raise LvdCountLimitError(count=count, limit=self.remaining, offset=offset)
        return count

    def _unpack(self, layout: struct.Struct) -> Any:
        self._require(layout.size)
        (value,) = layout.unpack_from(self._data, self._position)
        self._position += layout.size
        return value

    def _require(self, size: int) -> None:
        if size < 0 or size > self.remaining:
            raise LvdTruncatedStreamError(
                requested=size,
                available=self.remaining,
                offset=self._position,
            )


class ByteWriter:
    """Append-only output buffer with a fixed byte order."""

    def __init__(self, endian: Endian = "big") -> None:
        self._buffer = bytearray()
        self._formats = _FORMATS[endian]
        self.endian = endian

    @property
    def position(self) -> int:
        """Number of bytes written so far."""
        return len(self._buffer)

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buffer)

    def write_bytes(self, data: bytes) -> None:
        self._buffer.extend(data)

    def write_zeros(self, size: int) -> None:
        self._buffer.extend(bytes(size))

    def write_u8(self, value: int) -> None:
        self._pack(self._formats.u8, value, "u8")

    def write_u32(self, value: int) -> None:
        self._pack(self._formats.u32, value, "u32")

    def write_i32(self, value: int) -> None:
        self._pack(self._formats.i32, value, "i32")

    def write_u64(self, value: int) -> None:
        self._pack(self._formats.u64, value, "u64")

    def write_f32(self, value: float) -> None:
        self._pack(self._formats.f32, value, "f32")

    def _pack(self, layout: struct.Struct, value: object, type_name: str) -> None:
        try:
            self._buffer.extend(layout.pack(value))
        except (struct.error, OverflowError) as error:
            raise LvdValueError(f"Cannot encode {value!r} as {type_name}: {error}") from error
