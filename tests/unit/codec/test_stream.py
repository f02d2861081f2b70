"""Unit tests for the byte stream reader and writer."""

from __future__ import annotations

import pytest

from codec.stream import ByteReader, ByteWriter
from core.errors import LvdCountLimitError, LvdTruncatedStreamError, LvdValueError


def test_reader_uses_selected_byte_order() -> None:
    """The same bytes should decode differently per byte order."""
    data = b"\x00\x00\x00\x01"

    assert ByteReader(data, "big").read_u32() == 1
    assert ByteReader(data, "little").read_u32() == 0x01000000


def test_reader_reads_signed_and_float_values() -> None:
    """Signed and float reads should follow IEEE and two's complement."""
    reader = ByteReader(b"\xff\xff\xff\xfe\x3f\x80\x00\x00")

    assert reader.read_i32() == -2
    assert reader.read_f32() == 1.0
    assert reader.remaining == 0


def test_reader_raises_truncated_with_context() -> None:
    """A short read should report offset, requested and available sizes."""
    reader = ByteReader(b"\x01\x02\x03")
    reader.read_u8()

    with pytest.raises(LvdTruncatedStreamError) as error_info:
        reader.read_u32()

    error = error_info.value
    assert (error.offset, error.requested, error.available) == (1, 4, 2)
    assert reader.position == 1


def test_find_does_not_consume() -> None:
    """find should report a relative offset and leave the cursor in place."""
    reader = ByteReader(b"ab\x00cd")

    assert reader.find(0, 5) == 2
    assert reader.find(0, 2) is None
    assert reader.position == 0


def test_read_count_rejects_count_above_limit() -> None:
    """Counts above the configured limit should fail before allocation."""
    reader = ByteReader(b"\x00\x00\x00\x03" + b"\x00" * 16, max_element_count=2)

    with pytest.raises(LvdCountLimitError) as error_info:
        reader.read_count()

    assert error_info.value.count == 3
    assert error_info.value.limit == 2


def test_read_count_rejects_count_above_remaining_bytes() -> None:
    """Counts that cannot fit in the remaining bytes should fail."""
    reader = ByteReader(b"\xff\xff\xff\xff\x01")

    with pytest.raises(LvdCountLimitError):
        reader.read_count()


def test_writer_rejects_out_of_range_values() -> None:
    """Out-of-range integers should fail instead of truncating."""
    writer = ByteWriter()

    with pytest.raises(LvdValueError):
        writer.write_u8(256)
    with pytest.raises(LvdValueError):
        writer.write_u32(-1)

    assert writer.getvalue() == b""


def test_writer_emits_selected_byte_order() -> None:
    """Writers should pack every scalar in their byte order."""
    big = ByteWriter("big")
    little = ByteWriter("little")
    for writer in (big, little):
        writer.write_u32(0x01020304)
        writer.write_zeros(2)

    assert big.getvalue() == b"\x01\x02\x03\x04\x00\x00"
    assert little.getvalue() == b"\x04\x03\x02\x01\x00\x00"
