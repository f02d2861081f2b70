"""Unit tests for length-prefixed arrays."""

from __future__ import annotations

import pytest

from codec.array import Array, ArrayOf, array_of
from codec.stream import ByteReader, ByteWriter
from codec.tag import Tag
from codec.versioned import decode_versioned
from core.errors import LvdCountLimitError, LvdUnsupportedVersionError, LvdValueError
from objects.base import Id
from objects.envelope import LvdFile, encode_lvd_file
from tests.codec_helpers import encode_value, roundtrip


def test_decode_reads_exactly_declared_count() -> None:
    """Decoding should stop right after the last declared element."""
    data = (
        b"\x01\x00\x00\x00\x02"
        + b"\x01\x09\x84\x00\x01"
        + b"\x01\x09\x84\x00\x02"
        + b"\xff"
    )
    reader = ByteReader(data)

    array = decode_versioned(reader, ArrayOf(Tag))

    assert [str(tag) for tag in array] == ["IPP0001", "IPP0002"]
    assert reader.remaining == 1


def test_empty_array_is_count_only() -> None:
    """An empty array should encode as a zero count and nothing else."""
    writer = ByteWriter()
    Array().encode(writer)

    assert writer.getvalue() == b"\x00\x00\x00\x00"
    assert len(decode_versioned(ByteReader(b"\x01\x00\x00\x00\x00"), ArrayOf(Tag))) == 0


def test_round_trip_preserves_order() -> None:
    """Elements should round-trip in order."""
    array = Array(Tag(raw) for raw in (3, 1, 2))

    assert encode_value(array)[:5] == b"\x01\x00\x00\x00\x03"
    assert roundtrip(array, ArrayOf(Tag)) == array


def test_oversized_count_is_rejected_before_allocation() -> None:
    """Counts the stream cannot hold should fail immediately."""
    with pytest.raises(LvdCountLimitError):
        decode_versioned(ByteReader(b"\x01\x00\x00\x00\x05\x01"), ArrayOf(Tag))


def test_unknown_array_version_is_rejected() -> None:
    """Only version 1 of the array container exists."""
    with pytest.raises(LvdUnsupportedVersionError):
        decode_versioned(ByteReader(b"\x02\x00\x00\x00\x00"), ArrayOf(Tag))


def test_encode_rejects_elements_of_the_wrong_type() -> None:
    """Array fields should refuse elements their decoder could never produce."""
    field = array_of(Tag)
    writer = ByteWriter()

    with pytest.raises(LvdValueError, match="Array element 1: Expected Tag value, got Id"):
        field.encode(writer, Array([Tag(1), Id(2)]))

    assert writer.getvalue() == b""


def test_nested_array_elements_are_checked() -> None:
    """Element checks should reach arrays held inside arrays."""
    field = array_of(ArrayOf(Tag))

    with pytest.raises(LvdValueError, match="Array element 0: Array element 0"):
        field.encode(ByteWriter(), Array([Array([Id(2)])]))


def test_file_with_mismatched_array_elements_does_not_encode() -> None:
    """A file whose arrays hold the wrong record type should fail to encode."""
    lvd = LvdFile.empty(1).lvd.replace(collisions=Array([Tag.from_str("COL0001")]))

    with pytest.raises(LvdValueError, match="Expected Collision value, got Tag"):
        encode_lvd_file(LvdFile(lvd=lvd))
