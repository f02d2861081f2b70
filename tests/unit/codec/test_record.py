"""Unit tests for version-keyed record dispatch."""

from __future__ import annotations

import pytest

from codec.primitives import U8, U32
from codec.record import Field, Padding, TaggedRecord
from codec.stream import ByteReader, ByteWriter
from codec.versioned import decode_versioned
from core.errors import LvdUnsupportedVersionError, LvdValueError
from tests.codec_helpers import encode_value, roundtrip


class _Sample(TaggedRecord):
    __slots__ = ()
    VARIANTS = {
        1: (Field("a", U8),),
        3: (Field("a", U8), Field("b", U32)),
    }


class _Padded(TaggedRecord):
    __slots__ = ()
    VARIANTS = {1: (Field("a", U8), Padding(2), Field("b", U8))}


def test_unknown_version_consumes_only_selector() -> None:
    """Unsupported versions should fail right after the selector byte."""
    reader = ByteReader(b"\x02\x07\x00\x00\x00\x09")

    with pytest.raises(LvdUnsupportedVersionError) as error_info:
        decode_versioned(reader, _Sample)

    error = error_info.value
    assert (error.type_name, error.version, error.offset) == ("_Sample", 2, 0)
    assert reader.position == 1


def test_held_variant_determines_version_and_layout() -> None:
    """Encoding should follow the held variant's field order."""
    assert encode_value(_Sample(1, a=7)) == b"\x01\x07"
    assert encode_value(_Sample(3, a=7, b=9)) == b"\x03\x07\x00\x00\x00\x09"


def test_non_contiguous_versions_round_trip() -> None:
    """Every declared version should round-trip."""
    for value in (_Sample(1, a=1), _Sample(3, a=2, b=0xFFFFFFFF)):
        assert roundtrip(value) == value
    assert _Sample.supported_versions() == (1, 3)


def test_padding_is_skipped_and_zero_filled() -> None:
    """Padding bytes should be ignored on read and zeroed on write."""
    value = decode_versioned(ByteReader(b"\x01\x01\xaa\xbb\x05"), _Padded)

    assert (value.a, value.b) == (1, 5)
    assert encode_value(value) == b"\x01\x01\x00\x00\x05"


def test_construction_validates_field_names() -> None:
    """Missing, unknown, or versionless fields should be rejected."""
    with pytest.raises(LvdValueError):
        _Sample(3, a=1)
    with pytest.raises(LvdValueError):
        _Sample(1, a=1, b=2)
    with pytest.raises(LvdValueError):
        _Sample(2, a=1)


def test_records_are_immutable() -> None:
    """replace should return a copy and leave the original intact."""
    original = _Sample(3, a=1, b=2)

    updated = original.replace(b=5)

    assert (original.b, updated.b) == (2, 5)
    assert updated.version() == 3
    with pytest.raises(AttributeError):
        original.a = 9  # type: ignore[misc]


def test_equality_includes_variant() -> None:
    """Records with the same values but different variants should differ."""
    assert _Sample(1, a=1) != _Sample(3, a=1, b=0)
    assert _Sample(1, a=1) == _Sample(1, a=1)
    assert _Sample.latest(a=1, b=2).version() == 3


def test_missing_attribute_names_variant() -> None:
    """Reading a field the variant lacks should raise AttributeError."""
    with pytest.raises(AttributeError, match="V1"):
        _ = _Sample(1, a=1).b


def test_out_of_range_field_fails_on_encode() -> None:
    """Field values outside their wire range should fail on encode."""
    with pytest.raises(LvdValueError):
        _Sample(1, a=300).encode(ByteWriter())
