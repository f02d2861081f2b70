"""Unit tests for the compact tag identifier."""

from __future__ import annotations

import pytest

from codec.stream import ByteWriter
from codec.tag import Tag
from core.errors import (
    LvdInvalidTagCharacterError,
    LvdInvalidTagLengthError,
    LvdInvalidTagError,
    LvdValueError,
)
from tests.codec_helpers import roundtrip


@pytest.mark.parametrize(
    ("text", "raw"),
    [
        ("IPP0001", 159645697),
        ("IPP0002", 159645698),
        ("FSP0010", 110886922),
        ("PAL0101", 269156453),
        ("SLD1001", 325125097),
        ("AAA0000", 17317888),
        ("ZZZ9999", 450275087),
        ("C_Y0001", 50741249),
        ("SE_0001", 321388545),
        ("___0000", 0),
        ("___0001", 1),
    ],
)
def test_known_vectors(text: str, raw: int) -> None:
    """Text and packed forms should convert both ways."""
    assert Tag.from_str(text).raw == raw
    assert str(Tag.from_raw(raw)) == text


def test_number_wraps_modulo_ten_thousand() -> None:
    """Numbers at or above 10000 should display modulo 10000."""
    assert str(Tag(9999)) == "___9999"
    assert str(Tag(10000)) == "___0000"
    assert Tag(0x3FFF).number == 6383


def test_unused_high_bits_do_not_affect_display() -> None:
    """Bits above the first letter should be ignored for display."""
    tag = Tag(0xE0000000 | 159645697)

    assert str(tag) == "IPP0001"
    assert tag.letters == "IPP"


def test_wrong_length_reports_length() -> None:
    """Inputs that are not seven characters should fail with their length."""
    for text in ("", "IPP001", "IPP00001"):
        with pytest.raises(LvdInvalidTagLengthError) as error_info:
            Tag.from_str(text)
        assert error_info.value.length == len(text)


@pytest.mark.parametrize(
    ("text", "character", "position", "rule"),
    [
        ("ipp0001", "i", 0, "letter"),
        ("IP10001", "1", 2, "letter"),
        ("IPPX001", "X", 3, "digit"),
        ("IPP000_", "_", 6, "digit"),
    ],
)
def test_invalid_character_reports_rule(text: str, character: str, position: int, rule: str) -> None:
    """Bad characters should be reported with their position and rule."""
    with pytest.raises(LvdInvalidTagCharacterError) as error_info:
        Tag.from_str(text)

    error = error_info.value
    assert (error.character, error.position, error.rule) == (character, position, rule)
    assert isinstance(error, LvdInvalidTagError)


def test_encode_writes_packed_word() -> None:
    """Encoding should write the packed u32 in stream order."""
    writer = ByteWriter()

    Tag.from_str("IPP0001").encode(writer)

    assert writer.getvalue() == b"\x09\x84\x00\x01"


def test_versioned_round_trip() -> None:
    """A tag should survive the versioned wrapper unchanged."""
    tag = Tag.from_str("SLD1001")

    assert roundtrip(tag) == tag
    assert roundtrip(tag, endian="little") == tag


def test_raw_value_must_fit_u32() -> None:
    """Packed values outside u32 range should be rejected."""
    with pytest.raises(LvdValueError):
        Tag(1 << 32)
