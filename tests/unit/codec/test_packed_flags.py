"""Unit tests for bit-packed flag words."""

from __future__ import annotations

import pytest

from codec.packed_flags import FlagsField
from codec.stream import ByteReader, ByteWriter
from core.errors import LvdValueError
from objects.collision import AttributeFlags, CollisionFlags


@pytest.mark.parametrize(("name", "position"), sorted(CollisionFlags.BITS.items()))
def test_collision_flag_bits(name: str, position: int) -> None:
    """Each named collision flag should own exactly its bit."""
    flags = CollisionFlags.from_flags(**{name: True})

    assert flags.raw == 1 << position
    assert flags.get(name) is True
    assert [key for key, value in flags.named_flags().items() if value] == [name]


@pytest.mark.parametrize(("name", "position"), sorted(AttributeFlags.BITS.items()))
def test_attribute_flag_bits(name: str, position: int) -> None:
    """Each named attribute flag should own exactly its bit."""
    flags = AttributeFlags.from_flags(**{name: True})

    assert flags.raw == 1 << position
    assert getattr(flags, name) is True
    assert flags.reserved == 0


def test_attribute_flags_name_all_low_bits() -> None:
    """The 32 named attribute flags should cover bits 0 through 31."""
    assert sorted(AttributeFlags.BITS.values()) == list(range(32))


def test_reserved_bits_round_trip() -> None:
    """Unnamed bits should survive decode and encode verbatim."""
    raw = 0xDEADBEEF00000005
    writer = ByteWriter()
    FlagsField(AttributeFlags).encode(writer, AttributeFlags(raw))

    decoded = FlagsField(AttributeFlags).decode(ByteReader(writer.getvalue()))

    assert decoded.raw == raw
    assert decoded.reserved == 0xDEADBEEF00000000
    assert decoded.length0 and decoded.fall and not decoded.packman_final_ignore


def test_with_flag_preserves_reserved_bits() -> None:
    """Changing a named flag should leave reserved bits untouched."""
    flags = CollisionFlags(0x00FF0000 & ~(1 << 16))

    updated = flags.with_flag("dynamic", True).with_flag("throughable", True)

    assert updated.reserved == flags.reserved
    assert updated.dynamic and updated.throughable


def test_with_flag_returns_new_instance() -> None:
    """Flag words should be immutable."""
    flags = CollisionFlags()
    updated = flags.with_flag("dynamic", True)

    assert flags.raw == 0
    assert updated.raw == 0x10000
    with pytest.raises(AttributeError):
        flags.dynamic = True  # type: ignore[misc]


def test_bit_numbering_on_big_endian_wire() -> None:
    """Bit n should be bit n of the integer read in stream order."""
    codec = FlagsField(CollisionFlags)

    assert codec.decode(ByteReader(b"\x00\x00\x00\x01", "big")).throughable
    assert codec.decode(ByteReader(b"\x00\x01\x00\x00", "big")).dynamic
    assert codec.decode(ByteReader(b"\x01\x00\x00\x00", "little")).throughable


def test_unknown_flag_name_is_rejected() -> None:
    """Unknown names should fail instead of silently doing nothing."""
    with pytest.raises(LvdValueError):
        CollisionFlags().get("missing")
    with pytest.raises(LvdValueError):
        CollisionFlags.from_flags(missing=True)


def test_reserved_overlapping_named_bits_is_rejected() -> None:
    """Reserved input must not smuggle named bits."""
    with pytest.raises(LvdValueError):
        CollisionFlags.from_flags(reserved=1)


def test_raw_value_must_fit_width() -> None:
    """Raw words wider than the flag set should be rejected."""
    with pytest.raises(LvdValueError):
        CollisionFlags(1 << 32)


def test_flags_field_rejects_other_flag_types() -> None:
    """A field should only encode its own flag type."""
    with pytest.raises(LvdValueError):
        FlagsField(CollisionFlags).encode(ByteWriter(), AttributeFlags())
