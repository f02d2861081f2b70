"""Bit-packed flag words.

The packed word is read as one integer in the stream's byte order. Bit
``n`` is then bit ``n`` of that integer, which is bit ``n % 8`` of byte
``n // 8`` of its little-endian image. Unnamed bits are reserved and
round-trip verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, TypeVar

from codec.stream import ByteReader, ByteWriter
from core.errors import LvdValueError

FlagsT = TypeVar("FlagsT", bound="PackedFlags")


class PackedFlags:
    """Immutable flag word; subclasses set ``WIDTH`` and ``BITS``.

    Attributes:
        WIDTH: Word width in bits, 32 or 64.
        BITS: Named flag to bit position.
    """

    WIDTH: ClassVar[int] = 32
    BITS: ClassVar[Mapping[str, int]] = {}

    __slots__ = ("_raw",)

    def __init__(self, raw: int = 0) -> None:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise LvdValueError(f"{type(self).__name__} raw value must be an integer.")
        if not 0 <= raw < (1 << self.WIDTH):
            raise LvdValueError(
                f"{type(self).__name__} raw value {raw:#x} does not fit {self.WIDTH} bits."
            )
        object.__setattr__(self, "_raw", raw)

    @classmethod
    def from_flags(cls: type[FlagsT], reserved: int = 0, **named: bool) -> FlagsT:
        """Build a word from named booleans plus reserved bits.

        Args:
            reserved: Bits outside every named position.
            **named: Named flags to set; omitted flags are cleared.

        Raises:
            LvdValueError: If a name is unknown or ``reserved`` overlaps a named bit.
        """
        if reserved & cls.named_mask():
            raise LvdValueError(
                f"{cls.__name__} reserved bits {reserved:#x} overlap named flags."
            )
        flags = cls(reserved)
        for name, enabled in named.items():
            flags = flags.with_flag(name, enabled)
        return flags

    @classmethod
    def named_mask(cls) -> int:
        mask = 0
        for position in cls.BITS.values():
            mask |= 1 << position
        return mask

    @property
    def raw(self) -> int:
        """Packed word as an integer."""
        return self._raw

    @property
    def reserved(self) -> int:
        """Bits outside every named position."""
        return self._raw & ~self.named_mask()

    def get(self, name: str) -> bool:
        return bool(self._raw >> self._position(name) & 1)

    def with_flag(self: FlagsT, name: str, enabled: bool) -> FlagsT:
        """Return a copy with one named bit set or cleared."""
        bit = 1 << self._position(name)
        return type(self)(self._raw | bit if enabled else self._raw & ~bit)

    def named_flags(self) -> dict[str, bool]:
        """Return every named flag in bit order."""
        ordered = sorted(self.BITS.items(), key=lambda item: item[1])
        return {name: self.get(name) for name, _ in ordered}

    def _position(self, name: str) -> int:
        try:
            return self.BITS[name]
        except KeyError:
            raise LvdValueError(f"{type(self).__name__} has no flag named '{name}'.") from None

    @classmethod
    def read(cls: type[FlagsT], reader: ByteReader) -> FlagsT:
        raw = reader.read_u64() if cls.WIDTH == 64 else reader.read_u32()
        return cls(raw)

    def write(self, writer: ByteWriter) -> None:
        if self.WIDTH == 64:
            writer.write_u64(self._raw)
        else:
            writer.write_u32(self._raw)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name not in type(self).BITS:
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; use with_flag().")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._raw))

    def __repr__(self) -> str:
        enabled = [name for name, value in self.named_flags().items() if value]
        return f"{type(self).__name__}(raw={self._raw:#x}, enabled={enabled})"


@dataclass(frozen=True)
class FlagsField:
    """Field codec for an unversioned flag word."""

    flags_type: type[PackedFlags]

    def decode(self, reader: ByteReader) -> PackedFlags:
        return self.flags_type.read(reader)

    def encode(self, writer: ByteWriter, value: Any) -> None:
        if not isinstance(value, self.flags_type):
            raise LvdValueError(
                f"Expected {self.flags_type.__name__} value, got {type(value).__name__}."
            )
        value.write(writer)
