"""Compact 32-bit object identifiers.

A tag packs three letters and a four-digit number into one u32::

    bits 24-28  letter 0   (0 = '_', v = 'A' + v - 1)
    bits 19-23  letter 1
    bits 14-18  letter 2
    bits  0-13  number     (displayed modulo 10000)

Bits 29-31 carry no meaning and are kept only in ``raw``.
"""

from __future__ import annotations

from dataclasses import dataclass

from codec.stream import ByteReader, ByteWriter
from core.constants import (
    TAG_DIGIT_COUNT,
    TAG_LETTER_COUNT,
    TAG_NUMBER_MODULUS,
    TAG_STRING_LENGTH,
)
from core.errors import (
    LvdInvalidTagCharacterError,
    LvdInvalidTagLengthError,
    LvdUnsupportedVersionError,
    LvdValueError,
)

_LETTER_SHIFTS = (24, 19, 14)
_LETTER_MASK = 0x1F
_NUMBER_MASK = 0x3FFF
_UNDERSCORE = "_"
_TAG_VERSION = 1


@dataclass(frozen=True)
class Tag:
    """Identifier stored as its packed 32-bit value.

    Attributes:
        raw: Packed word exactly as read from or written to the stream.
    """

    raw: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise LvdValueError(f"Tag raw value must be an integer, got {type(self.raw).__name__}.")
        if not 0 <= self.raw <= 0xFFFFFFFF:
            raise LvdValueError(f"Tag raw value out of u32 range: {self.raw}.")

    @classmethod
    def from_raw(cls, raw: int) -> "Tag":
        return cls(raw)

    @classmethod
    def from_str(cls, text: str) -> "Tag":
        """Parse the seven-character display form.

        Args:
            text: Three letters (A-Z or ``_``) followed by four digits.

        Returns:
            Parsed tag.

        Raises:
            LvdInvalidTagLengthError: If ``text`` is not seven characters.
            LvdInvalidTagCharacterError: If a character breaks its position's rule.
        """
        if len(text) != TAG_STRING_LENGTH:
            raise LvdInvalidTagLengthError(length=len(text), expected=TAG_STRING_LENGTH)
        raw = 0
        for position, (character, shift) in enumerate(zip(text[:TAG_LETTER_COUNT], _LETTER_SHIFTS)):
            raw |= _letter_value(character, position) << shift
        number = 0
        for position, character in enumerate(text[TAG_LETTER_COUNT:], start=TAG_LETTER_COUNT):
            if character not in "0123456789":
                raise LvdInvalidTagCharacterError(character, position, "digit")
            number = number * 10 + int(character)
        return cls(raw | number)

    @property
    def letters(self) -> str:
        """The three display letters."""
        return "".join(_letter_char((self.raw >> shift) & _LETTER_MASK) for shift in _LETTER_SHIFTS)

    @property
    def number(self) -> int:
        """The display number, in ``0..9999``."""
        return (self.raw & _NUMBER_MASK) % TAG_NUMBER_MODULUS

    def __str__(self) -> str:
        return f"{self.letters}{self.number:0{TAG_DIGIT_COUNT}d}"

    def version(self) -> int:
        return _TAG_VERSION

    @classmethod
    def decode(cls, reader: ByteReader, version: int) -> "Tag":
        if version != _TAG_VERSION:
            raise LvdUnsupportedVersionError(cls.__name__, version, reader.position - 1)
        return cls(reader.read_u32())

    def encode(self, writer: ByteWriter) -> None:
        writer.write_u32(self.raw)


def _letter_value(character: str, position: int) -> int:
    if character == _UNDERSCORE:
        return 0
    if "A" <= character <= "Z":
        return ord(character) - ord("A") + 1
    raise LvdInvalidTagCharacterError(character, position, "letter")


def _letter_char(value: int) -> str:
    return _UNDERSCORE if value == 0 else chr(ord("A") + value - 1)
