"""Length-prefixed homogeneous arrays of versioned elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from codec.stream import ByteReader, ByteWriter
from codec.versioned import (
    VersionedDecoder,
    VersionedField,
    check_versioned_value,
    decode_versioned,
    encode_versioned,
)
from core.errors import LvdUnsupportedVersionError, LvdValueError

_ARRAY_VERSION = 1


class Array:
    """Ordered, immutable sequence of versioned elements.

    On the wire: u32 count, then each element as ``[u8 version][body]``.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._elements = tuple(elements)

    @property
    def elements(self) -> tuple[Any, ...]:
        return self._elements

    def version(self) -> int:
        return _ARRAY_VERSION

    def encode(self, writer: ByteWriter) -> None:
        writer.write_u32(len(self._elements))
        for element in self._elements:
            encode_versioned(writer, element)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> Any:
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"Array({list(self._elements)!r})"


@dataclass(frozen=True)
class ArrayOf:
    """Decoder for ``Array<T>`` bound to one element type.

    Attributes:
        element_type: Decoder for each element body.
    """

    element_type: VersionedDecoder
    value_class = Array

    def check_contents(self, value: Array) -> None:
        """Check every element against ``element_type`` before encoding.

        Raises:
            LvdValueError: Naming the index of the first mismatched element.
        """
        for index, element in enumerate(value):
            try:
                check_versioned_value(self.element_type, element)
            except LvdValueError as error:
                raise LvdValueError(f"Array element {index}: {error}") from error

    def decode(self, reader: ByteReader, version: int) -> Array:
        """Decode a count and exactly that many versioned elements.

        Raises:
            LvdUnsupportedVersionError: If ``version`` is not 1.
            LvdCountLimitError: If the count cannot be satisfied.
        """
        if version != _ARRAY_VERSION:
            raise LvdUnsupportedVersionError("Array", version, reader.position - 1)
        count = reader.read_count()
        return Array(decode_versioned(reader, self.element_type) for _ in range(count))


def array_of(element_type: VersionedDecoder) -> VersionedField:
    """Shorthand for a ``Versioned<Array<T>>`` field codec."""
    return VersionedField(ArrayOf(element_type))
