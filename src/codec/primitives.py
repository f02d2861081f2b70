"""Fixed-width numeric field codecs.

Each codec reads and writes one scalar in the stream's byte order.
Records compose these codecs into ordered field layouts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Protocol

from codec.stream import ByteReader, ByteWriter
from core.errors import LvdDecodeError, LvdValueError


class FieldCodec(Protocol):
    """Reads and writes one field value of a record layout."""

    def decode(self, reader: ByteReader) -> Any:
        """Decode one value at the reader's cursor."""

    def encode(self, writer: ByteWriter, value: Any) -> None:
        """Encode one value at the end of the writer."""


@dataclass(frozen=True)
class ScalarCodec:
    """Codec for a single fixed-width number.

    Attributes:
        type_name: Wire type label used in error messages and text export.
        python_type: Python type accepted for the value.
        read: Reader method performing the fixed-width read.
        write: Writer method performing the fixed-width write.
    """

    type_name: str
    python_type: type
    read: Callable[[ByteReader], Any]
    write: Callable[[ByteWriter, Any], None]

    def decode(self, reader: ByteReader) -> Any:
        return self.read(reader)

    def encode(self, writer: ByteWriter, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise LvdValueError(f"Expected {self.type_name} number, got {type(value).__name__}.")
        if self.python_type is int and not isinstance(value, int):
            raise LvdValueError(f"Expected integer for {self.type_name}, got {value!r}.")
        self.write(writer, self.python_type(value))


@dataclass(frozen=True)
class BoolCodec:
    """One-byte boolean: zero is false, any other byte is true."""

    type_name: str = "bool"

    def decode(self, reader: ByteReader) -> bool:
        return reader.read_u8() != 0

    def encode(self, writer: ByteWriter, value: Any) -> None:
        if not isinstance(value, bool):
            raise LvdValueError(f"Expected bool, got {type(value).__name__}.")
        writer.write_u8(1 if value else 0)


U8 = ScalarCodec("u8", int, ByteReader.read_u8, ByteWriter.write_u8)
U32 = ScalarCodec("u32", int, ByteReader.read_u32, ByteWriter.write_u32)
I32 = ScalarCodec("i32", int, ByteReader.read_i32, ByteWriter.write_i32)
U64 = ScalarCodec("u64", int, ByteReader.read_u64, ByteWriter.write_u64)
F32 = ScalarCodec("f32", float, ByteReader.read_f32, ByteWriter.write_f32)
BOOL = BoolCodec()


@dataclass(frozen=True)
class EnumCodec:
    """Codec for a u32 enumeration with an exhaustive member table.

    Attributes:
        enum_type: ``IntEnum`` listing every valid wire value.
    """

    enum_type: type[IntEnum]

    def decode(self, reader: ByteReader) -> IntEnum:
        offset = reader.position
        raw = reader.read_u32()
        try:
            return self.enum_type(raw)
        except ValueError:
            raise LvdDecodeError(f"unknown {self.enum_type.__name__} value {raw}", offset) from None

    def encode(self, writer: ByteWriter, value: Any) -> None:
        if not isinstance(value, self.enum_type):
            raise LvdValueError(
                f"Expected {self.enum_type.__name__} member, got {type(value).__name__}."
            )
        writer.write_u32(int(value))
