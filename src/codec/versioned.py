"""Versioned wrapper codec.

A versioned value is written as a one-byte version selector followed by
the value's own encoding. The selector is never stored on its own: it is
derived from the value on encode and handed to the decoder on decode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from codec.stream import ByteReader, ByteWriter
from core.errors import LvdDecodeError, LvdValueError


class VersionedValue(Protocol):
    """A value that reports the wire version of its current layout."""

    def version(self) -> int:
        """Return the version selector for this value's layout."""

    def encode(self, writer: ByteWriter) -> None:
        """Encode the value body, without its version selector."""


class VersionedDecoder(Protocol):
    """Builds a value from its body given the version selector."""

    def decode(self, reader: ByteReader, version: int) -> Any:
        """Decode one value body laid out as ``version``."""


def encode_versioned(writer: ByteWriter, value: VersionedValue) -> None:
    """Write ``value.version()`` followed by the value body.

    Args:
        writer: Output stream.
        value: Value implementing the version capability.

    Raises:
        LvdValueError: If the value does not implement the capability.
    """
    version_method = getattr(value, "version", None)
    if not callable(version_method):
        raise LvdValueError(f"{type(value).__name__} does not report a wire version.")
    writer.write_u8(version_method())
    value.encode(writer)


def decode_versioned(reader: ByteReader, decoder: VersionedDecoder) -> Any:
    """Read a version selector and decode the value it selects.

    The decoder alone decides whether it recognizes the selector; there is
    no negotiation or upgrade path.

    Args:
        reader: Input stream.
        decoder: Value type (or bound decoder) receiving the selector.

    Returns:
        Decoded value.

    Raises:
        LvdDecodeError: If the decoded value reports a different version
            than the selector it was decoded from.
    """
    offset = reader.position
    version = reader.read_u8()
    value = decoder.decode(reader, version)
    if value.version() != version:
        raise LvdDecodeError(
            f"{type(value).__name__} decoded from version {version} "
            f"reports version {value.version()}",
            offset,
        )
    return value


@dataclass(frozen=True)
class VersionedField:
    """Field codec for a ``Versioned<T>`` record member.

    Attributes:
        value_type: Decoder for the wrapped value body.
    """

    value_type: VersionedDecoder

    def decode(self, reader: ByteReader) -> Any:
        return decode_versioned(reader, self.value_type)

    def encode(self, writer: ByteWriter, value: Any) -> None:
        check_versioned_value(self.value_type, value)
        encode_versioned(writer, value)


def check_versioned_value(value_type: VersionedDecoder, value: Any) -> None:
    """Ensure ``value`` is something ``value_type`` could have decoded.

    Decoders that hold nested values, such as arrays, may define
    ``check_contents(value)`` to check them too.

    Raises:
        LvdValueError: If the value or anything it holds has the wrong type.
    """
    expected = _expected_type(value_type)
    if expected is not None and not isinstance(value, expected):
        raise LvdValueError(f"Expected {expected.__name__} value, got {type(value).__name__}.")
    check_contents = getattr(value_type, "check_contents", None)
    if callable(check_contents):
        check_contents(value)


def versioned(value_type: VersionedDecoder) -> VersionedField:
    """Shorthand for a ``Versioned<T>`` field codec."""
    return VersionedField(value_type)


def _expected_type(value_type: VersionedDecoder) -> type | None:
    if isinstance(value_type, type):
        return value_type
    value_class = getattr(value_type, "value_class", None)
    return value_class if isinstance(value_class, type) else None
