"""Shared encode/decode helpers for codec tests."""

from __future__ import annotations

from typing import Any

from codec.stream import ByteReader, ByteWriter
from codec.versioned import decode_versioned, encode_versioned
from core.config import Endian


def encode_value(value: Any, endian: Endian = "big") -> bytes:
    """Encode one value with its version selector.

    Args:
        value: Versioned value.
        endian: Stream byte order.

    Returns:
        Encoded bytes.
    """
    writer = ByteWriter(endian)
    encode_versioned(writer, value)
    return writer.getvalue()


def roundtrip(value: Any, decoder: Any = None, endian: Endian = "big") -> Any:
    """Encode then decode one value and require the stream to be consumed."""
    reader = ByteReader(encode_value(value, endian), endian)
    decoded = decode_versioned(reader, decoder if decoder is not None else type(value))
    assert reader.remaining == 0
    return decoded
