"""lvdkit exception hierarchy.

This module defines traceable codec errors with clear boundaries.
Each failure kind carries the context needed to locate it in the input.
"""

from __future__ import annotations


class LvdError(Exception):
    """Base exception for all lvdkit failures."""


class LvdConfigError(LvdError):
    """Raised for invalid runtime configuration."""


class LvdDependencyError(LvdError):
    """Raised when an optional runtime dependency is missing."""


class LvdDecodeError(LvdError):
    """Raised when a byte stream cannot be decoded.

    Attributes:
        offset: Stream offset where decoding failed.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (offset {offset:#x})")
        self.offset = offset


class LvdBadMagicError(LvdDecodeError):
    """Raised when the envelope signature does not match."""

    def __init__(self, expected: bytes, found: bytes, offset: int) -> None:
        super().__init__(f"bad magic: expected {expected!r}, found {found!r}", offset)
        self.expected = expected
        self.found = found


class LvdUnsupportedVersionError(LvdDecodeError):
    """Raised when a version selector matches no known variant."""

    def __init__(self, type_name: str, version: int, offset: int) -> None:
        super().__init__(f"unsupported version {version} for {type_name}", offset)
        self.type_name = type_name
        self.version = version


class LvdMissingTerminatorError(LvdDecodeError):
    """Raised when a fixed string window holds no nul byte."""

    def __init__(self, capacity: int, offset: int) -> None:
        super().__init__(f"missing terminator within {capacity}-byte string buffer", offset)
        self.capacity = capacity


class LvdTruncatedStreamError(LvdDecodeError):
    """Raised when fewer bytes remain than a read requires."""

    def __init__(self, requested: int, available: int, offset: int) -> None:
        super().__init__(
            f"truncated stream: needed {requested} bytes, {available} available",
            offset,
        )
        self.requested = requested
        self.available = available


class LvdCountLimitError(LvdDecodeError):
    """Raised when a declared element count cannot be satisfied."""

    def __init__(self, count: int, limit: int, offset: int) -> None:
        super().__init__(f"declared element count {count} exceeds limit {limit}", offset)
        self.count = count
        self.limit = limit


class LvdValueError(LvdError):
    """Raised when an in-memory value cannot be represented on the wire."""


class LvdBufferOverflowError(LvdValueError):
    """Raised when text does not fit a fixed string buffer."""

    def __init__(self, capacity: int, length: int) -> None:
        super().__init__(
            f"buffer overflow: nul-terminated string of {length} bytes exceeds "
            f"buffer capacity of {capacity} bytes"
        )
        self.capacity = capacity
        self.length = length


class LvdInvalidTagError(LvdValueError):
    """Raised when text cannot be parsed as a tag."""


class LvdInvalidTagLengthError(LvdInvalidTagError):
    """Raised when tag text does not have exactly seven characters."""

    def __init__(self, length: int, expected: int) -> None:
        super().__init__(f"expected tag string length {expected}, found length {length}")
        self.length = length
        self.expected = expected


class LvdInvalidTagCharacterError(LvdInvalidTagError):
    """Raised when a tag character breaks its position's rule.

    Attributes:
        character: Offending character.
        position: Zero-based position in the tag text.
        rule: ``"letter"`` or ``"digit"``.
    """

    def __init__(self, character: str, position: int, rule: str) -> None:
        expectation = "uppercase letter or underscore" if rule == "letter" else "digit"
        super().__init__(f"expected {expectation} at position {position}, found {character!r}")
        self.character = character
        self.position = position
        self.rule = rule


class LvdTextFormatError(LvdError):
    """Raised when structured text cannot be mapped onto the object graph."""
