"""Identity and placement data shared by every level object.

Older object versions embed ``MetaInfo`` directly; newer ones embed a
``Base``, which wraps the same metadata together with dynamic attachment
details that grew over four revisions.
"""

from __future__ import annotations

from dataclasses import dataclass

from codec.fixed_string import FixedString56, FixedString64
from codec.primitives import BOOL, I32, U32
from codec.record import Field, TaggedRecord
from codec.stream import ByteReader, ByteWriter
from codec.versioned import versioned
from core.errors import LvdUnsupportedVersionError, LvdValueError
from objects.vector import Vector3, vec3

_ID_VERSION = 1


@dataclass(frozen=True)
class Id:
    """Numeric object identifier.

    Attributes:
        value: Unsigned 32-bit identifier.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise LvdValueError(f"Id value must be an integer, got {type(self.value).__name__}.")
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise LvdValueError(f"Id value out of u32 range: {self.value}.")

    def version(self) -> int:
        return _ID_VERSION

    @classmethod
    def decode(cls, reader: ByteReader, version: int) -> "Id":
        if version != _ID_VERSION:
            raise LvdUnsupportedVersionError(cls.__name__, version, reader.position - 1)
        return cls(reader.read_u32())

    def encode(self, writer: ByteWriter) -> None:
        writer.write_u32(self.value)


class VersionInfo(TaggedRecord):
    """Editor and format revision numbers stamped on an object."""

    __slots__ = ()
    VARIANTS = {1: (Field("editor_version", U32), Field("format_version", U32))}


class MetaInfo(TaggedRecord):
    """Object name plus the revision it was authored with."""

    __slots__ = ()
    VARIANTS = {
        1: (
            Field("version_info", versioned(VersionInfo)),
            Field("name", versioned(FixedString56)),
        ),
    }


_BASE_V1 = (
    Field("meta_info", versioned(MetaInfo)),
    Field("dynamic_name", versioned(FixedString64)),
)
_BASE_V2 = _BASE_V1 + (Field("dynamic_offset", versioned(Vector3)),)
_BASE_V3 = _BASE_V2 + (
    Field("is_dynamic", BOOL),
    Field("instance_id", versioned(Id)),
    Field("instance_offset", versioned(Vector3)),
)
_BASE_V4 = _BASE_V3 + (
    Field("joint_index", I32),
    Field("joint_name", versioned(FixedString64)),
)


class Base(TaggedRecord):
    """Common header for object records."""

    __slots__ = ()
    VARIANTS = {1: _BASE_V1, 2: _BASE_V2, 3: _BASE_V3, 4: _BASE_V4}


def meta_info(name: str, editor_version: int = 0, format_version: int = 0) -> MetaInfo:
    """Build a ``MetaInfo`` for a named object."""
    return MetaInfo(
        1,
        version_info=VersionInfo(1, editor_version=editor_version, format_version=format_version),
        name=FixedString56.from_str(name),
    )


def base(name: str, dynamic_name: str = "") -> Base:
    """Build the latest ``Base`` for a static, unattached object."""
    return Base(
        4,
        meta_info=meta_info(name),
        dynamic_name=FixedString64.from_str(dynamic_name),
        dynamic_offset=vec3(0.0, 0.0, 0.0),
        is_dynamic=False,
        instance_id=Id(0),
        instance_offset=vec3(0.0, 0.0, 0.0),
        joint_index=0,
        joint_name=FixedString64(),
    )
