"""Top-level LVD file envelope.

On-disk layout::

    [u32 header constant]          present in shipped files, optional on read
    [u8  Lvd version]
    [u8  signature version = 1]["LVD1"]
    [Versioned<Array<T>> ...]      one array per object kind of that version

The header constant carries no version of its own and is written back
exactly as it was read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from codec.array import Array, array_of
from codec.record import Field, Layout, TaggedRecord, field_names
from codec.stream import ByteReader, ByteWriter
from codec.versioned import decode_versioned, encode_versioned
from core.config import Endian
from core.constants import (
    DEFAULT_ENDIAN,
    DEFAULT_MAX_ELEMENT_COUNT,
    LVD_HEADER_CONSTANT,
    LVD_HEADER_SIZE,
    LVD_LATEST_VERSION,
    LVD_SIGNATURE_MAGIC,
    LVD_SIGNATURE_VERSION,
)
from core.errors import LvdBadMagicError, LvdUnsupportedVersionError, LvdValueError
from core.logging_config import get_logger
from objects.collision import Collision
from objects.field_smash import (
    AreaHint,
    AreaLight,
    FsAreaCam,
    FsAreaLock,
    FsCamLimit,
    FsItem,
    FsStartPoint,
    FsUnknown,
    SplitArea,
)
from objects.placement import (
    DamageShape,
    EnemyGenerator,
    GeneralShape2,
    GeneralShape3,
    ItemPopup,
    Point,
    PTrainerFloatingFloor,
    PTrainerRange,
    Region,
)

_LOGGER = get_logger(__name__)

# Offset of the magic when the header constant is absent: [version][sig version].
_SIGNATURE_MAGIC_OFFSET = 2


class FileSignature:
    """Versioned signature that opens every ``Lvd`` layout."""

    def skip(self, reader: ByteReader) -> None:
        offset = reader.position
        version = reader.read_u8()
        if version != LVD_SIGNATURE_VERSION:
            raise LvdUnsupportedVersionError("LvdFileSignature", version, offset)
        magic_offset = reader.position
        magic = reader.read_bytes(len(LVD_SIGNATURE_MAGIC))
        if magic != LVD_SIGNATURE_MAGIC:
            raise LvdBadMagicError(LVD_SIGNATURE_MAGIC, magic, magic_offset)

    def emit(self, writer: ByteWriter) -> None:
        writer.write_u8(LVD_SIGNATURE_VERSION)
        writer.write_bytes(LVD_SIGNATURE_MAGIC)


# Object arrays in the field order of the newest version, with the Lvd
# version that introduced each. Every older layout is the ordered subset.
_OBJECT_ARRAYS: tuple[tuple[str, Any, int], ...] = (
    ("collisions", Collision, 1),
    ("start_positions", Point, 1),
    ("restart_positions", Point, 1),
    ("camera_regions", Region, 1),
    ("death_regions", Region, 1),
    ("enemy_generators", EnemyGenerator, 1),
    ("fs_items", FsItem, 2),
    ("fs_unknown", FsUnknown, 3),
    ("fs_area_cams", FsAreaCam, 3),
    ("fs_area_locks", FsAreaLock, 3),
    ("fs_cam_limits", FsCamLimit, 3),
    ("damage_shapes", DamageShape, 4),
    ("item_popups", ItemPopup, 5),
    ("ptrainer_ranges", PTrainerRange, 12),
    ("ptrainer_floating_floors", PTrainerFloatingFloor, 13),
    ("general_shapes2", GeneralShape2, 6),
    ("general_shapes3", GeneralShape3, 6),
    ("area_lights", AreaLight, 7),
    ("fs_start_points", FsStartPoint, 8),
    ("area_hints", AreaHint, 9),
    ("split_areas", SplitArea, 10),
    ("shrinked_camera_regions", Region, 11),
    ("shrinked_death_regions", Region, 11),
)


def _lvd_layout(version: int) -> Layout:
    arrays = tuple(
        Field(name, array_of(element_type))
        for name, element_type, since in _OBJECT_ARRAYS
        if since <= version
    )
    return (FileSignature(),) + arrays


class Lvd(TaggedRecord):
    """All object arrays of one level, laid out per format version."""

    __slots__ = ()
    VARIANTS = {version: _lvd_layout(version) for version in range(1, LVD_LATEST_VERSION + 1)}


@dataclass(frozen=True)
class LvdFile:
    """Decoded file: the level record plus the optional header constant.

    Attributes:
        lvd: Top-level level record.
        header: Leading u32 constant, or None when the file had none.
    """

    lvd: Lvd
    header: int | None = LVD_HEADER_CONSTANT

    @classmethod
    def empty(cls, version: int = LVD_LATEST_VERSION, header: int | None = LVD_HEADER_CONSTANT) -> "LvdFile":
        """Build a file whose every object array is empty.

        Raises:
            LvdValueError: If ``version`` is not a known Lvd version.
        """
        if version not in Lvd.VARIANTS:
            raise LvdValueError(
                f"Unknown Lvd version {version}; supported versions: {Lvd.supported_versions()}."
            )
        names = field_names(Lvd.VARIANTS[version])
        return cls(lvd=Lvd(version, **{name: Array() for name in names}), header=header)

    @property
    def version(self) -> int:
        return self.lvd.version()


def decode_lvd_file(
    data: bytes,
    endian: Endian = DEFAULT_ENDIAN,
    max_element_count: int = DEFAULT_MAX_ELEMENT_COUNT,
) -> LvdFile:
    """Decode a complete LVD file from bytes.

    Args:
        data: Whole file contents.
        endian: Byte order of the stream.
        max_element_count: Upper bound for any declared array count.

    Returns:
        Decoded file.

    Raises:
        LvdBadMagicError: If no signature sits where the layout expects one.
        LvdDecodeError: For any other malformed content.
    """
    reader = ByteReader(data, endian=endian, max_element_count=max_element_count)
    header = _read_header(reader)
    lvd = decode_versioned(reader, Lvd)
    if reader.remaining:
        _LOGGER.warning(
            "lvd_trailing_bytes",
            offset=reader.position,
            trailing_bytes=reader.remaining,
        )
    _LOGGER.info(
        "lvd_decoded",
        lvd_version=lvd.version(),
        header_present=header is not None,
        size_bytes=len(data),
        endian=endian,
    )
    return LvdFile(lvd=lvd, header=header)


def encode_lvd_file(lvd_file: LvdFile, endian: Endian = DEFAULT_ENDIAN) -> bytes:
    """Render a complete LVD file to bytes."""
    writer = ByteWriter(endian=endian)
    if lvd_file.header is not None:
        writer.write_u32(lvd_file.header)
    encode_versioned(writer, lvd_file.lvd)
    payload = writer.getvalue()
    _LOGGER.info(
        "lvd_encoded",
        lvd_version=lvd_file.version,
        header_present=lvd_file.header is not None,
        size_bytes=len(payload),
        endian=endian,
    )
    return payload


def _read_header(reader: ByteReader) -> int | None:
    """Consume the header constant when the signature shows one is present."""
    magic_size = len(LVD_SIGNATURE_MAGIC)
    if reader.peek_bytes(magic_size, _SIGNATURE_MAGIC_OFFSET) == LVD_SIGNATURE_MAGIC:
        return None
    offset = LVD_HEADER_SIZE + _SIGNATURE_MAGIC_OFFSET
    found = reader.peek_bytes(magic_size, offset)
    if found != LVD_SIGNATURE_MAGIC:
        raise LvdBadMagicError(LVD_SIGNATURE_MAGIC, found, offset)
    return reader.read_u32()
