"""Records used by the large-field game modes."""

from __future__ import annotations

from codec.fixed_string import FixedString32
from codec.primitives import I32, U8, U32
from codec.record import Field, TaggedRecord
from codec.tag import Tag
from codec.versioned import versioned
from objects.base import Base, Id
from objects.placement import Region
from objects.shape import LvdPath, Shape2, Shape3
from objects.vector import Rect, Vector2


class FsItem(TaggedRecord):
    __slots__ = ()
    VARIANTS = {
        1: (
            Field("base", versioned(Base)),
            Field("shape", versioned(Shape2)),
            Field("tag", versioned(Tag)),
        ),
    }


class FsCamLimit(TaggedRecord):
    """Camera limit path."""

    __slots__ = ()
    VARIANTS = {1: (Field("base", versioned(Base)), Field("path", versioned(LvdPath)))}


_FS_UNKNOWN_V1 = (
    Field("base", versioned(Base)),
    Field("unk1", versioned(Rect)),
    Field("unk2", versioned(FsCamLimit)),
)


class FsUnknown(TaggedRecord):
    __slots__ = ()
    VARIANTS = {1: _FS_UNKNOWN_V1, 2: _FS_UNKNOWN_V1 + (Field("unk3", U32),)}


class FsAreaCam(TaggedRecord):
    """Camera area; the only object that wraps a full region instead of a base."""

    __slots__ = ()
    VARIANTS = {1: (Field("region", versioned(Region)), Field("unk", U32))}


_FS_AREA_LOCK_V1 = (
    Field("base", versioned(Base)),
    Field("camera_region", versioned(Rect)),
    Field("trigger_region", versioned(Rect)),
    Field("unk1", U32),
)


class FsAreaLock(TaggedRecord):
    """Camera lock with the rectangle that triggers it."""

    __slots__ = ()
    VARIANTS = {
        1: _FS_AREA_LOCK_V1,
        2: _FS_AREA_LOCK_V1 + (Field("unk2", versioned(Vector2)),),
    }


_AREA_LIGHT_V1 = (Field("base", versioned(Base)), Field("shape", versioned(Shape2)))


class AreaLight(TaggedRecord):
    __slots__ = ()
    VARIANTS = {
        1: _AREA_LIGHT_V1,
        2: _AREA_LIGHT_V1
        + (
            Field("unk1", versioned(FixedString32)),
            Field("unk2", versioned(FixedString32)),
        ),
    }


class FsStartPoint(TaggedRecord):
    """Numbered player start position."""

    __slots__ = ()
    VARIANTS = {
        1: (
            Field("base", versioned(Base)),
            Field("pos", versioned(Vector2)),
            Field("id", versioned(Id)),
        ),
    }


_AREA_HINT_V1 = (
    Field("base", versioned(Base)),
    Field("shape", versioned(Shape3)),
    Field("unk1", I32),
    Field("unk2", I32),
    Field("unk3", I32),
    Field("unk4", I32),
)
_AREA_HINT_V2 = _AREA_HINT_V1 + (Field("unk5", U8),)


class AreaHint(TaggedRecord):
    __slots__ = ()
    VARIANTS = {
        1: _AREA_HINT_V1,
        2: _AREA_HINT_V2,
        3: _AREA_HINT_V2 + (Field("unk6", I32), Field("unk7", I32)),
    }


class SplitArea(TaggedRecord):
    __slots__ = ()
    VARIANTS = {1: (Field("base", versioned(Base)), Field("shape", versioned(Shape3)))}
