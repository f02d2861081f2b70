"""Collision geometry records.

A collision is a polyline of vertices with per-edge normals, cliff
markers, and per-edge surface attributes. Later revisions attach
spirits-mode floor metadata.
"""

from __future__ import annotations

from enum import IntEnum

from codec.array import array_of
from codec.fixed_string import FixedString64
from codec.packed_flags import FlagsField, PackedFlags
from codec.primitives import F32, U32, EnumCodec
from codec.record import Field, TaggedRecord
from codec.versioned import versioned
from objects.base import Base, MetaInfo
from objects.vector import Vector2


class CollisionFlags(PackedFlags):
    """Global attributes of a collision, stored unversioned."""

    __slots__ = ()
    WIDTH = 32
    BITS = {"throughable": 0, "dynamic": 16}


_ATTRIBUTE_FLAG_NAMES = (
    "length0",
    "packman_final_ignore",
    "fall",
    "ignore_ray_check",
    "dive",
    "unpaintable",
    "item",
    "ignore_fighter_other",
    "right",
    "left",
    "upper",
    "under",
    "not_attach",
    "throughable",
    "hang_l",
    "hang_r",
    "ignore_link_from_left",
    "cloud",
    "ignore_link_from_right",
    "not_expand_near_search",
    "ignore",
    "breakable",
    "immediate_relanding_ban",
    "ignore_line_type1",
    "pickel_block",
    "deceleration",
    "virtual_hit_line_up",
    "virtual_hit_line_left",
    "virtual_hit_line_right",
    "virtual_hit_line_down",
    "virtual_wall_hit_line",
    "ignore_boss",
)


class AttributeFlags(PackedFlags):
    """Per-edge attribute switches; the upper 32 bits are reserved."""

    __slots__ = ()
    WIDTH = 64
    BITS = {name: position for position, name in enumerate(_ATTRIBUTE_FLAG_NAMES)}


class MaterialType(IntEnum):
    """Surface material of a collision edge."""

    NONE = 0
    ROCK = 1
    GRASS = 2
    SOIL = 3
    WOOD = 4
    IRON = 5
    NIBUIRON = 6
    CARPET = 7
    NUMENUME = 8
    CREATURE = 9
    ASASE = 10
    SOFT = 11
    TURUTURU = 12
    SNOW = 13
    ICE = 14
    GAMEWATCH = 15
    OIL = 16
    DANBOURU = 17
    DAMAGE1 = 18
    DAMAGE2 = 19
    DAMAGE3 = 20
    PLANKTON = 21
    CLOUD = 22
    AKUUKAN = 23
    BRICK = 24
    NOATTR = 25
    MARIO = 26
    WIRENETTING = 27
    SAND = 28
    HOMERUN = 29
    ASASE_EARTH = 30
    DEATH = 31
    RINGMAT = 32
    GLASS = 33
    SLIPDX = 34
    SP_POISON = 35
    SP_FLAME = 36
    SP_ELECTRIC_SHOCK = 37
    SP_SLEEP = 38
    SP_FREEZING = 39
    SP_ADHESION = 40
    ICE_NO_SLIP = 41
    CLOUD_NO_THROUGH = 42
    JACK_MEMENTOES = 43


class CollisionAttribute(TaggedRecord):
    """Material and flags of one collision edge."""

    __slots__ = ()
    VARIANTS = {
        1: (
            Field("material", EnumCodec(MaterialType)),
            Field("flags", FlagsField(AttributeFlags)),
        ),
    }


class CollisionCliff(TaggedRecord):
    """Ledge grab point on a collision."""

    __slots__ = ()
    VARIANTS = {
        1: (Field("pos", versioned(Vector2)), Field("lr", F32)),
        2: (
            Field("base", versioned(Base)),
            Field("pos", versioned(Vector2)),
            Field("lr", F32),
        ),
        3: (
            Field("base", versioned(Base)),
            Field("pos", versioned(Vector2)),
            Field("lr", F32),
            Field("line_index", U32),
        ),
    }


_SPIRITS_FLOOR_V1 = (
    Field("base", versioned(Base)),
    Field("line_index", U32),
    Field("line_group", versioned(FixedString64)),
)


class CollisionSpiritsFloor(TaggedRecord):
    """Spirits-mode floor metadata for one collision edge."""

    __slots__ = ()
    VARIANTS = {
        1: _SPIRITS_FLOOR_V1,
        2: _SPIRITS_FLOOR_V1 + tuple(Field(f"unk{index}", F32) for index in range(1, 7)),
    }


_COLLISION_GEOMETRY = (
    Field("flags", FlagsField(CollisionFlags)),
    Field("vertices", array_of(Vector2)),
    Field("normals", array_of(Vector2)),
    Field("cliffs", array_of(CollisionCliff)),
)
_COLLISION_V2 = (Field("base", versioned(Base)),) + _COLLISION_GEOMETRY
_COLLISION_V3 = _COLLISION_V2 + (Field("attributes", array_of(CollisionAttribute)),)
_COLLISION_V4 = _COLLISION_V3 + (Field("spirits_floors", array_of(CollisionSpiritsFloor)),)


class Collision(TaggedRecord):
    """Collision polyline with its edge metadata."""

    __slots__ = ()
    VARIANTS = {
        1: (Field("meta_info", versioned(MetaInfo)),) + _COLLISION_GEOMETRY,
        2: _COLLISION_V2,
        3: _COLLISION_V3,
        4: _COLLISION_V4,
    }
