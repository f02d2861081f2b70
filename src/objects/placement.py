"""Spawn points, regions and shape-bearing placement records."""

from __future__ import annotations

from codec.array import array_of
from codec.fixed_string import FixedString64
from codec.primitives import BOOL, U32
from codec.record import Field, TaggedRecord
from codec.tag import Tag
from codec.versioned import versioned
from objects.base import Base, MetaInfo
from objects.shape import Shape2, Shape3, ShapeArray2
from objects.vector import Rect, Vector2, Vector3


class Point(TaggedRecord):
    """Named two-dimensional position, e.g. a start or restart position."""

    __slots__ = ()
    VARIANTS = {
        1: (Field("meta_info", versioned(MetaInfo)), Field("pos", versioned(Vector2))),
        2: (Field("base", versioned(Base)), Field("pos", versioned(Vector2))),
    }


class Region(TaggedRecord):
    """Named rectangle, e.g. a camera or blast-zone boundary."""

    __slots__ = ()
    VARIANTS = {
        1: (Field("meta_info", versioned(MetaInfo)), Field("rect", versioned(Rect))),
        2: (Field("base", versioned(Base)), Field("rect", versioned(Rect))),
    }


class DamageShape(TaggedRecord):
    """Three-dimensional hazard volume."""

    __slots__ = ()
    VARIANTS = {
        1: (
            Field("base", versioned(Base)),
            Field("shape", versioned(Shape3)),
            Field("is_damager", BOOL),
            Field("id", U32),
        ),
    }


class ItemPopup(TaggedRecord):
    """Item spawn areas sharing one tag."""

    __slots__ = ()
    VARIANTS = {
        1: (
            Field("base", versioned(Base)),
            Field("tag", versioned(Tag)),
            Field("shapes", versioned(ShapeArray2)),
        ),
    }


class GeneralShape2(TaggedRecord):
    """Tagged two-dimensional shape."""

    __slots__ = ()
    VARIANTS = {
        1: (
            Field("base", versioned(Base)),
            Field("tag", versioned(Tag)),
            Field("shape", versioned(Shape2)),
        ),
    }


class GeneralShape3(TaggedRecord):
    """Tagged three-dimensional shape."""

    __slots__ = ()
    VARIANTS = {
        1: (
            Field("base", versioned(Base)),
            Field("tag", versioned(Tag)),
            Field("shape", versioned(Shape3)),
        ),
    }


_ENEMY_GENERATOR_V1 = (
    Field("base", versioned(Base)),
    Field("appear_shapes", versioned(ShapeArray2)),
    Field("trigger_shapes", versioned(ShapeArray2)),
    Field("unk1", versioned(ShapeArray2)),
    Field("tag", versioned(Tag)),
)
_ENEMY_GENERATOR_V2 = _ENEMY_GENERATOR_V1 + (
    Field("appear_tags", array_of(Tag)),
    Field("unk2", array_of(Tag)),
)


class EnemyGenerator(TaggedRecord):
    """Enemy spawner with its appear and trigger areas."""

    __slots__ = ()
    VARIANTS = {
        1: _ENEMY_GENERATOR_V1,
        2: _ENEMY_GENERATOR_V2,
        3: _ENEMY_GENERATOR_V2 + (Field("trigger_tags", array_of(Tag)),),
    }


_PTRAINER_RANGE_V1 = (
    Field("base", versioned(Base)),
    Field("range_min", versioned(Vector3)),
    Field("range_max", versioned(Vector3)),
    Field("trainers", array_of(Vector3)),
)


class PTrainerRange(TaggedRecord):
    """Movement bounds for the trainer; versions 2 and 3 were never shipped."""

    __slots__ = ()
    VARIANTS = {
        1: _PTRAINER_RANGE_V1,
        4: _PTRAINER_RANGE_V1
        + (
            Field("parent_model_name", versioned(FixedString64)),
            Field("parent_joint_name", versioned(FixedString64)),
        ),
    }


class PTrainerFloatingFloor(TaggedRecord):
    """Floating platform position for the trainer."""

    __slots__ = ()
    VARIANTS = {1: (Field("base", versioned(Base)), Field("pos", versioned(Vector3)))}
