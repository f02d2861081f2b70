"""Two- and three-dimensional shape records.

Shapes are unions discriminated by a leading u32 kind code. Every
two-dimensional kind carries a trailing path, which is empty except for
the ``path`` kind.
"""

from __future__ import annotations

from codec.array import Array, array_of
from codec.primitives import F32
from codec.record import Field, KindedRecord, Padding, TaggedRecord
from codec.versioned import versioned
from objects.vector import Vector2


class LvdPath(TaggedRecord):
    """Ordered points forming an open path."""

    __slots__ = ()
    VARIANTS = {1: (Field("points", array_of(Vector2)),)}


def _path_field() -> Field:
    return Field("path", versioned(LvdPath))


class Shape2(KindedRecord):
    """Two-dimensional shape: point, circle, rect or path."""

    __slots__ = ()
    WIRE_VERSION = 3
    KINDS = {
        "point": (
            1,
            (Field("pos_x", F32), Field("pos_y", F32), Padding(8), _path_field()),
        ),
        "circle": (
            2,
            (
                Field("pos_x", F32),
                Field("pos_y", F32),
                Field("radius", F32),
                Padding(4),
                _path_field(),
            ),
        ),
        "rect": (
            3,
            (
                Field("left", F32),
                Field("right", F32),
                Field("bottom", F32),
                Field("top", F32),
                _path_field(),
            ),
        ),
        "path": (4, (Padding(16), _path_field())),
    }


class Shape3(KindedRecord):
    """Three-dimensional shape: box, sphere, capsule or point."""

    __slots__ = ()
    WIRE_VERSION = 1
    KINDS = {
        "box": (
            1,
            (
                Field("left", F32),
                Field("right", F32),
                Field("bottom", F32),
                Field("top", F32),
                Field("back", F32),
                Field("front", F32),
                Padding(4),
            ),
        ),
        "sphere": (
            2,
            (
                Field("pos_x", F32),
                Field("pos_y", F32),
                Field("pos_z", F32),
                Field("radius", F32),
                Padding(12),
            ),
        ),
        "capsule": (
            3,
            (
                Field("pos_x", F32),
                Field("pos_y", F32),
                Field("pos_z", F32),
                Field("vec_x", F32),
                Field("vec_y", F32),
                Field("vec_z", F32),
                Field("radius", F32),
            ),
        ),
        "point": (
            4,
            (Field("pos_x", F32), Field("pos_y", F32), Field("pos_z", F32), Padding(16)),
        ),
    }


class ShapeArrayElement2(TaggedRecord):
    """Single wrapped entry of a ``ShapeArray2``."""

    __slots__ = ()
    VARIANTS = {1: (Field("shape", versioned(Shape2)),)}


class ShapeArray2(TaggedRecord):
    """Collection of two-dimensional shapes."""

    __slots__ = ()
    VARIANTS = {1: (Field("shapes", array_of(ShapeArrayElement2)),)}


def empty_path() -> LvdPath:
    return LvdPath(1, points=Array())


def point2(x: float, y: float) -> Shape2:
    return Shape2("point", pos_x=float(x), pos_y=float(y), path=empty_path())


def circle2(x: float, y: float, radius: float) -> Shape2:
    return Shape2("circle", pos_x=float(x), pos_y=float(y), radius=float(radius), path=empty_path())


def shape_array(*shapes: Shape2) -> ShapeArray2:
    """Wrap shapes into a ``ShapeArray2``."""
    return ShapeArray2(1, shapes=Array(ShapeArrayElement2(1, shape=shape) for shape in shapes))
