"""Vector and axis-aligned rectangle records."""

from __future__ import annotations

from codec.primitives import F32
from codec.record import Field, TaggedRecord


class Vector2(TaggedRecord):
    """Two-dimensional vector."""

    __slots__ = ()
    VARIANTS = {1: (Field("x", F32), Field("y", F32))}


class Vector3(TaggedRecord):
    """Three-dimensional vector."""

    __slots__ = ()
    VARIANTS = {1: (Field("x", F32), Field("y", F32), Field("z", F32))}


class Rect(TaggedRecord):
    """Two-dimensional rectangle given by its edge coordinates."""

    __slots__ = ()
    VARIANTS = {
        1: (
            Field("left", F32),
            Field("right", F32),
            Field("top", F32),
            Field("bottom", F32),
        ),
    }


def vec2(x: float, y: float) -> Vector2:
    return Vector2(1, x=float(x), y=float(y))


def vec3(x: float, y: float, z: float) -> Vector3:
    return Vector3(1, x=float(x), y=float(y), z=float(z))
