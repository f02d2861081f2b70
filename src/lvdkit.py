"""Public SDK surface for lvdkit.

This module provides a stable import path for library users.
It re-exports the file model, object records, and IO helpers.
"""

from __future__ import annotations

from codec.array import Array
from codec.fixed_string import FixedString32, FixedString56, FixedString64
from codec.tag import Tag
from core.config import LvdConfig
from core.errors import LvdDecodeError, LvdError, LvdTextFormatError, LvdValueError
from objects.base import Base, Id, MetaInfo, VersionInfo
from objects.collision import (
    AttributeFlags,
    Collision,
    CollisionAttribute,
    CollisionCliff,
    CollisionFlags,
    CollisionSpiritsFloor,
    MaterialType,
)
from objects.envelope import Lvd, LvdFile, decode_lvd_file, encode_lvd_file
from objects.shape import LvdPath, Shape2, Shape3, ShapeArray2, ShapeArrayElement2
from objects.vector import Rect, Vector2, Vector3
from store.lvd_file_io import read_lvd_file, write_lvd_file
from store.yaml_io import dump_lvd_yaml, load_lvd_yaml, read_yaml_file, write_yaml_file

__all__ = [
    "Array",
    "AttributeFlags",
    "Base",
    "Collision",
    "CollisionAttribute",
    "CollisionCliff",
    "CollisionFlags",
    "CollisionSpiritsFloor",
    "FixedString32",
    "FixedString56",
    "FixedString64",
    "Id",
    "Lvd",
    "LvdConfig",
    "LvdDecodeError",
    "LvdError",
    "LvdFile",
    "LvdPath",
    "LvdTextFormatError",
    "LvdValueError",
    "MaterialType",
    "MetaInfo",
    "Rect",
    "Shape2",
    "Shape3",
    "ShapeArray2",
    "ShapeArrayElement2",
    "Tag",
    "Vector2",
    "Vector3",
    "VersionInfo",
    "decode_lvd_file",
    "dump_lvd_yaml",
    "encode_lvd_file",
    "load_lvd_yaml",
    "read_lvd_file",
    "read_yaml_file",
    "write_lvd_file",
    "write_yaml_file",
]
