"""Plain-data payload mapping for decoded LVD graphs.

This module converts the object graph to and from JSON/YAML-safe data.
Conversion back is directed by the field layouts, so every node is
validated against the type its position requires.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Mapping

from codec.array import Array, ArrayOf
from codec.fixed_string import FixedString
from codec.packed_flags import FlagsField, PackedFlags
from codec.primitives import BoolCodec, EnumCodec, ScalarCodec
from codec.record import Field, KindedRecord, Layout, TaggedRecord, field_names
from codec.tag import Tag
from codec.versioned import VersionedField
from core.errors import LvdTextFormatError, LvdValueError
from objects.base import Id
from objects.envelope import Lvd, LvdFile

_VERSION_KEY_PREFIX = "V"
_RESERVED_KEY = "reserved"


def lvd_file_to_payload(lvd_file: LvdFile) -> dict[str, Any]:
    """Serialize a decoded file into plain data.

    Args:
        lvd_file: Decoded file.

    Returns:
        Mapping with ``header`` and ``lvd`` keys.
    """
    return {"header": lvd_file.header, "lvd": value_to_payload(lvd_file.lvd)}


def lvd_file_from_payload(payload: Any) -> LvdFile:
    """Build a file from plain data produced by ``lvd_file_to_payload``.

    Raises:
        LvdTextFormatError: If any node does not fit its position.
    """
    if not isinstance(payload, Mapping):
        raise LvdTextFormatError(f"$: expected mapping, got {_type_label(payload)}")
    unknown = sorted(str(key) for key in payload if key not in ("header", "lvd"))
    if unknown:
        raise LvdTextFormatError(f"$: unknown keys {unknown}")
    if "lvd" not in payload:
        raise LvdTextFormatError("$: missing key 'lvd'")
    header = payload.get("header")
    if header is not None and (isinstance(header, bool) or not isinstance(header, int)):
        raise LvdTextFormatError(f"$.header: expected integer or null, got {_type_label(header)}")
    if header is not None and not 0 <= header <= 0xFFFFFFFF:
        raise LvdTextFormatError(f"$.header: value {header} does not fit u32")
    lvd = value_from_payload(Lvd, payload["lvd"], "$.lvd")
    return LvdFile(lvd=lvd, header=header)


def value_to_payload(value: Any) -> Any:
    """Convert one graph node into plain data."""
    if isinstance(value, TaggedRecord):
        body = {name: value_to_payload(item) for name, item in value}
        return {f"{_VERSION_KEY_PREFIX}{value.version()}": body}
    if isinstance(value, KindedRecord):
        return {value.kind: {name: value_to_payload(item) for name, item in value}}
    if isinstance(value, Array):
        return [value_to_payload(element) for element in value]
    if isinstance(value, PackedFlags):
        flags: dict[str, Any] = dict(value.named_flags())
        if value.reserved:
            flags[_RESERVED_KEY] = value.reserved
        return flags
    if isinstance(value, FixedString):
        return value.to_text()
    if isinstance(value, Tag):
        return str(value)
    if isinstance(value, Id):
        return value.value
    if isinstance(value, IntEnum):
        return value.name
    if isinstance(value, (bool, int, float)):
        return value
    raise LvdValueError(f"Cannot convert {type(value).__name__} to payload.")


def value_from_payload(value_type: Any, node: Any, path: str) -> Any:
    """Build a value of ``value_type`` from plain data.

    Args:
        value_type: Decoder type (record class, ``ArrayOf``, string or tag type).
        node: Plain data node.
        path: Location of ``node`` for error messages.

    Raises:
        LvdTextFormatError: If ``node`` does not fit ``value_type``.
    """
    if isinstance(value_type, ArrayOf):
        if not isinstance(node, list):
            raise LvdTextFormatError(f"{path}: expected list, got {_type_label(node)}")
        return Array(
            value_from_payload(value_type.element_type, element, f"{path}[{index}]")
            for index, element in enumerate(node)
        )
    if isinstance(value_type, type) and issubclass(value_type, TaggedRecord):
        return _tagged_record_from_payload(value_type, node, path)
    if isinstance(value_type, type) and issubclass(value_type, KindedRecord):
        return _kinded_record_from_payload(value_type, node, path)
    if value_type is Tag or (isinstance(value_type, type) and issubclass(value_type, FixedString)):
        if not isinstance(node, str):
            raise LvdTextFormatError(f"{path}: expected string, got {_type_label(node)}")
        return _build(path, value_type.from_str, node)
    if value_type is Id:
        if isinstance(node, bool) or not isinstance(node, int):
            raise LvdTextFormatError(f"{path}: expected integer, got {_type_label(node)}")
        return _build(path, Id, node)
    raise LvdTextFormatError(f"{path}: unsupported value type {value_type!r}")


def _tagged_record_from_payload(record_type: type[TaggedRecord], node: Any, path: str) -> TaggedRecord:
    key, body = _single_entry(node, path)
    version = _parse_version_key(key, path)
    layout = record_type.VARIANTS.get(version)
    if layout is None:
        raise LvdTextFormatError(
            f"{path}: {record_type.__name__} has no version {version}; "
            f"supported versions: {record_type.supported_versions()}"
        )
    values = _fields_from_payload(layout, body, f"{path}.{key}")
    return _build(path, lambda: record_type(version, **values))


def _kinded_record_from_payload(record_type: type[KindedRecord], node: Any, path: str) -> KindedRecord:
    kind, body = _single_entry(node, path)
    if kind not in record_type.KINDS:
        raise LvdTextFormatError(
            f"{path}: unknown {record_type.__name__} kind '{kind}'; "
            f"expected one of {sorted(record_type.KINDS)}"
        )
    values = _fields_from_payload(record_type.layout_for(kind), body, f"{path}.{kind}")
    return _build(path, lambda: record_type(kind, **values))


def _fields_from_payload(layout: Layout, body: Any, path: str) -> dict[str, Any]:
    if not isinstance(body, Mapping):
        raise LvdTextFormatError(f"{path}: expected mapping, got {_type_label(body)}")
    expected = field_names(layout)
    unknown = sorted(str(name) for name in body if name not in expected)
    if unknown:
        raise LvdTextFormatError(f"{path}: unknown fields {unknown}")
    missing = [name for name in expected if name not in body]
    if missing:
        raise LvdTextFormatError(f"{path}: missing fields {missing}")
    codecs = {item.name: item.codec for item in layout if isinstance(item, Field)}
    return {
        name: _field_from_payload(codecs[name], body[name], f"{path}.{name}") for name in expected
    }


def _field_from_payload(codec: Any, node: Any, path: str) -> Any:
    if isinstance(codec, VersionedField):
        return value_from_payload(codec.value_type, node, path)
    if isinstance(codec, BoolCodec):
        if not isinstance(node, bool):
            raise LvdTextFormatError(f"{path}: expected boolean, got {_type_label(node)}")
        return node
    if isinstance(codec, ScalarCodec):
        return _scalar_from_payload(codec, node, path)
    if isinstance(codec, EnumCodec):
        return _enum_from_payload(codec.enum_type, node, path)
    if isinstance(codec, FlagsField):
        return _flags_from_payload(codec.flags_type, node, path)
    raise LvdTextFormatError(f"{path}: unsupported field codec {codec!r}")


def _scalar_from_payload(codec: ScalarCodec, node: Any, path: str) -> Any:
    if isinstance(node, bool) or not isinstance(node, (int, float)):
        raise LvdTextFormatError(f"{path}: expected {codec.type_name} number, got {_type_label(node)}")
    if codec.python_type is int and not isinstance(node, int):
        raise LvdTextFormatError(f"{path}: expected integer for {codec.type_name}, got {node!r}")
    return codec.python_type(node)


def _enum_from_payload(enum_type: type[IntEnum], node: Any, path: str) -> IntEnum:
    if not isinstance(node, str) or node not in enum_type.__members__:
        raise LvdTextFormatError(
            f"{path}: expected {enum_type.__name__} member name, got {node!r}"
        )
    return enum_type[node]


def _flags_from_payload(flags_type: type[PackedFlags], node: Any, path: str) -> PackedFlags:
    if not isinstance(node, Mapping):
        raise LvdTextFormatError(f"{path}: expected mapping, got {_type_label(node)}")
    named: dict[str, bool] = {}
    for name, enabled in node.items():
        if name == _RESERVED_KEY:
            continue
        if name not in flags_type.BITS:
            raise LvdTextFormatError(f"{path}: unknown {flags_type.__name__} flag '{name}'")
        if not isinstance(enabled, bool):
            raise LvdTextFormatError(f"{path}.{name}: expected boolean, got {_type_label(enabled)}")
        named[name] = enabled
    reserved = node.get(_RESERVED_KEY, 0)
    if isinstance(reserved, bool) or not isinstance(reserved, int):
        raise LvdTextFormatError(f"{path}.{_RESERVED_KEY}: expected integer, got {_type_label(reserved)}")
    return _build(path, lambda: flags_type.from_flags(reserved=reserved, **named))


def _single_entry(node: Any, path: str) -> tuple[str, Any]:
    if not isinstance(node, Mapping) or len(node) != 1:
        raise LvdTextFormatError(f"{path}: expected mapping with exactly one key, got {_type_label(node)}")
    ((key, body),) = node.items()
    if not isinstance(key, str):
        raise LvdTextFormatError(f"{path}: expected string key, got {key!r}")
    return key, body


def _parse_version_key(key: str, path: str) -> int:
    digits = key[len(_VERSION_KEY_PREFIX) :]
    if not key.startswith(_VERSION_KEY_PREFIX) or not digits.isdigit():
        raise LvdTextFormatError(f"{path}: expected version key like 'V1', got '{key}'")
    return int(digits)


def _build(path: str, factory: Any, *args: Any) -> Any:
    """Run a constructor and attach the payload path to value errors."""
    try:
        return factory(*args)
    except LvdValueError as error:
        raise LvdTextFormatError(f"{path}: {error}") from error


def _type_label(node: Any) -> str:
    if node is None:
        return "null"
    if isinstance(node, Mapping):
        return "mapping"
    if isinstance(node, list):
        return "list"
    return type(node).__name__
