"""Version-keyed tagged record dispatch.

A tagged record declares one ordered field layout per supported version.
The variant an instance holds is its wire version, so the mapping from
variant to version and from version to layout live in the same table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Mapping, Protocol, TypeVar, Union

from codec.primitives import FieldCodec
from codec.stream import ByteReader, ByteWriter
from core.errors import LvdDecodeError, LvdUnsupportedVersionError, LvdValueError

RecordT = TypeVar("RecordT", bound="TaggedRecord")
KindedT = TypeVar("KindedT", bound="KindedRecord")


@dataclass(frozen=True)
class Field:
    """A named member of a record layout."""

    name: str
    codec: FieldCodec


@dataclass(frozen=True)
class Padding:
    """Unnamed filler bytes: skipped on read, zero-filled on write."""

    size: int

    def skip(self, reader: ByteReader) -> None:
        reader.skip(self.size)

    def emit(self, writer: ByteWriter) -> None:
        writer.write_zeros(self.size)


class LayoutConstant(Protocol):
    """Unnamed layout member whose bytes are fixed by the format."""

    def skip(self, reader: ByteReader) -> None:
        """Consume and validate the constant bytes."""

    def emit(self, writer: ByteWriter) -> None:
        """Write the constant bytes."""


LayoutItem = Union[Field, LayoutConstant]
Layout = tuple[LayoutItem, ...]


def field_names(layout: Layout) -> tuple[str, ...]:
    """Return the named members of a layout in wire order."""
    return tuple(item.name for item in layout if isinstance(item, Field))


def decode_layout(reader: ByteReader, layout: Layout) -> dict[str, Any]:
    """Decode every layout member in declared order.

    Args:
        reader: Input stream positioned at the first member.
        layout: Ordered layout.

    Returns:
        Field values keyed by name, in wire order.
    """
    values: dict[str, Any] = {}
    for item in layout:
        if isinstance(item, Field):
            values[item.name] = item.codec.decode(reader)
        else:
            item.skip(reader)
    return values


def encode_layout(writer: ByteWriter, layout: Layout, values: Mapping[str, Any]) -> None:
    """Encode every layout member in declared order."""
    for item in layout:
        if isinstance(item, Field):
            item.codec.encode(writer, values[item.name])
        else:
            item.emit(writer)


def check_field_names(type_name: str, label: str, layout: Layout, values: Mapping[str, Any]) -> None:
    """Ensure ``values`` names exactly the fields of ``layout``.

    Raises:
        LvdValueError: If a field is missing or unknown.
    """
    expected = field_names(layout)
    missing = [name for name in expected if name not in values]
    unknown = sorted(name for name in values if name not in expected)
    if missing or unknown:
        raise LvdValueError(
            f"Invalid fields for {type_name} {label}: "
            f"missing={missing or '-'}, unknown={unknown or '-'}."
        )


class _LayoutRecord:
    """Immutable field values laid out by one selected layout."""

    __slots__ = ("_selector", "_values")

    def _assign(self, selector: Any, layout: Layout, label: str, values: Mapping[str, Any]) -> None:
        check_field_names(type(self).__name__, label, layout, values)
        object.__setattr__(self, "_selector", selector)
        object.__setattr__(self, "_values", {name: values[name] for name in field_names(layout)})

    @property
    def fields(self) -> Mapping[str, Any]:
        """Field values in wire order."""
        return dict(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} {self._label()} has no field '{name}'"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; use replace().")

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self._values.items())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._selector == other._selector and self._values == other._values

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._selector))

    def __repr__(self) -> str:
        rendered = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"{type(self).__name__}.{self._label()}({rendered})"

    def _label(self) -> str:
        raise NotImplementedError


class TaggedRecord(_LayoutRecord):
    """Base class for a closed set of per-version field layouts.

    Subclasses declare ``VARIANTS`` mapping each supported version number
    to its ordered layout. Version sets are often non-contiguous.
    """

    VARIANTS: ClassVar[Mapping[int, Layout]] = {}

    __slots__ = ()

    def __init__(self, variant: int, **values: Any) -> None:
        """Build a record holding one variant.

        Args:
            variant: Version number of the held layout.
            **values: Exactly the fields declared by that layout.

        Raises:
            LvdValueError: If the variant is unknown or fields mismatch.
        """
        layout = self.VARIANTS.get(variant)
        if layout is None:
            raise LvdValueError(
                f"{type(self).__name__} has no version {variant}; "
                f"supported versions: {self.supported_versions()}."
            )
        self._assign(variant, layout, f"version {variant}", values)

    @classmethod
    def supported_versions(cls) -> tuple[int, ...]:
        """Return supported version numbers in ascending order."""
        return tuple(sorted(cls.VARIANTS))

    @classmethod
    def latest(cls: type[RecordT], **values: Any) -> RecordT:
        """Build the highest supported version from its fields."""
        return cls(max(cls.VARIANTS), **values)

    @classmethod
    def decode(cls: type[RecordT], reader: ByteReader, version: int) -> RecordT:
        """Decode the layout selected by ``version``.

        Raises:
            LvdUnsupportedVersionError: If no variant has this version. Only
                the selector byte has been consumed at that point.
        """
        layout = cls.VARIANTS.get(version)
        if layout is None:
            raise LvdUnsupportedVersionError(cls.__name__, version, reader.position - 1)
        return cls(version, **decode_layout(reader, layout))

    def version(self) -> int:
        return self._selector

    def encode(self, writer: ByteWriter) -> None:
        encode_layout(writer, self.VARIANTS[self._selector], self._values)

    def replace(self: RecordT, **changes: Any) -> RecordT:
        """Return a copy of this variant with some fields changed."""
        return type(self)(self._selector, **{**self._values, **changes})

    def _label(self) -> str:
        return f"V{self._selector}"


class KindedRecord(_LayoutRecord):
    """Base class for a union discriminated by a leading u32 kind code.

    The wire version is fixed for the whole type; the layout is chosen by
    the kind code that follows it. Subclasses declare ``WIRE_VERSION`` and
    ``KINDS`` mapping each kind name to its code and layout.
    """

    WIRE_VERSION: ClassVar[int] = 1
    KINDS: ClassVar[Mapping[str, tuple[int, Layout]]] = {}

    __slots__ = ()

    def __init__(self, kind: str, **values: Any) -> None:
        entry = self.KINDS.get(kind)
        if entry is None:
            raise LvdValueError(
                f"{type(self).__name__} has no kind '{kind}'; expected one of {sorted(self.KINDS)}."
            )
        self._assign(kind, entry[1], f"kind '{kind}'", values)

    @property
    def kind(self) -> str:
        return self._selector

    @classmethod
    def layout_for(cls, kind: str) -> Layout:
        return cls.KINDS[kind][1]

    @classmethod
    def decode(cls: type[KindedT], reader: ByteReader, version: int) -> KindedT:
        """Decode a kind code and the layout it selects.

        Raises:
            LvdUnsupportedVersionError: If ``version`` is not ``WIRE_VERSION``.
            LvdDecodeError: If the kind code is unknown.
        """
        if version != cls.WIRE_VERSION:
            raise LvdUnsupportedVersionError(cls.__name__, version, reader.position - 1)
        offset = reader.position
        code = reader.read_u32()
        for kind, (kind_code, layout) in cls.KINDS.items():
            if kind_code == code:
                return cls(kind, **decode_layout(reader, layout))
        raise LvdDecodeError(f"unknown {cls.__name__} kind code {code}", offset)

    def version(self) -> int:
        return self.WIRE_VERSION

    def encode(self, writer: ByteWriter) -> None:
        code, layout = self.KINDS[self._selector]
        writer.write_u32(code)
        encode_layout(writer, layout, self._values)

    def replace(self: KindedT, **changes: Any) -> KindedT:
        """Return a copy of this kind with some fields changed."""
        return type(self)(self._selector, **{**self._values, **changes})

    def _label(self) -> str:
        return self._selector
