"""Value model for binarypack.

Every decodable/encodable value is one of a closed set of frozen Pydantic
models. Constructors validate their payload, so an out-of-range or
wrongly-typed value is rejected with ``pydantic.ValidationError`` and never
exists as an instance.

Example:
    >>> from binarypack import Array, Map, String, Uint8
    >>> v = Map({String("ids"): Array([Uint8(1), Uint8(2)])})
    >>> v[String("ids")][1]
    Uint8(value=2)
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator
from pydantic_core import PydanticUndefined

_FLOAT32 = struct.Struct(">f")
_UINT32 = struct.Struct(">I")


class Value(BaseModel):
    """Base class for all value variants.

    Equality is structural: two values are equal when they are the same
    variant with the same content. Maps ignore insertion order and floats
    compare by IEEE-754 bit pattern. The hash is taken over the canonical
    encoding, so equal values always hash equal and values can be used as
    Map keys.
    """

    model_config = ConfigDict(
        # Values are immutable after construction
        frozen=True,
        # Forbid extra fields not defined by the variant
        extra="forbid",
    )

    def encode(self) -> bytes:
        """Return the canonical binary encoding of this value."""
        # Import here to avoid circular dependency
        from ..codec.encoder import encode

        return encode(self)

    def to_python(self) -> Any:
        """Convert this value to plain Python objects.

        See :func:`binarypack.models.native.to_python`.
        """
        from .native import to_python

        return to_python(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        # Map entries are encoded in sorted key order, so the canonical
        # encoding is equal exactly when the values are structurally equal
        return type(self) is type(other) and self.encode() == other.encode()

    def __hash__(self) -> int:
        return hash(self.encode())


class _Scalar(Value):
    """Variant holding a single primitive in its ``value`` field."""

    def __init__(self, value: Any = PydanticUndefined, /, **data: Any) -> None:
        if value is not PydanticUndefined:
            data["value"] = value
        super().__init__(**data)


class Uint8(_Scalar):
    """Unsigned 8-bit integer."""

    value: int = Field(ge=0, le=0xFF, strict=True)


class Uint16(_Scalar):
    """Unsigned 16-bit integer."""

    value: int = Field(ge=0, le=0xFFFF, strict=True)


class Uint32(_Scalar):
    """Unsigned 32-bit integer."""

    value: int = Field(ge=0, le=0xFFFFFFFF, strict=True)


class Uint64(_Scalar):
    """Unsigned 64-bit integer."""

    value: int = Field(ge=0, le=0xFFFFFFFFFFFFFFFF, strict=True)


class Int8(_Scalar):
    """Signed 8-bit integer."""

    value: int = Field(ge=-0x80, le=0x7F, strict=True)


class Int16(_Scalar):
    """Signed 16-bit integer."""

    value: int = Field(ge=-0x8000, le=0x7FFF, strict=True)


class Int32(_Scalar):
    """Signed 32-bit integer."""

    value: int = Field(ge=-0x80000000, le=0x7FFFFFFF, strict=True)


class Int64(_Scalar):
    """Signed 64-bit integer."""

    value: int = Field(ge=-0x8000000000000000, le=0x7FFFFFFFFFFFFFFF, strict=True)


class Float(_Scalar):
    """IEEE-754 single precision (binary32) float.

    The value is rounded to the nearest binary32 on construction, so the held
    Python float is exactly what goes on the wire. The binary32 bit pattern is
    kept alongside it in ``bits``; a value decoded from the wire keeps the
    pattern it was read with, including signalling NaN payloads that a Python
    float cannot carry.
    """

    value: float = Field(strict=True)

    _bits: int = PrivateAttr(default=0)

    @field_validator("value")
    @classmethod
    def _round_to_binary32(cls, value: float) -> float:
        try:
            return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
        except OverflowError as err:
            raise ValueError(f"{value!r} is outside the binary32 range") from err

    def model_post_init(self, __context: Any) -> None:
        self._bits = _UINT32.unpack(_FLOAT32.pack(self.value))[0]

    @classmethod
    def from_bits(cls, bits: int) -> Float:
        """Build a Float from its raw binary32 bit pattern.

        Args:
            bits: Unsigned 32-bit integer holding the IEEE-754 pattern

        Raises:
            ValueError: If bits does not fit in 32 bits

        Example:
            >>> Float.from_bits(0x3E200000)
            Float(value=0.15625)
        """
        if not 0 <= bits <= 0xFFFFFFFF:
            raise ValueError(f"binary32 bit pattern must fit in 32 bits, got {bits:#x}")
        result = cls(_FLOAT32.unpack(_UINT32.pack(bits))[0])
        result._bits = bits
        return result

    @property
    def bits(self) -> int:
        """The binary32 bit pattern written on encode."""
        return self._bits


class Double(_Scalar):
    """IEEE-754 double precision (binary64) float."""

    value: float = Field(strict=True)


class Bool(_Scalar):
    """Boolean."""

    value: bool = Field(strict=True)


class Raw(_Scalar):
    """Uninterpreted byte string."""

    value: bytes = Field(strict=True)


class String(_Scalar):
    """UTF-8 text string.

    Strings containing lone surrogates have no UTF-8 encoding and are rejected.
    """

    value: str = Field(strict=True)

    @field_validator("value")
    @classmethod
    def _check_utf8(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as err:
            raise ValueError(f"string is not encodable as UTF-8: {err.reason}") from err
        return value


class Null(Value):
    """The null value."""


class Undefined(Value):
    """Placeholder produced for tag bytes outside the wire table."""


class Array(Value):
    """Ordered sequence of values.

    Supports ``len()``, indexing and iteration over the elements.
    """

    elements: tuple[AnyValue, ...] = Field(default=(), strict=True)

    def __init__(self, elements: Iterable[Value] = (), /, **data: Any) -> None:
        data["elements"] = tuple(data.get("elements", elements))
        super().__init__(**data)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Value:
        return self.elements[index]

    def __iter__(self) -> Iterator[Value]:  # type: ignore[override]
        return iter(self.elements)


class Map(Value):
    """Mapping from value to value.

    Accepts a mapping or an iterable of ``(key, value)`` pairs. Keys are
    unique under structural equality; when the same key is given more than
    once the last value wins. Iterating a Map yields its keys.
    """

    entries: tuple[tuple[AnyValue, AnyValue], ...] = Field(default=(), strict=True)

    _index: dict[Value, Value] = PrivateAttr(default_factory=dict)

    def __init__(
        self,
        entries: Mapping[Value, Value] | Iterable[tuple[Value, Value]] = (),
        /,
        **data: Any,
    ) -> None:
        entries = data.pop("entries", entries)
        if isinstance(entries, (Mapping, Map)):
            entries = entries.items()
        merged = dict(entries)
        super().__init__(entries=tuple(merged.items()), **data)

    def model_post_init(self, __context: Any) -> None:
        self._index = dict(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: Value) -> Value:
        return self._index[key]

    def __iter__(self) -> Iterator[Value]:  # type: ignore[override]
        return iter(self._index)

    def get(self, key: Value, default: Any = None) -> Any:
        return self._index.get(key, default)

    def keys(self) -> Iterator[Value]:
        return iter(self._index.keys())

    def values(self) -> Iterator[Value]:
        return iter(self._index.values())

    def items(self) -> Iterator[tuple[Value, Value]]:
        return iter(self.entries)


AnyValue = (
    Uint8
    | Uint16
    | Uint32
    | Uint64
    | Int8
    | Int16
    | Int32
    | Int64
    | Float
    | Double
    | Bool
    | Raw
    | String
    | Null
    | Undefined
    | Array
    | Map
)

Array.model_rebuild()
Map.model_rebuild()
