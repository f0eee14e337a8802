"""binarypack: self-describing binary serialization

A Python library for a compact, msgpack-style binary format. Every encoded
value carries its own type tag, so any buffer can be decoded without a shared
schema.

Key Features:
- Closed, immutable value model built on Pydantic
- Canonical encoding (smallest tag, sorted map keys)
- Bit-exact IEEE-754 float handling
- Lenient decoding of unknown tags, optional strict mode and depth limit

Quick Start:
    >>> from binarypack import Array, Map, String, Uint8, decode, encode
    >>>
    >>> value = Map({String("ids"): Array([Uint8(1), Uint8(2)])})
    >>> data = encode(value)
    >>> decode(data) == value
    True
    >>>
    >>> # Plain Python objects
    >>> from binarypack import packb, unpackb
    >>> unpackb(packb({"depth": 1500, "ok": True})) == {"depth": 1500, "ok": True}
    True
"""

from __future__ import annotations

from typing import Any

from .codec import DecoderConfig, decode, decode_from, encode
from .exceptions import (
    BinaryPackError,
    ConversionError,
    DecodeError,
    EncodeError,
    EndOfDataError,
    NestingDepthError,
    TextDecodeError,
    UnknownTagError,
)
from .models import (
    AnyValue,
    Array,
    Bool,
    Double,
    Float,
    Int8,
    Int16,
    Int32,
    Int64,
    Map,
    Null,
    Raw,
    String,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    Undefined,
    Value,
    from_python,
    to_python,
)
from .utils import encoded_size

__version__ = "0.1.0"


def packb(obj: Any) -> bytes:
    """Encode plain Python objects.

    Shorthand for ``encode(from_python(obj))``.

    Raises:
        EncodeError: If obj contains an unsupported type or out-of-range integer
    """
    return encode(from_python(obj))


def unpackb(data: bytes, config: DecoderConfig | None = None) -> Any:
    """Decode bytes to plain Python objects.

    Shorthand for ``to_python(decode(data, config))``.

    Raises:
        DecodeError: If data is truncated or invalid
        ConversionError: If a map has keys that collide as Python objects
    """
    return to_python(decode(data, config))


__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_from",
    "DecoderConfig",
    # Values
    "Value",
    "AnyValue",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Float",
    "Double",
    "Bool",
    "Raw",
    "String",
    "Null",
    "Undefined",
    "Array",
    "Map",
    # Native objects
    "from_python",
    "to_python",
    "packb",
    "unpackb",
    # Exceptions
    "BinaryPackError",
    "DecodeError",
    "EndOfDataError",
    "TextDecodeError",
    "NestingDepthError",
    "UnknownTagError",
    "EncodeError",
    "ConversionError",
    # Sizing
    "encoded_size",
    # Version
    "__version__",
]
