"""Binary encoder for values.

This module provides the encode() function that converts a value to its
canonical binary form: the smallest tag the variant allows, big-endian
payloads, and map entries sorted by the encoded bytes of their keys.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from ..models.value import (
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
)
from . import tags
from .buffer import ByteWriter

# Variants that always use their explicit tag at their exact width
_UNSIGNED: dict[type[Value], tuple[int, int]] = {
    Uint16: (tags.UINT16, 2),
    Uint32: (tags.UINT32, 4),
    Uint64: (tags.UINT64, 8),
}
_SIGNED: dict[type[Value], tuple[int, int]] = {
    Int16: (tags.INT16, 2),
    Int32: (tags.INT32, 4),
    Int64: (tags.INT64, 8),
}


def encode(value: Value) -> bytes:
    """Encode a value to its canonical binary form.

    Encoding is total: every constructible value has exactly one encoding.

    Args:
        value: Value to encode

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If a payload is longer than a 32-bit length prefix allows
        TypeError: If value is not a binarypack value

    Examples:
        ```python
        from binarypack import Int8, Uint8, Uint16, encode

        encode(Uint8(5))      # b"\\x05"
        encode(Uint8(200))    # b"\\xcc\\xc8"
        encode(Uint16(258))   # b"\\xcd\\x01\\x02"
        encode(Int8(-31))     # b"\\xe1"
        ```
    """
    writer = ByteWriter()
    _encode_value(writer, value)
    return writer.to_bytes()


def _encode_value(writer: ByteWriter, value: Value) -> None:
    """Encode a single value, recursing into containers.

    Args:
        writer: ByteWriter to write to
        value: Value to encode
    """
    variant = type(value)

    # Unsigned 8-bit: positive fixint when it fits in 7 bits
    if variant is Uint8:
        if value.value <= tags.POSITIVE_FIXINT_MAX:
            writer.write_uint(value.value, 1)
        else:
            writer.write_uint(tags.UINT8, 1)
            writer.write_uint(value.value, 1)
        return

    # Signed 8-bit: negative fixint for [-32, -1]
    if variant is Int8:
        if tags.NEGATIVE_FIXINT_MIN <= value.value < 0:
            writer.write_uint((value.value + 0x20) ^ tags.NEGATIVE_FIXINT, 1)
        else:
            writer.write_uint(tags.INT8, 1)
            writer.write_int(value.value, 1)
        return

    if variant in _UNSIGNED:
        tag, width = _UNSIGNED[variant]
        writer.write_uint(tag, 1)
        writer.write_uint(value.value, width)
        return

    if variant in _SIGNED:
        tag, width = _SIGNED[variant]
        writer.write_uint(tag, 1)
        writer.write_int(value.value, width)
        return

    if variant is Float:
        writer.write_uint(tags.FLOAT32, 1)
        writer.write_uint(value.bits, 4)
        return

    if variant is Double:
        writer.write_uint(tags.FLOAT64, 1)
        writer.write_double(value.value)
        return

    if variant is Bool:
        writer.write_uint(tags.TRUE if value.value else tags.FALSE, 1)
        return

    if variant is Null:
        writer.write_uint(tags.NIL, 1)
        return

    # Not in the decoder's table, so it decodes back to Undefined
    if variant is Undefined:
        writer.write_uint(tags.UNDEFINED, 1)
        return

    if variant is Raw:
        _write_header(writer, tags.RAW_TAGS, len(value.value))
        writer.write_bytes(value.value)
        return

    if variant is String:
        payload = value.value.encode("utf-8")
        _write_header(writer, tags.STR_TAGS, len(payload))
        writer.write_bytes(payload)
        return

    if variant is Array:
        _write_header(writer, tags.ARRAY_TAGS, len(value.elements))
        for element in value.elements:
            _encode_value(writer, element)
        return

    if variant is Map:
        _write_header(writer, tags.MAP_TAGS, len(value.entries))
        for encoded_key, item in _sorted_entries(value):
            writer.write_bytes(encoded_key)
            _encode_value(writer, item)
        return

    raise TypeError(f"Expected a binarypack value, got {variant.__name__}")


def _write_header(writer: ByteWriter, family: tuple[int, int, int], length: int) -> None:
    """Write the tag and length prefix for a sized payload.

    Args:
        writer: ByteWriter to write to
        family: (fixed tag, 16-bit length tag, 32-bit length tag)
        length: Payload length (bytes for raw/str, items for array/map)

    Raises:
        EncodeError: If length does not fit in 32 bits
    """
    fixed_tag, tag16, tag32 = family

    if length <= tags.FIX_SIZE_MAX:
        writer.write_uint(fixed_tag + length, 1)
    elif length <= tags.LENGTH16_MAX:
        writer.write_uint(tag16, 1)
        writer.write_uint(length, 2)
    elif length <= tags.LENGTH32_MAX:
        writer.write_uint(tag32, 1)
        writer.write_uint(length, 4)
    else:
        raise EncodeError(f"Length {length} exceeds the 32-bit length prefix")


def _sorted_entries(value: Map) -> list[tuple[bytes, Value]]:
    """Return map entries as (encoded key, value) ordered by encoded key."""
    return sorted(
        ((encode(key), item) for key, item in value.entries),
        key=lambda entry: entry[0],
    )
