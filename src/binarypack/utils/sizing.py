"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a value
without actually encoding it.
"""

from __future__ import annotations

from ..codec import tags
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

# Tag byte + payload for fixed-width variants
_FIXED_SIZES = {
    Uint16: 3,
    Uint32: 5,
    Uint64: 9,
    Int16: 3,
    Int32: 5,
    Int64: 9,
    Float: 5,
    Double: 9,
    Bool: 1,
    Null: 1,
    Undefined: 1,
}


def encoded_size(value: Value) -> int:
    """Calculate the encoded size of a value in bytes.

    Args:
        value: Value to measure

    Returns:
        Size in bytes, equal to ``len(encode(value))``

    Example:
        >>> encoded_size(Uint8(5))
        1
        >>> encoded_size(String("hello"))
        6  # fixstr tag + 5 bytes
    """
    variant = type(value)

    if variant in _FIXED_SIZES:
        return _FIXED_SIZES[variant]

    if variant is Uint8:
        return 1 if value.value <= tags.POSITIVE_FIXINT_MAX else 2

    if variant is Int8:
        return 1 if tags.NEGATIVE_FIXINT_MIN <= value.value < 0 else 2

    if variant is Raw:
        return header_size(len(value.value)) + len(value.value)

    if variant is String:
        length = len(value.value.encode("utf-8"))
        return header_size(length) + length

    if variant is Array:
        return header_size(len(value)) + sum(encoded_size(item) for item in value)

    if variant is Map:
        return header_size(len(value)) + sum(
            encoded_size(key) + encoded_size(item) for key, item in value.items()
        )

    raise TypeError(f"Expected a binarypack value, got {variant.__name__}")


def header_size(length: int) -> int:
    """Size in bytes of the tag and length prefix for a sized payload.

    Args:
        length: Payload length (bytes for raw/str, items for array/map)

    Returns:
        1 for the fixed-size form, 3 for a 16-bit length, 5 for a 32-bit length
    """
    if length <= tags.FIX_SIZE_MAX:
        return 1
    if length <= tags.LENGTH16_MAX:
        return 3
    return 5
