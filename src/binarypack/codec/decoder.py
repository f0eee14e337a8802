"""Binary decoder for values.

This module provides the decode() function that rebuilds a value from its
binary form. Decoding reads one tag byte, dispatches on it, and recurses into
container contents. The input buffer is never modified.
"""

from __future__ import annotations

import logging

from ..exceptions import EndOfDataError, NestingDepthError, TextDecodeError, UnknownTagError
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
from .buffer import ByteReader
from .config import DEFAULT_CONFIG, DecoderConfig

logger = logging.getLogger(__name__)

Buffer = bytes | bytearray | memoryview

_UNSIGNED = {
    tags.UINT8: (Uint8, 1),
    tags.UINT16: (Uint16, 2),
    tags.UINT32: (Uint32, 4),
    tags.UINT64: (Uint64, 8),
}
_SIGNED = {
    tags.INT8: (Int8, 1),
    tags.INT16: (Int16, 2),
    tags.INT32: (Int32, 4),
    tags.INT64: (Int64, 8),
}
# Length-prefixed tags: tag -> (family, prefix width)
_SIZED = {
    tags.STR16: (String, 2),
    tags.STR32: (String, 4),
    tags.RAW16: (Raw, 2),
    tags.RAW32: (Raw, 4),
    tags.ARRAY16: (Array, 2),
    tags.ARRAY32: (Array, 4),
    tags.MAP16: (Map, 2),
    tags.MAP32: (Map, 4),
}


def decode(data: Buffer, config: DecoderConfig | None = None) -> Value:
    """Decode one value from the start of ``data``.

    Trailing bytes after the value are ignored.

    Args:
        data: Binary data to decode
        config: Optional decoder limits; defaults to lenient, unlimited decoding

    Returns:
        Decoded value

    Raises:
        EndOfDataError: If data ends before the value is complete
        TextDecodeError: If a string payload is not valid UTF-8
        NestingDepthError: If containers nest deeper than config.max_depth
        UnknownTagError: If config.strict_tags is set and a tag is unrecognised

    Examples:
        ```python
        from binarypack import Float, decode

        decode(b"\\xe1")                    # Int8(value=-31)
        decode(b"\\xca\\x3e\\x20\\x00\\x00")  # Float(value=0.15625)
        ```
    """
    value, _ = decode_from(data, 0, config)
    return value


def decode_from(
    data: Buffer, offset: int = 0, config: DecoderConfig | None = None
) -> tuple[Value, int]:
    """Decode one value starting at ``offset``.

    Args:
        data: Binary data to decode
        offset: Position of the value's tag byte
        config: Optional decoder limits

    Returns:
        Tuple of (decoded value, offset just past the value)

    Raises:
        EndOfDataError: If data ends before the value is complete, or offset
            is past the end of data
        TextDecodeError: If a string payload is not valid UTF-8
        NestingDepthError: If containers nest deeper than allowed
        UnknownTagError: If config.strict_tags is set and a tag is unrecognised
        ValueError: If offset is negative

    Example:
        >>> stream = b"\\x01\\x02\\x03"
        >>> pos, values = 0, []
        >>> while pos < len(stream):
        ...     value, pos = decode_from(stream, pos)
        ...     values.append(value)
    """
    if config is None:
        config = DEFAULT_CONFIG

    try:
        reader = ByteReader(data, offset)
    except ValueError as e:
        if offset < 0:
            raise
        raise EndOfDataError(f"Offset {offset} is past the end of data: {e}", offset=offset) from e

    try:
        value = _decode_value(reader, config, 0)
    except IndexError as e:
        logger.debug("Truncated input at offset %d: %s", reader.position(), e)
        raise EndOfDataError(
            f"Truncated data at offset {reader.position()}: {e}", offset=reader.position()
        ) from e
    except RecursionError as e:
        raise NestingDepthError(
            f"Containers nested too deeply at offset {reader.position()}"
        ) from e

    return value, reader.position()


def _decode_value(reader: ByteReader, config: DecoderConfig, depth: int) -> Value:
    """Decode a single value.

    Args:
        reader: ByteReader positioned at a tag byte
        config: Decoder limits
        depth: Nesting depth of the value being decoded

    Returns:
        Decoded value

    Raises:
        IndexError: If data is truncated
        DecodeError: If data is invalid
    """
    tag_offset = reader.position()
    tag = reader.read_uint(1)

    # Positive fixint
    if tag <= tags.POSITIVE_FIXINT_MAX:
        return Uint8(tag)

    # Negative fixint
    if (tag ^ tags.NEGATIVE_FIXINT) < 0x20:
        return Int8((tag ^ tags.NEGATIVE_FIXINT) - 0x20)

    # Fixed-size forms
    size = tag ^ tags.FIXMAP
    if size <= tags.FIX_SIZE_MAX:
        return _decode_map(reader, config, depth, size)

    size = tag ^ tags.FIXARRAY
    if size <= tags.FIX_SIZE_MAX:
        return _decode_array(reader, config, depth, size)

    size = tag ^ tags.FIXRAW
    if size <= tags.FIX_SIZE_MAX:
        return Raw(reader.read_bytes(size))

    size = tag ^ tags.FIXSTR
    if size <= tags.FIX_SIZE_MAX:
        return _decode_string(reader, size)

    if tag == tags.NIL:
        return Null()
    if tag == tags.FALSE:
        return Bool(False)
    if tag == tags.TRUE:
        return Bool(True)

    if tag == tags.FLOAT32:
        return Float.from_bits(reader.read_uint(4))
    if tag == tags.FLOAT64:
        return Double(reader.read_double())

    if tag in _UNSIGNED:
        variant, width = _UNSIGNED[tag]
        return variant(reader.read_uint(width))

    if tag in _SIGNED:
        variant, width = _SIGNED[tag]
        return variant(reader.read_int(width))

    if tag in _SIZED:
        family, width = _SIZED[tag]
        size = reader.read_uint(width)
        if family is String:
            return _decode_string(reader, size)
        if family is Raw:
            return Raw(reader.read_bytes(size))
        if family is Array:
            return _decode_array(reader, config, depth, size)
        return _decode_map(reader, config, depth, size)

    if config.strict_tags:
        raise UnknownTagError(
            f"Unknown tag 0x{tag:02x} at offset {tag_offset}", tag=tag, offset=tag_offset
        )

    logger.debug("Unknown tag 0x%02x at offset %d decoded as Undefined", tag, tag_offset)
    return Undefined()


def _decode_string(reader: ByteReader, size: int) -> String:
    """Read ``size`` bytes and validate them as UTF-8."""
    start = reader.position()
    payload = reader.read_bytes(size)

    try:
        return String(payload.decode("utf-8"))
    except UnicodeDecodeError as e:
        logger.debug("Invalid UTF-8 in string at offset %d", start)
        raise TextDecodeError(f"Invalid UTF-8 in string at offset {start}: {e}") from e


def _enter_container(reader: ByteReader, config: DecoderConfig, depth: int) -> int:
    """Return the depth of a container's children, enforcing max_depth."""
    child_depth = depth + 1
    if config.max_depth is not None and child_depth > config.max_depth:
        raise NestingDepthError(
            f"Nesting depth {child_depth} exceeds max_depth={config.max_depth} "
            f"at offset {reader.position()}"
        )
    return child_depth


def _decode_array(reader: ByteReader, config: DecoderConfig, depth: int, size: int) -> Array:
    child_depth = _enter_container(reader, config, depth)

    # Every element needs at least one byte
    if size > reader.bytes_remaining():
        raise IndexError(
            f"Array declares {size} elements, only {reader.bytes_remaining()} bytes left"
        )

    elements: list[Value] = []
    for _ in range(size):
        elements.append(_decode_value(reader, config, child_depth))
    return Array(elements)


def _decode_map(reader: ByteReader, config: DecoderConfig, depth: int, size: int) -> Map:
    child_depth = _enter_container(reader, config, depth)

    # Every key and value needs at least one byte
    if size * 2 > reader.bytes_remaining():
        raise IndexError(
            f"Map declares {size} entries, only {reader.bytes_remaining()} bytes left"
        )

    entries: list[tuple[Value, Value]] = []
    for _ in range(size):
        key = _decode_value(reader, config, child_depth)
        entries.append((key, _decode_value(reader, config, child_depth)))
    # Repeated keys collapse last-wins
    return Map(entries)
