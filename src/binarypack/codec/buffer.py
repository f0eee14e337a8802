"""Byte-level packing and unpacking utilities.

This module provides the low-level cursor primitives used by the encoder and
decoder. All multi-byte operations are big-endian.
"""

from __future__ import annotations

import struct

_FLOAT64 = struct.Struct(">d")
_UINT64 = struct.Struct(">Q")


class ByteWriter:
    """Appends big-endian primitives to a growing byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_uint(0xCD, 1)
        >>> writer.write_uint(258, 2)
        >>> writer.to_bytes()
        b'\\xcd\\x01\\x02'
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_uint(self, value: int, num_bytes: int) -> None:
        """Write an unsigned integer using the specified number of bytes.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bytes: Width of the encoding (1, 2, 4 or 8)

        Raises:
            ValueError: If value is negative or doesn't fit in num_bytes
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if num_bytes not in (1, 2, 4, 8):
            raise ValueError(f"num_bytes must be 1, 2, 4 or 8, got {num_bytes}")

        max_value = (1 << (num_bytes * 8)) - 1
        if value > max_value:
            raise ValueError(
                f"Value {value} requires more than {num_bytes} bytes (max: {max_value})"
            )

        # Most significant byte first
        for i in range(num_bytes - 1, -1, -1):
            self._buffer.append((value >> (i * 8)) & 0xFF)

    def write_int(self, value: int, num_bytes: int) -> None:
        """Write a signed integer using two's complement encoding.

        Args:
            value: Signed integer value to write
            num_bytes: Width of the encoding (1, 2, 4 or 8)

        Raises:
            ValueError: If value doesn't fit in num_bytes using two's complement
        """
        num_bits = num_bytes * 8
        min_value = -(1 << (num_bits - 1))
        max_value = (1 << (num_bits - 1)) - 1

        if value < min_value or value > max_value:
            raise ValueError(
                f"Value {value} doesn't fit in {num_bytes} bytes "
                f"(range: {min_value} to {max_value})"
            )

        if value < 0:
            value += 1 << num_bits

        self.write_uint(value, num_bytes)

    def write_double(self, value: float) -> None:
        """Write the IEEE-754 binary64 bit pattern of ``value``."""
        self._buffer.extend(_FLOAT64.pack(value))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes verbatim."""
        self._buffer.extend(data)

    def byte_length(self) -> int:
        """Return the number of bytes written so far."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Reads big-endian primitives from a byte buffer.

    The reader only advances its own cursor; the underlying buffer is never
    modified.

    Example:
        >>> reader = ByteReader(b"\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\x08")
        >>> reader.read_uint(2)
        258
    """

    def __init__(self, data: bytes | bytearray | memoryview, position: int = 0) -> None:
        """Initialize a reader over ``data``.

        Args:
            data: Byte buffer to read from
            position: Initial read offset
        """
        self._data = memoryview(data).cast("B") if isinstance(data, memoryview) else data
        if position < 0 or position > len(self._data):
            raise ValueError(f"position {position} outside buffer of {len(self._data)} bytes")
        self._position = position

    def _take(self, num_bytes: int) -> bytes:
        end = self._position + num_bytes
        if end > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {len(self._data) - self._position}"
            )
        chunk = bytes(self._data[self._position : end])
        self._position = end
        return chunk

    def read_uint(self, num_bytes: int) -> int:
        """Read an unsigned integer of the specified byte width.

        Args:
            num_bytes: Number of bytes to read (1, 2, 4 or 8)

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bytes is not a supported width
            IndexError: If not enough bytes are available
        """
        if num_bytes not in (1, 2, 4, 8):
            raise ValueError(f"num_bytes must be 1, 2, 4 or 8, got {num_bytes}")

        value = 0
        for byte in self._take(num_bytes):
            value = value * 256 + byte
        return value

    def read_int(self, num_bytes: int) -> int:
        """Read a signed integer using two's complement encoding.

        Args:
            num_bytes: Number of bytes to read (1, 2, 4 or 8)

        Returns:
            Signed integer value

        Raises:
            ValueError: If num_bytes is not a supported width
            IndexError: If not enough bytes are available
        """
        unsigned_value = self.read_uint(num_bytes)

        num_bits = num_bytes * 8
        if unsigned_value & (1 << (num_bits - 1)):
            return unsigned_value - (1 << num_bits)
        return unsigned_value

    def read_double(self) -> float:
        """Read 8 bytes and reinterpret them as an IEEE-754 binary64 value."""
        bits = self.read_uint(8)
        return _FLOAT64.unpack(_UINT64.pack(bits))[0]

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Raises:
            IndexError: If not enough bytes are available
        """
        return self._take(num_bytes)

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
