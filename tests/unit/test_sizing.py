"""Unit tests for size calculation."""

from __future__ import annotations

import pytest

from binarypack import (
    Array,
    Bool,
    Double,
    Float,
    Int8,
    Int32,
    Map,
    Null,
    Raw,
    String,
    Uint8,
    Uint64,
    Undefined,
    encode,
    encoded_size,
)
from binarypack.utils import header_size


class TestEncodedSize:
    """Test encoded_size matches the encoder."""

    @pytest.mark.parametrize(
        "value",
        [
            Uint8(5),
            Uint8(200),
            Int8(-5),
            Int8(-100),
            Int32(7),
            Uint64(1),
            Float(1.5),
            Double(1.5),
            Bool(True),
            Null(),
            Undefined(),
            Raw(b""),
            Raw(b"x" * 16),
            String("héllo"),
            String("x" * 70000),
            Array([Uint8(1), Array([String("a")])]),
            Map({String("a"): Uint8(200), Uint8(1): Array([])}),
        ],
    )
    def test_matches_encoding(self, value: object) -> None:
        """Test sizes agree with len(encode())."""
        assert encoded_size(value) == len(encode(value))

    def test_not_a_value(self) -> None:
        """Test non-values are rejected."""
        with pytest.raises(TypeError):
            encoded_size(b"raw")  # type: ignore[arg-type]


class TestHeaderSize:
    """Test tag + length prefix sizes."""

    def test_boundaries(self) -> None:
        """Test fixed, 16-bit and 32-bit forms."""
        assert header_size(0) == 1
        assert header_size(15) == 1
        assert header_size(16) == 3
        assert header_size(65535) == 3
        assert header_size(65536) == 5
