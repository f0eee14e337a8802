"""End-to-end integration tests."""

from __future__ import annotations

import pytest

from binarypack import (
    Array,
    DecoderConfig,
    Double,
    EndOfDataError,
    Float,
    Int8,
    Map,
    NestingDepthError,
    String,
    Uint8,
    Uint16,
    Uint64,
    Value,
    decode,
    decode_from,
    encode,
    encoded_size,
    packb,
    to_python,
    unpackb,
)


class TestWireExamples:
    """Byte-level examples of the format."""

    def test_canonical_minimal_tag(self) -> None:
        """Test minimal tag selection for Uint8."""
        assert encode(Uint8(5)) == bytes([0x05])
        assert encode(Uint8(200)) == bytes([0xCC, 0xC8])

    def test_width_boundary(self) -> None:
        """Test Uint16 keeps its width and uint64 reads MSB-first."""
        assert encode(Uint16(258)) == bytes([0xCD, 0x01, 0x02])
        assert decode(bytes([0xCF, 1, 2, 3, 4, 5, 6, 7, 8])) == Uint64(72623859790382856)

    def test_negative_fixint_boundary(self) -> None:
        """Test -31 as a single byte both ways."""
        assert encode(Int8(-31)) == bytes([0xE1])
        assert decode(bytes([0xE1])) == Int8(-31)

    def test_float_bit_exactness(self) -> None:
        """Test float32 bytes survive decode and re-encode unchanged."""
        data = bytes([0xCA, 0x3E, 0x20, 0x00, 0x00])
        value = decode(data)

        assert value == Float(0.15625)
        assert encode(value) == data

    def test_truncated_input(self) -> None:
        """Test empty input and oversize declared lengths."""
        with pytest.raises(EndOfDataError):
            decode(b"")

        with pytest.raises(EndOfDataError):
            decode(b"\xdc\x00\x05\x01\x02")


class TestDocumentRoundTrip:
    """Round trips of realistic nested documents."""

    def test_sample_value(self, sample_value: Value, sample_encoded: bytes) -> None:
        """Test a nested document decodes to an equal value."""
        decoded = decode(sample_encoded)

        assert decoded == sample_value
        assert decoded[String("readings")][2] == Float(0.15625)
        assert encoded_size(sample_value) == len(sample_encoded)

    def test_fixed_point(self, sample_encoded: bytes) -> None:
        """Test decode, encode, decode is stable."""
        first = decode(sample_encoded)
        assert decode(encode(first)) == first

    def test_to_python(self, sample_value: Value) -> None:
        """Test flattening the sample document."""
        assert to_python(sample_value) == {
            "id": 4242,
            "depth": 152.25,
            "payload": b"\x00\x01\x02",
            "readings": [-3, -40, 0.15625],
            "flags": {0: True, 1: None},
        }

    def test_large_containers(self) -> None:
        """Test 32-bit length prefixes for arrays and strings."""
        value = Map(
            {
                String("big"): Array([Uint8(i % 128) for i in range(70000)]),
                String("text"): String("λ" * 40000),
            }
        )
        data = encode(value)

        assert decode(data) == value
        assert b"\xdd\x00\x01\x11\x70" in data  # 70000 elements
        assert b"\xd9\x00\x01\x38\x80" in data  # 80000 UTF-8 bytes

    def test_value_keys(self) -> None:
        """Test maps keyed by non-string values."""
        value = Map(
            {
                Uint8(1): String("one"),
                Int8(-1): String("minus one"),
                Double(0.5): String("half"),
                Array([Uint8(1), Uint8(2)]): String("pair"),
                Map({String("nested"): Uint8(0)}): String("map key"),
            }
        )

        decoded = decode(encode(value))
        assert decoded == value
        assert decoded[Map({String("nested"): Uint8(0)})] == String("map key")


class TestStreams:
    """Concatenated values and untrusted input."""

    def test_message_stream(self) -> None:
        """Test walking several values packed back to back."""
        messages = [{"seq": i, "body": "x" * i} for i in range(20)]
        stream = b"".join(packb(message) for message in messages)

        received = []
        pos = 0
        while pos < len(stream):
            value, pos = decode_from(stream, pos)
            received.append(to_python(value))

        assert received == messages

    def test_untrusted_input_limits(self) -> None:
        """Test depth limits on hostile nesting."""
        hostile = b"\x91" * 50 + b"\xc0"
        config = DecoderConfig(max_depth=16, strict_tags=True)

        with pytest.raises(NestingDepthError):
            decode(hostile, config)

        assert unpackb(packb([[1, [2]]]), config) == [[1, [2]]]
