"""Unit tests for conversion to and from plain Python objects."""

from __future__ import annotations

import pytest

from binarypack import (
    Array,
    Bool,
    ConversionError,
    Double,
    EncodeError,
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
    from_python,
    packb,
    to_python,
    unpackb,
)


class TestFromPython:
    """Test building values from builtins."""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (0, Uint8(0)),
            (127, Uint8(127)),
            (-1, Int8(-1)),
            (-32, Int8(-32)),
            (128, Uint8(128)),
            (255, Uint8(255)),
            (-33, Int8(-33)),
            (-128, Int8(-128)),
            (256, Uint16(256)),
            (-129, Int16(-129)),
            (0xFFFF, Uint16(0xFFFF)),
            (-0x8000, Int16(-0x8000)),
            (0x10000, Uint32(0x10000)),
            (-0x8001, Int32(-0x8001)),
            (0x100000000, Int64(0x100000000)),
            (-0x80000001, Int64(-0x80000001)),
            (0x8000000000000000, Uint64(0x8000000000000000)),
            (0xFFFFFFFFFFFFFFFF, Uint64(0xFFFFFFFFFFFFFFFF)),
        ],
    )
    def test_integer_ladder(self, number: int, expected: object) -> None:
        """Test the smallest holding variant is chosen."""
        assert from_python(number) == expected

    def test_integer_too_large(self) -> None:
        """Test integers beyond 64 bits."""
        with pytest.raises(EncodeError, match="64 bits"):
            from_python(1 << 64)

        with pytest.raises(EncodeError, match="64 bits"):
            from_python(-(1 << 63) - 1)

    def test_scalars(self) -> None:
        """Test non-integer scalars."""
        assert from_python(None) == Null()
        assert from_python(True) == Bool(True)
        assert from_python(False) == Bool(False)
        assert from_python(1.5) == Double(1.5)
        assert from_python("hi") == String("hi")
        assert from_python(b"\x00") == Raw(b"\x00")
        assert from_python(bytearray(b"\x01")) == Raw(b"\x01")
        assert from_python(memoryview(b"\x02")) == Raw(b"\x02")

    def test_containers(self) -> None:
        """Test nested lists, tuples and dicts."""
        value = from_python({"a": [1, (2, None)], 3: {}})

        assert value == Map(
            {
                String("a"): Array([Uint8(1), Array([Uint8(2), Null()])]),
                Uint8(3): Map({}),
            }
        )

    def test_value_passthrough(self) -> None:
        """Test values are returned unchanged, even nested."""
        assert from_python(Float(0.5)) == Float(0.5)
        assert from_python([Uint16(1)]) == Array([Uint16(1)])

    def test_unsupported_type(self) -> None:
        """Test unsupported objects are rejected."""
        with pytest.raises(EncodeError, match="set"):
            from_python({1, 2})

        with pytest.raises(EncodeError, match="object"):
            from_python([object()])


class TestToPython:
    """Test flattening values to builtins."""

    def test_scalars(self) -> None:
        """Test scalar conversion."""
        assert to_python(Uint64(7)) == 7
        assert to_python(Int8(-3)) == -3
        assert to_python(Float(0.15625)) == 0.15625
        assert to_python(Bool(True)) is True
        assert to_python(Raw(b"x")) == b"x"
        assert to_python(String("x")) == "x"
        assert to_python(Null()) is None
        assert to_python(Undefined()) is None

    def test_containers(self) -> None:
        """Test arrays and maps."""
        value = Map({String("k"): Array([Uint8(1), Null()])})
        assert to_python(value) == {"k": [1, None]}

    def test_container_keys_become_hashable(self) -> None:
        """Test array and map keys are converted to tuples."""
        value = Map(
            {
                Array([Uint8(1), Uint8(2)]): String("array"),
                Map({String("a"): Uint8(1)}): String("map"),
            }
        )

        assert to_python(value) == {(1, 2): "array", (("a", 1),): "map"}

    def test_colliding_keys_rejected(self) -> None:
        """Test distinct keys that flatten to the same Python key raise."""
        value = Map({Uint8(1): String("a"), Uint16(1): String("b"), Bool(True): String("c")})
        assert len(value) == 3

        with pytest.raises(ConversionError, match="collide"):
            to_python(value)

    def test_colliding_keys_nested(self) -> None:
        """Test collisions inside nested maps are reported."""
        inner = Map({Double(0.0): Null(), Double(-0.0): Null()})

        with pytest.raises(ConversionError):
            to_python(Array([inner]))

    def test_colliding_keys_from_wire(self) -> None:
        """Test unpackb reports collisions instead of dropping entries."""
        data = b"\x82\x01\xb1a\xcd\x00\x01\xb1b"

        with pytest.raises(ConversionError):
            unpackb(data)

    def test_not_a_value(self) -> None:
        """Test non-values are rejected."""
        with pytest.raises(TypeError, match="binarypack value"):
            to_python(5)  # type: ignore[arg-type]


class TestPackUnpack:
    """Test packb/unpackb shortcuts."""

    def test_roundtrip(self) -> None:
        """Test builtins survive a round trip."""
        obj = {"depth": 1500, "ok": True, "tags": ["a", "b"], "blob": b"\x00\x01", "ratio": 0.25}
        assert unpackb(packb(obj)) == obj

    def test_packb_bytes(self) -> None:
        """Test known encodings."""
        assert packb(5) == b"\x05"
        assert packb(-1) == b"\xff"
        assert packb(200) == b"\xcc\xc8"
        assert packb(None) == b"\xc0"
        assert packb([]) == b"\x90"

    def test_tuples_become_lists(self) -> None:
        """Test tuples come back as lists."""
        assert unpackb(packb((1, 2))) == [1, 2]
