"""Conversion between plain Python objects and values.

``from_python`` picks the smallest integer variant that holds a number, the
same way a dynamically typed packer has to when it only sees a number.
``to_python`` flattens a value back to builtins.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any

from ..exceptions import ConversionError, EncodeError
from .value import (
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

# Checked in order after the fixint range; the first variant that holds the
# number is used.
_INTEGER_LADDER: list[tuple[type[Value], int, int]] = [
    (Uint8, 0, 0xFF),
    (Int8, -0x80, 0x7F),
    (Uint16, 0, 0xFFFF),
    (Int16, -0x8000, 0x7FFF),
    (Uint32, 0, 0xFFFFFFFF),
    (Int32, -0x80000000, 0x7FFFFFFF),
    (Int64, -0x8000000000000000, 0x7FFFFFFFFFFFFFFF),
    (Uint64, 0, 0xFFFFFFFFFFFFFFFF),
]


def from_python(obj: Any) -> Value:
    """Build a value from plain Python objects.

    Args:
        obj: ``None``, ``bool``, ``int``, ``float``, ``str``, bytes-like,
            ``list``/``tuple``, ``dict`` (nested arbitrarily), or a Value,
            which is returned unchanged

    Returns:
        The corresponding value

    Raises:
        EncodeError: If obj (or anything nested in it) has an unsupported type,
            or an integer is outside the 64-bit range

    Example:
        >>> from_python({"depth": 1500, "tags": ["a", "b"]})
        Map(entries=((String(value='depth'), Uint16(value=1500)), ...))
    """
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Null()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return _integer(obj)
    if isinstance(obj, float):
        return Double(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Raw(bytes(obj))
    if isinstance(obj, (list, tuple)):
        return Array(from_python(item) for item in obj)
    if isinstance(obj, dict):
        return Map((from_python(key), from_python(item)) for key, item in obj.items())

    raise EncodeError(f"Type {type(obj).__name__} is not supported")


def _integer(number: int) -> Value:
    if -0x20 <= number <= 0x7F:
        return Uint8(number) if number >= 0 else Int8(number)

    for variant, low, high in _INTEGER_LADDER:
        if low <= number <= high:
            return variant(number)

    raise EncodeError(f"Integer {number} does not fit in 64 bits")


def to_python(value: Value) -> Any:
    """Convert a value to plain Python objects.

    Integers become ``int``, floats ``float``, ``Raw`` becomes ``bytes``,
    ``String`` becomes ``str``, ``Null`` and ``Undefined`` become ``None``,
    arrays become lists and maps become dicts. Containers used as map keys are
    turned into tuples so the resulting dict stays hashable.

    Args:
        value: Value to convert

    Returns:
        Plain Python object

    Raises:
        ConversionError: If distinct map keys become equal Python objects,
            such as ``Uint8(1)`` and ``Bool(True)``
    """
    converter = _CONVERTERS.get(type(value))
    if converter is None:
        raise TypeError(f"Expected a binarypack value, got {type(value).__name__}")
    return converter(value)


def _to_key(value: Value) -> Hashable:
    if isinstance(value, Array):
        return tuple(_to_key(item) for item in value)
    if isinstance(value, Map):
        return tuple((_to_key(key), _to_key(item)) for key, item in value.items())
    return to_python(value)


def _scalar(value: Any) -> Any:
    return value.value


def _none(value: Value) -> None:
    return None


def _array(value: Array) -> list[Any]:
    return [to_python(item) for item in value]


def _map(value: Map) -> dict[Hashable, Any]:
    result = {_to_key(key): to_python(item) for key, item in value.items()}
    if len(result) != len(value):
        raise ConversionError(
            f"Map has {len(value)} distinct keys but only {len(result)} "
            "distinct Python keys; keys of different variants collide"
        )
    return result


_CONVERTERS: dict[type, Callable[[Any], Any]] = {
    Uint8: _scalar,
    Uint16: _scalar,
    Uint32: _scalar,
    Uint64: _scalar,
    Int8: _scalar,
    Int16: _scalar,
    Int32: _scalar,
    Int64: _scalar,
    Float: _scalar,
    Double: _scalar,
    Bool: _scalar,
    Raw: _scalar,
    String: _scalar,
    Null: _none,
    Undefined: _none,
    Array: _array,
    Map: _map,
}
