"""Value model for binarypack.

This module provides the closed set of value variants and helpers to convert
them to and from plain Python objects.
"""

from __future__ import annotations

from .native import from_python, to_python
from .value import (
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
)

__all__ = [
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
    "from_python",
    "to_python",
]
