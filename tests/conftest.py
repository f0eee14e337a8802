"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from binarypack import (
    Array,
    Bool,
    Double,
    Float,
    Int8,
    Map,
    Null,
    Raw,
    String,
    Uint8,
    Uint16,
    Value,
)


@pytest.fixture
def sample_value() -> Value:
    """Nested value exercising every container family."""
    return Map(
        {
            String("id"): Uint16(4242),
            String("depth"): Double(152.25),
            String("payload"): Raw(b"\x00\x01\x02"),
            String("readings"): Array([Int8(-3), Int8(-40), Float(0.15625)]),
            String("flags"): Map({Uint8(0): Bool(True), Uint8(1): Null()}),
        }
    )


@pytest.fixture
def sample_encoded(sample_value: Value) -> bytes:
    """Canonical encoding of sample_value."""
    return sample_value.encode()
