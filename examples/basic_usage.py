#!/usr/bin/env python3
"""Basic usage example for binarypack.

This example demonstrates:
1. Building a value from typed variants
2. Encoding to the compact binary format
3. Decoding back and comparing
4. Working with plain Python objects
"""

from __future__ import annotations

from binarypack import (
    Array,
    Bool,
    DecoderConfig,
    Double,
    Int8,
    Map,
    String,
    Uint8,
    Uint16,
    decode,
    encode,
    encoded_size,
    packb,
    unpackb,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("binarypack Basic Usage Example")
    print("=" * 60)
    print()

    # Build a value with explicit widths
    print("1. Building a status report value...")
    report = Map(
        {
            String("vehicle_id"): Uint8(42),
            String("depth_cm"): Uint16(2500),
            String("temperature"): Double(11.75),
            String("trim"): Int8(-3),
            String("active"): Bool(True),
            String("history"): Array([Uint16(2400), Uint16(2450), Uint16(2500)]),
        }
    )
    print(f"   Entries: {len(report)}")
    print(f"   Encoded size: {encoded_size(report)} bytes")
    print()

    # Encode
    print("2. Encoding...")
    data = encode(report)
    print(f"   Encoded: {data.hex()}")
    print()

    # Decode
    print("3. Decoding...")
    decoded = decode(data)
    print(f"   Depth: {decoded[String('depth_cm')].value} cm")
    print(f"   Round trip equal: {decoded == report}")
    print()

    # Plain Python objects pick the smallest integer tag automatically
    print("4. Plain Python objects...")
    obj = {"vehicle_id": 42, "depth_cm": 2500, "active": True}
    packed = packb(obj)
    print(f"   packb: {packed.hex()} ({len(packed)} bytes)")
    print(f"   unpackb: {unpackb(packed, DecoderConfig(max_depth=8))}")
    print()

    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
