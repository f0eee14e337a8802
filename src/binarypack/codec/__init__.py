"""Binary codec for binarypack.

This module provides encoding and decoding between values and the
self-describing binary format.
"""

from __future__ import annotations

from .config import DecoderConfig
from .decoder import decode, decode_from
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "decode_from",
    "DecoderConfig",
]
