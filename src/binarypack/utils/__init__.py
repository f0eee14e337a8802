"""Utility functions for binarypack.

This module provides size calculation and other utilities.
"""

from __future__ import annotations

from .sizing import encoded_size, header_size

__all__ = [
    "encoded_size",
    "header_size",
]
