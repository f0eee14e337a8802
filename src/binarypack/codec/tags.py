"""Wire format constants.

Tag bytes and the limits that decide which tag the encoder picks. All
multi-byte integers, lengths and float bit patterns are big-endian.
"""

from __future__ import annotations

# Fixed-size forms: the low bits of the tag carry the value or size
POSITIVE_FIXINT_MAX = 0x7F
NEGATIVE_FIXINT = 0xE0
NEGATIVE_FIXINT_MIN = -0x20
FIXMAP = 0x80
FIXARRAY = 0x90
FIXRAW = 0xA0
FIXSTR = 0xB0
FIX_SIZE_MAX = 0x0F

NIL = 0xC0
UNDEFINED = 0xC1
FALSE = 0xC2
TRUE = 0xC3

FLOAT32 = 0xCA
FLOAT64 = 0xCB

UINT8 = 0xCC
UINT16 = 0xCD
UINT32 = 0xCE
UINT64 = 0xCF

INT8 = 0xD0
INT16 = 0xD1
INT32 = 0xD2
INT64 = 0xD3

STR16 = 0xD8
STR32 = 0xD9
RAW16 = 0xDA
RAW32 = 0xDB
ARRAY16 = 0xDC
ARRAY32 = 0xDD
MAP16 = 0xDE
MAP32 = 0xDF

LENGTH16_MAX = 0xFFFF
LENGTH32_MAX = 0xFFFFFFFF

# Byte width of each explicit numeric tag
UNSIGNED_WIDTHS = {UINT8: 1, UINT16: 2, UINT32: 4, UINT64: 8}
SIGNED_WIDTHS = {INT8: 1, INT16: 2, INT32: 4, INT64: 8}

# (fixed tag, 16-bit length tag, 32-bit length tag) per container family
STR_TAGS = (FIXSTR, STR16, STR32)
RAW_TAGS = (FIXRAW, RAW16, RAW32)
ARRAY_TAGS = (FIXARRAY, ARRAY16, ARRAY32)
MAP_TAGS = (FIXMAP, MAP16, MAP32)
