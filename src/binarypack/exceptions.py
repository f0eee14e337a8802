"""Exception hierarchy for binarypack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BinaryPackError for easy catching of any
binarypack-specific error.

Value construction errors are not part of this hierarchy: the value model is
built on Pydantic and invalid constructor input raises
``pydantic.ValidationError``.
"""

from __future__ import annotations


class BinaryPackError(Exception):
    """Base exception for all binarypack errors."""

    pass


class DecodeError(BinaryPackError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - String payload that is not valid UTF-8
        - Containers nested deeper than the configured limit
    """

    pass


class EndOfDataError(DecodeError):
    """Raised when a fixed-width or declared-length read runs past the buffer.

    Attributes:
        offset: Read position at which the read was attempted
    """

    def __init__(self, message: str, *, offset: int = 0):
        super().__init__(message)
        self.offset = offset


class TextDecodeError(DecodeError, UnicodeError):
    """Raised when a string payload is not valid UTF-8."""

    pass


class NestingDepthError(DecodeError):
    """Raised when containers are nested deeper than the decoder allows."""

    pass


class UnknownTagError(DecodeError):
    """Raised for an unrecognised tag byte when strict tag checking is enabled.

    With the default configuration unknown tags decode to ``Undefined`` instead.
    """

    def __init__(self, message: str, *, tag: int = 0, offset: int = 0):
        super().__init__(message)
        self.tag = tag
        self.offset = offset


class EncodeError(BinaryPackError):
    """Raised when a Python object cannot be turned into a value or bytes.

    Examples:
        - Native object of an unsupported type
        - Integer outside the 64-bit signed/unsigned range
        - Payload too long for a 32-bit length prefix
    """

    pass


class ConversionError(BinaryPackError):
    """Raised when a value has no faithful plain Python representation.

    Examples:
        - Map whose distinct keys collapse to the same Python object, such as
          ``Uint8(1)``, ``Uint16(1)`` and ``Bool(True)``, which all become ``1``
    """

    pass
