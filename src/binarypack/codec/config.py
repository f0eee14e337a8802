"""Decoder configuration.

This module provides the configuration dataclass accepted by ``decode()`` and
``decode_from()``. The defaults give the lenient behaviour of the format:
unknown tags decode to ``Undefined`` and nesting is bounded only by the
Python recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecoderConfig:
    """Limits and strictness switches for decoding.

    Attributes:
        max_depth: Maximum container nesting depth (default None, unlimited).
            A top-level scalar has depth 0, the elements of a top-level array
            have depth 1, and so on. Set this when decoding untrusted input;
            exceeding it raises NestingDepthError.

        strict_tags: Reject unrecognised tag bytes (default False).
            When False, tags outside the wire table decode to ``Undefined``.
            When True, they raise UnknownTagError.

    Examples:
        ```python
        from binarypack import DecoderConfig, decode

        # Untrusted peer: cap nesting and refuse reserved tags
        config = DecoderConfig(max_depth=32, strict_tags=True)
        value = decode(payload, config=config)
        ```
    """

    max_depth: int | None = None
    strict_tags: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0 or None, got {self.max_depth}")


DEFAULT_CONFIG = DecoderConfig()
