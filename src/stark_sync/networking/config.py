"""
Networking configuration constants.

Widths and limits of the protobuf wire representation.
"""

from __future__ import annotations

from typing import Final

FELT_WIRE_BYTES: Final[int] = 32
"""Exact length of every `elements` field carrying a field element, hash or address."""

UINT64_BITS: Final[int] = 64
"""Width of each half of a `Uint128` message."""

UINT64_MASK: Final[int] = 2**UINT64_BITS - 1
"""Mask selecting the low half of a 128-bit value."""

INT32_MIN: Final[int] = -(2**31)
"""Smallest value of a protobuf `int32` field."""

INT32_MAX: Final[int] = 2**31 - 1
"""Largest value of a protobuf `int32` field."""
