"""Reusable type definitions shared by domain values and wire messages."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32
from .uint import BaseUint, Uint64, Uint128

__all__ = [
    "BaseBytes",
    "BaseUint",
    "Bytes32",
    "StrictBaseModel",
    "Uint64",
    "Uint128",
]
