"""
Protobuf wire messages of the sync protocol.

These models mirror the generated protobuf classes after the framing layer
has parsed raw bytes. They only enforce what the protobuf schema itself
guarantees (field presence and integer width); the byte length and numeric
range of every payload is checked by the converters.
"""

from __future__ import annotations

from pydantic import Field

from stark_sync.types import StrictBaseModel, Uint64

from .config import INT32_MAX, INT32_MIN


class Felt252(StrictBaseModel):
    """A field element as raw big-endian bytes."""

    elements: bytes


class Hash(StrictBaseModel):
    """A hash as raw big-endian bytes."""

    elements: bytes


class Address(StrictBaseModel):
    """A contract address as raw big-endian bytes."""

    elements: bytes


class Uint128(StrictBaseModel):
    """A 128-bit unsigned integer split into two 64-bit halves."""

    high: Uint64
    low: Uint64


class ConsensusSignature(StrictBaseModel):
    """A Stark curve signature."""

    r: Felt252 | None = None
    s: Felt252 | None = None


class BlockNumberStart(StrictBaseModel):
    """`Iteration.start` variant naming the first block by number."""

    block_number: Uint64


class HeaderStart(StrictBaseModel):
    """`Iteration.start` variant naming the first block by header hash."""

    header: Hash


class Iteration(StrictBaseModel):
    """
    A range-scan request.

    `start` is a protobuf `oneof`: at most one of the two variants is set,
    and `None` means the sender left it unset.
    """

    start: BlockNumberStart | HeaderStart | None = None
    direction: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    limit: Uint64 = Uint64(0)
    step: Uint64 = Uint64(0)
