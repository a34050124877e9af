"""Block range queries exchanged by syncing peers."""

from __future__ import annotations

from enum import IntEnum

from stark_sync.starknet import BlockHashOrNumber, BlockNumber
from stark_sync.types import StrictBaseModel, Uint64


class Direction(IntEnum):
    """Order in which blocks of a range are streamed."""

    FORWARD = 0
    """Increasing block numbers, starting at the start block."""

    BACKWARD = 1
    """Decreasing block numbers, starting at the start block."""


class Query(StrictBaseModel):
    """
    An outbound range query, built locally by the sync driver.

    The driver always knows the number of the block it wants to start from,
    so the start is a block number only.
    """

    start_block: BlockNumber
    direction: Direction
    limit: Uint64
    """Maximum number of blocks to return."""

    step: Uint64
    """Distance between consecutive returned blocks."""


class InternalQuery(StrictBaseModel):
    """
    An inbound range query, decoded from a peer request.

    Peers may name the start block either by hash or by number.
    """

    start_block: BlockHashOrNumber
    direction: Direction
    limit: Uint64
    step: Uint64
