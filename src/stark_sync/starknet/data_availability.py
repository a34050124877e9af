"""L1 data availability."""

from enum import IntEnum


class L1DataAvailabilityMode(IntEnum):
    """How a block publishes its state diff on L1."""

    CALLDATA = 0
    """State diff posted as transaction calldata."""

    BLOB = 1
    """State diff posted as an EIP-4844 blob."""
