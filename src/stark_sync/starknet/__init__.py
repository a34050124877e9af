"""Starknet domain values used by the sync protocol."""

from .block import BlockHash, BlockHashOrNumber, BlockNumber
from .consensus import ConsensusSignature
from .core import ContractAddress
from .data_availability import L1DataAvailabilityMode
from .felt import (
    FELT_BYTES,
    FIELD_PRIME,
    PATRICIA_KEY_UPPER_BOUND,
    PatriciaKey,
    StarkFelt,
    StarkHash,
)

__all__ = [
    "FELT_BYTES",
    "FIELD_PRIME",
    "PATRICIA_KEY_UPPER_BOUND",
    "BlockHash",
    "BlockHashOrNumber",
    "BlockNumber",
    "ConsensusSignature",
    "ContractAddress",
    "L1DataAvailabilityMode",
    "PatriciaKey",
    "StarkFelt",
    "StarkHash",
]
