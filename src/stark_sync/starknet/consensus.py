"""Consensus vote signatures."""

from stark_sync.types import StrictBaseModel

from .felt import StarkFelt


class ConsensusSignature(StrictBaseModel):
    """An ECDSA signature over the Stark curve, as a pair of field elements."""

    r: StarkFelt
    s: StarkFelt
