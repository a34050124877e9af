"""Tests for consensus signature conversion."""

from __future__ import annotations

import pytest

from stark_sync.networking import messages as protobuf
from stark_sync.networking.converters import (
    BytesLengthMismatchError,
    MissingFieldError,
    OutOfRangeValueError,
    consensus_signature_from_protobuf,
    consensus_signature_to_protobuf,
)
from stark_sync.starknet import FIELD_PRIME, ConsensusSignature, StarkFelt
from tests.stark_sync.helpers import felt_bytes, make_consensus_signature_message


class TestConsensusSignature:
    """Tests for the (r, s) pair."""

    def test_decode(self) -> None:
        """Both components are decoded as field elements."""
        signature = consensus_signature_from_protobuf(make_consensus_signature_message())
        assert signature.r == StarkFelt(b"\x01" * 32)
        assert signature.s == StarkFelt(b"\x01" * 32)

    def test_roundtrip(self) -> None:
        """Encoding a decoded signature reproduces the message."""
        message = make_consensus_signature_message()
        assert consensus_signature_to_protobuf(consensus_signature_from_protobuf(message)) == message

    def test_encode(self) -> None:
        """Encoding emits both components."""
        signature = ConsensusSignature(r=StarkFelt.from_int(1), s=StarkFelt.from_int(2))
        message = consensus_signature_to_protobuf(signature)
        assert message.r == protobuf.Felt252(elements=felt_bytes(1))
        assert message.s == protobuf.Felt252(elements=felt_bytes(2))

    @pytest.mark.parametrize("missing", ["r", "s"])
    def test_missing_component(self, missing: str) -> None:
        """An unset component is a missing field."""
        felt = protobuf.Felt252(elements=felt_bytes(1))
        fields = {"r": felt, "s": felt}
        del fields[missing]
        with pytest.raises(MissingFieldError) as exc_info:
            consensus_signature_from_protobuf(protobuf.ConsensusSignature(**fields))
        assert exc_info.value.field_description == f"ConsensusSignature::{missing}"

    def test_component_errors_propagate(self) -> None:
        """Component errors surface unchanged, under the Felt252 description."""
        short = protobuf.ConsensusSignature(
            r=protobuf.Felt252(elements=b"\x01" * 31),
            s=protobuf.Felt252(elements=felt_bytes(1)),
        )
        with pytest.raises(BytesLengthMismatchError, match="Felt252"):
            consensus_signature_from_protobuf(short)

        too_big = protobuf.ConsensusSignature(
            r=protobuf.Felt252(elements=felt_bytes(1)),
            s=protobuf.Felt252(elements=felt_bytes(FIELD_PRIME)),
        )
        with pytest.raises(OutOfRangeValueError, match="Felt252"):
            consensus_signature_from_protobuf(too_big)
