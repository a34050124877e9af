"""
Conversions between shared protobuf messages and Starknet domain values.

Every `*_from_protobuf` function validates untrusted peer input and raises a
`ProtobufConversionError` subclass on the first violation it finds. The
`*_to_protobuf` direction never fails: a constructed domain value is always
representable on the wire.


FIELD ELEMENTS, HASHES AND ADDRESSES
------------------------------------
All three travel as a 32-byte big-endian `elements` field::

    felt  <  P      = 2^251 + 17 * 2^192 + 1
    hash  <  P
    addr  <  2^251                      (Patricia key range, stricter)

An address is decoded in two stages, first as a hash and then narrowed to a
Patricia key. Both range failures are reported under the "Address"
description.


WIDE INTEGERS
-------------
A 128-bit value is split into two unsigned 64-bit halves::

    high = value >> 64
    low  = value & (2^64 - 1)
"""

from __future__ import annotations

import logging

from typing_extensions import assert_never

from stark_sync.starknet import (
    BlockHash,
    BlockNumber,
    ConsensusSignature,
    ContractAddress,
    L1DataAvailabilityMode,
    PatriciaKey,
    StarkFelt,
    StarkHash,
)
from stark_sync.types import Uint64, Uint128

from .. import messages as protobuf
from ..config import FELT_WIRE_BYTES, UINT64_BITS, UINT64_MASK
from ..query import Direction, InternalQuery, Query
from .errors import BytesLengthMismatchError, MissingFieldError, OutOfRangeValueError

logger = logging.getLogger(__name__)


def _felt_bytes(type_description: str, elements: bytes) -> bytes:
    """Check the wire length of a field element payload."""
    if len(elements) != FELT_WIRE_BYTES:
        logger.debug(
            "Rejected %s: expected %d bytes, got %d",
            type_description,
            FELT_WIRE_BYTES,
            len(elements),
        )
        raise BytesLengthMismatchError(
            type_description, num_expected=FELT_WIRE_BYTES, value=elements
        )
    return elements


def _out_of_range(type_description: str, value_as_str: str) -> OutOfRangeValueError:
    logger.debug("Rejected %s: %s is out of range", type_description, value_as_str)
    return OutOfRangeValueError(type_description, value_as_str)


def _parse_felt(type_description: str, elements: bytes) -> StarkFelt:
    felt = _felt_bytes(type_description, elements)
    try:
        return StarkFelt(felt)
    except ValueError as e:
        raise _out_of_range(type_description, f"0x{felt.hex()}") from e


def felt_from_protobuf(value: protobuf.Felt252) -> StarkFelt:
    """
    Decode a field element.

    Raises:
        BytesLengthMismatchError: If `elements` is not exactly 32 bytes.
        OutOfRangeValueError: If the value is not below the field prime.
    """
    return _parse_felt("Felt252", value.elements)


def felt_to_protobuf(value: StarkFelt) -> protobuf.Felt252:
    """Encode a field element as its canonical 32 bytes."""
    return protobuf.Felt252(elements=bytes(value))


def hash_from_protobuf(value: protobuf.Hash) -> StarkHash:
    """
    Decode a hash.

    Raises:
        BytesLengthMismatchError: If `elements` is not exactly 32 bytes.
        OutOfRangeValueError: If the value is not below the field prime.
    """
    return _parse_felt("Hash", value.elements)


def hash_to_protobuf(value: StarkHash) -> protobuf.Hash:
    """Encode a hash, including a `BlockHash`, as its canonical 32 bytes."""
    return protobuf.Hash(elements=bytes(value))


def address_from_protobuf(value: protobuf.Address) -> ContractAddress:
    """
    Decode a contract address.

    The payload must first be a valid hash and then a valid Patricia key.

    Raises:
        BytesLengthMismatchError: If `elements` is not exactly 32 bytes.
        OutOfRangeValueError: If either range check fails.
    """
    hash_ = _parse_felt("Address", value.elements)
    try:
        key = PatriciaKey.from_hash(hash_)
    except ValueError as e:
        raise _out_of_range("Address", f"0x{hash_.hex()}") from e
    return ContractAddress(key=key)


def address_to_protobuf(value: ContractAddress) -> protobuf.Address:
    """Encode a contract address through its underlying hash."""
    return protobuf.Address(elements=hash_to_protobuf(value.key).elements)


def uint128_from_protobuf(value: protobuf.Uint128) -> Uint128:
    """Join the two 64-bit halves. Every pair is a valid 128-bit value."""
    return Uint128((int(value.high) << UINT64_BITS) | int(value.low))


def uint128_to_protobuf(value: Uint128) -> protobuf.Uint128:
    """Split a 128-bit value into its two 64-bit halves."""
    return protobuf.Uint128(
        high=Uint64(int(value) >> UINT64_BITS),
        low=Uint64(int(value) & UINT64_MASK),
    )


def l1_data_availability_mode_from_int(value: int) -> L1DataAvailabilityMode:
    """
    Decode the data availability mode enum tag.

    Raises:
        OutOfRangeValueError: If the tag is neither 0 nor 1.
    """
    if value == 0:
        return L1DataAvailabilityMode.CALLDATA
    if value == 1:
        return L1DataAvailabilityMode.BLOB
    raise _out_of_range("DataAvailabilityMode", str(value))


def l1_data_availability_mode_to_int(value: L1DataAvailabilityMode) -> int:
    """Encode the data availability mode enum tag."""
    if value is L1DataAvailabilityMode.CALLDATA:
        return 0
    if value is L1DataAvailabilityMode.BLOB:
        return 1
    assert_never(value)


def consensus_signature_from_protobuf(value: protobuf.ConsensusSignature) -> ConsensusSignature:
    """
    Decode a consensus signature.

    Raises:
        MissingFieldError: If `r` or `s` is unset.
        BytesLengthMismatchError: If a component is not exactly 32 bytes.
        OutOfRangeValueError: If a component is not below the field prime.
    """
    if value.r is None:
        raise MissingFieldError("ConsensusSignature::r")
    if value.s is None:
        raise MissingFieldError("ConsensusSignature::s")
    return ConsensusSignature(r=felt_from_protobuf(value.r), s=felt_from_protobuf(value.s))


def consensus_signature_to_protobuf(value: ConsensusSignature) -> protobuf.ConsensusSignature:
    """Encode a consensus signature."""
    return protobuf.ConsensusSignature(r=felt_to_protobuf(value.r), s=felt_to_protobuf(value.s))


def internal_query_from_protobuf(value: protobuf.Iteration) -> InternalQuery:
    """
    Decode a peer's range query.

    Errors from decoding a header start are propagated unchanged.

    Raises:
        MissingFieldError: If `start` is unset.
        BytesLengthMismatchError: If a header start is not exactly 32 bytes.
        OutOfRangeValueError: If a header start or the direction is out of range.
    """
    start = value.start
    if start is None:
        raise MissingFieldError("Iteration::start")

    start_block: BlockHash | BlockNumber
    if isinstance(start, protobuf.BlockNumberStart):
        start_block = BlockNumber(start.block_number)
    elif isinstance(start, protobuf.HeaderStart):
        start_block = BlockHash(hash_from_protobuf(start.header))
    else:
        assert_never(start)

    if value.direction == 0:
        direction = Direction.FORWARD
    elif value.direction == 1:
        direction = Direction.BACKWARD
    else:
        raise _out_of_range("Direction", str(value.direction))

    return InternalQuery(
        start_block=start_block,
        direction=direction,
        limit=value.limit,
        step=value.step,
    )


def query_to_protobuf(value: Query) -> protobuf.Iteration:
    """
    Encode a local range query.

    The start is always sent as a block number, since `Query` cannot carry a
    hash start.
    """
    if value.direction is Direction.FORWARD:
        direction = 0
    elif value.direction is Direction.BACKWARD:
        direction = 1
    else:
        assert_never(value.direction)

    return protobuf.Iteration(
        start=protobuf.BlockNumberStart(block_number=Uint64(value.start_block)),
        direction=direction,
        limit=value.limit,
        step=value.step,
    )
