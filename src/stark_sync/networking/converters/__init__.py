"""Conversions between protobuf wire messages and domain values."""

from .common import (
    address_from_protobuf,
    address_to_protobuf,
    consensus_signature_from_protobuf,
    consensus_signature_to_protobuf,
    felt_from_protobuf,
    felt_to_protobuf,
    hash_from_protobuf,
    hash_to_protobuf,
    internal_query_from_protobuf,
    l1_data_availability_mode_from_int,
    l1_data_availability_mode_to_int,
    query_to_protobuf,
    uint128_from_protobuf,
    uint128_to_protobuf,
)
from .errors import (
    BytesLengthMismatchError,
    MissingFieldError,
    OutOfRangeValueError,
    ProtobufConversionError,
)

__all__ = [
    # Errors
    "ProtobufConversionError",
    "BytesLengthMismatchError",
    "OutOfRangeValueError",
    "MissingFieldError",
    # Field elements, hashes, addresses
    "felt_from_protobuf",
    "felt_to_protobuf",
    "hash_from_protobuf",
    "hash_to_protobuf",
    "address_from_protobuf",
    "address_to_protobuf",
    # Integers and enums
    "uint128_from_protobuf",
    "uint128_to_protobuf",
    "l1_data_availability_mode_from_int",
    "l1_data_availability_mode_to_int",
    # Composite messages
    "consensus_signature_from_protobuf",
    "consensus_signature_to_protobuf",
    "internal_query_from_protobuf",
    "query_to_protobuf",
]
