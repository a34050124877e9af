"""Test helpers for stark_sync unit tests."""

from .builders import (
    felt_bytes,
    make_address_message,
    make_consensus_signature_message,
    make_hash_message,
    make_uint128_message,
)

__all__ = [
    "felt_bytes",
    "make_address_message",
    "make_consensus_signature_message",
    "make_hash_message",
    "make_uint128_message",
]
