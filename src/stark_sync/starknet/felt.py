"""Core definition of Starknet field elements, hashes and Patricia keys."""

from __future__ import annotations

from typing import Any, ClassVar

from typing_extensions import Self

from stark_sync.types import Bytes32

# =================================================================
# Field Constants
# =================================================================

FIELD_PRIME: int = 2**251 + 17 * 2**192 + 1
"""The Stark prime: P = 2^251 + 17 * 2^192 + 1"""

FELT_BYTES: int = 32
"""The size of a canonical field element encoding in bytes."""

PATRICIA_KEY_UPPER_BOUND: int = 2**251
"""Exclusive upper bound for keys of the global state Patricia tree."""


class StarkFelt(Bytes32):
    """
    An element of the Stark prime field.

    Stored as its canonical 32-byte big-endian encoding. Construction fails
    for any byte string whose numeric value is not strictly below `FIELD_PRIME`,
    so every instance is a valid field element.
    """

    UPPER_BOUND: ClassVar[int] = FIELD_PRIME
    """Exclusive upper bound on the numeric value (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new field element.

        Raises:
            ValueError: If the length is not 32 bytes or the value is out of range.
        """
        instance = super().__new__(cls, value)
        if int.from_bytes(instance, "big") >= cls.UPPER_BOUND:
            raise ValueError(
                f"{cls.__name__} value 0x{instance.hex()} is not below 0x{cls.UPPER_BOUND:x}"
            )
        return instance

    @classmethod
    def from_int(cls, value: int) -> Self:
        """
        Build an element from its numeric value.

        Raises:
            ValueError: If `value` is negative or not below the upper bound.
        """
        if value < 0:
            raise ValueError(f"{cls.__name__} cannot be negative, got {value}")
        if value >= cls.UPPER_BOUND:
            raise ValueError(f"{cls.__name__} value 0x{value:x} is not below 0x{cls.UPPER_BOUND:x}")
        return cls(value.to_bytes(FELT_BYTES, byteorder="big"))

    def __int__(self) -> int:
        """Return the numeric value (big-endian interpretation)."""
        return int.from_bytes(self, byteorder="big")


StarkHash = StarkFelt
"""Hashes share the field element representation and range."""


class PatriciaKey(StarkFelt):
    """A hash restricted to the key range of the global state Patricia tree."""

    UPPER_BOUND = PATRICIA_KEY_UPPER_BOUND

    @classmethod
    def from_hash(cls, value: StarkHash) -> Self:
        """
        Narrow a hash into a Patricia key.

        Raises:
            ValueError: If the hash is not below `PATRICIA_KEY_UPPER_BOUND`.
        """
        return cls(bytes(value))
