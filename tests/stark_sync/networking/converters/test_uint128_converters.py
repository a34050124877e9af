"""Tests for 128-bit integer conversion."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stark_sync.networking import messages as protobuf
from stark_sync.networking.converters import uint128_from_protobuf, uint128_to_protobuf
from stark_sync.types import Uint64, Uint128
from tests.stark_sync.helpers import make_uint128_message

U64_MAX = 2**64 - 1

# (value, high, low)
SPLIT_VECTORS: list[tuple[int, int, int]] = [
    (0, 0, 0),
    (1, 0, 1),
    (U64_MAX, 0, U64_MAX),
    (2**64, 1, 0),
    (2**64 + 5, 1, 5),
    (2**128 - 1, U64_MAX, U64_MAX),
    (0xDEADBEEF_00000000_00000000_CAFEBABE, 0xDEADBEEF_00000000, 0x00000000_CAFEBABE),
]


class TestUint128:
    """Tests for the high/low split."""

    def test_test_instance(self) -> None:
        """low=1, high=0 is the value 1."""
        assert uint128_from_protobuf(make_uint128_message()) == 1

    @pytest.mark.parametrize(("value", "high", "low"), SPLIT_VECTORS)
    def test_decode(self, value: int, high: int, low: int) -> None:
        """The halves join as (high << 64) | low."""
        result = uint128_from_protobuf(protobuf.Uint128(high=Uint64(high), low=Uint64(low)))
        assert isinstance(result, Uint128)
        assert result == value

    @pytest.mark.parametrize(("value", "high", "low"), SPLIT_VECTORS)
    def test_encode(self, value: int, high: int, low: int) -> None:
        """The value splits into its upper and lower 64 bits."""
        message = uint128_to_protobuf(Uint128(value))
        assert message.high == high
        assert message.low == low

    @given(st.integers(min_value=0, max_value=2**128 - 1))
    def test_value_roundtrip(self, value: int) -> None:
        """Encoding then decoding is exact for every 128-bit value."""
        assert uint128_from_protobuf(uint128_to_protobuf(Uint128(value))) == value

    @given(
        st.integers(min_value=0, max_value=U64_MAX),
        st.integers(min_value=0, max_value=U64_MAX),
    )
    def test_pair_roundtrip(self, high: int, low: int) -> None:
        """Decoding then encoding is exact for every pair of halves."""
        message = protobuf.Uint128(high=Uint64(high), low=Uint64(low))
        assert uint128_to_protobuf(uint128_from_protobuf(message)) == message

    def test_value_too_wide(self) -> None:
        """Values of 129 bits cannot be built in the first place."""
        with pytest.raises(OverflowError):
            Uint128(2**128)
