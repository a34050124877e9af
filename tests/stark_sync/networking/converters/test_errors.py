"""Tests for the conversion error hierarchy."""

from __future__ import annotations

import pytest

from stark_sync.networking.converters import (
    BytesLengthMismatchError,
    MissingFieldError,
    OutOfRangeValueError,
    ProtobufConversionError,
)


@pytest.mark.parametrize(
    "error",
    [
        BytesLengthMismatchError("Hash", num_expected=32, value=b"\x00"),
        OutOfRangeValueError("Direction", "7"),
        MissingFieldError("Iteration::start"),
    ],
)
def test_hierarchy(error: ProtobufConversionError) -> None:
    """All conversion errors share one catchable base."""
    assert isinstance(error, ProtobufConversionError)
    assert isinstance(error, Exception)


def test_length_mismatch_message() -> None:
    error = BytesLengthMismatchError("Address", num_expected=32, value=b"\x00" * 3)
    assert error.message == "Address requires exactly 32 bytes, got 3"
    assert error.value == b"\x00" * 3


def test_out_of_range_message() -> None:
    error = OutOfRangeValueError("DataAvailabilityMode", "2")
    assert error.message == "2 is out of range for DataAvailabilityMode"


def test_missing_field_message() -> None:
    error = MissingFieldError("Iteration::start")
    assert str(error) == "Missing required field Iteration::start"
    assert repr(error) == "MissingFieldError('Missing required field Iteration::start')"
