"""Exception hierarchy for protobuf conversion failures."""

from __future__ import annotations


class ProtobufConversionError(Exception):
    """
    Base exception for all failures converting a wire message to a domain value.

    Raised for malformed input from a peer. The caller decides whether that
    means dropping the message or penalizing the peer.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class BytesLengthMismatchError(ProtobufConversionError):
    """
    Raised when a fixed-size byte field does not have the exact expected length.

    Attributes:
        type_description: The wire type being decoded.
        num_expected: The required number of bytes.
        value: The rejected bytes.
    """

    def __init__(self, type_description: str, *, num_expected: int, value: bytes) -> None:
        self.type_description = type_description
        self.num_expected = num_expected
        self.value = value

        super().__init__(
            f"{type_description} requires exactly {num_expected} bytes, got {len(value)}"
        )


class OutOfRangeValueError(ProtobufConversionError):
    """
    Raised when a value is outside the range accepted by its domain type.

    Attributes:
        type_description: The wire type being decoded.
        value_as_str: Textual rendering of the rejected value.
    """

    def __init__(self, type_description: str, value_as_str: str) -> None:
        self.type_description = type_description
        self.value_as_str = value_as_str

        super().__init__(f"{value_as_str} is out of range for {type_description}")


class MissingFieldError(ProtobufConversionError):
    """
    Raised when a required message field is unset.

    Attributes:
        field_description: Qualified name of the missing field.
    """

    def __init__(self, field_description: str) -> None:
        self.field_description = field_description

        super().__init__(f"Missing required field {field_description}")
