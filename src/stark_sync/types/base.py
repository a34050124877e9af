"""Reusable, strict base models for domain values and wire messages."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Instances are frozen, reject unknown fields and perform no implicit
    coercion. Every value decoded from a peer is built from one of these,
    so a constructed instance always satisfies its field constraints.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )
