"""Contract-level identifiers."""

from __future__ import annotations

from stark_sync.types import StrictBaseModel

from .felt import PatriciaKey


class ContractAddress(StrictBaseModel):
    """
    The address of a deployed contract.

    An address is a hash narrowed to the Patricia key range, so it can be
    used directly as a leaf key of the global state tree.
    """

    key: PatriciaKey
    """The address as a key of the global state tree."""
