"""Block identifiers."""

from __future__ import annotations

from typing import Union

from stark_sync.types import Uint64

from .felt import StarkFelt


class BlockNumber(Uint64):
    """The height of a block in the chain, starting at 0 for genesis."""


class BlockHash(StarkFelt):
    """The hash of a block header."""


BlockHashOrNumber = Union[BlockHash, BlockNumber]
"""
A block identified either by its hash or by its number.

The two variants are distinct Python types (`bytes` and `int` subclasses),
so the active variant is always recoverable with `isinstance`.
"""
