"""Wire messages and range queries of the sync protocol."""

from .query import Direction, InternalQuery, Query

__all__ = [
    "Direction",
    "InternalQuery",
    "Query",
]
