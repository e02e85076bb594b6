"""
Core type definitions for lazyfold.

Reducer, sequence and sentinel types used across the library.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import AsyncIterable, Awaitable, Callable, Iterable

# ============================================================================
# Sentinel
# ============================================================================


class Missing(enum.Enum):
    """Marker for an omitted seed. ``None`` is a valid seed, this is not."""

    MISSING = enum.auto()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: typing.Final = Missing.MISSING

# ============================================================================
# Type aliases
# ============================================================================

# SyncReducer = (acc, element) -> next acc
type SyncReducer[Acc, T] = Callable[[Acc, T], Acc]

# AsyncReducer = (acc, element) -> awaitable next acc
type AsyncReducer[Acc, T] = Callable[[Acc, T], Awaitable[Acc]]

type Reducer[Acc, T] = SyncReducer[Acc, T] | AsyncReducer[Acc, T]

# AnyIterable = eagerly available or asynchronously produced sequence
type AnyIterable[T] = Iterable[T] | AsyncIterable[T]

__all__ = (
    "MISSING",
    "Missing",
    "SyncReducer",
    "AsyncReducer",
    "Reducer",
    "AnyIterable",
)
