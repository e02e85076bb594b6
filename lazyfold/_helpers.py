"""Internal helpers for lazyfold.

Cursor plumbing shared by the fold implementations: pulling the next
element from a sync or async iterator and closing an abandoned cursor.
Not part of the public API."""

from __future__ import annotations

import inspect
import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterator

from ._types import AnyIterable

# Returned by next_item when the cursor is exhausted
DONE: typing.Final = object()

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Cursors
def open_cursor[T](iterable: AnyIterable[T]) -> Iterator[T] | AsyncIterator[T]:
    """Obtain the iterator of a sync or async iterable."""
    if isinstance(iterable, AsyncIterable):
        return aiter(iterable)
    return iter(iterable)

async def next_item[T](cursor: Iterator[T] | AsyncIterator[T]) -> T | object:
    """
    Pull the next element, suspending only for async cursors.

    Returns DONE when the cursor is exhausted.
    """
    if isinstance(cursor, AsyncIterator):
        return await anext(cursor, DONE)
    return next(cursor, DONE)

def close_cursor(cursor: object) -> None:
    """Close a sync cursor if it supports it (generators do)."""
    close = getattr(cursor, "close", None)
    if close is not None:
        close()

async def aclose_cursor(cursor: object) -> None:
    """
    Close a sync or async cursor.

    Async generators expose aclose(), sync generators close().
    """
    aclose = getattr(cursor, "aclose", None)
    if aclose is not None:
        await aclose()
        return
    close_cursor(cursor)

async def resolve[T](value: T | typing.Awaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value

__all__ = (
    "DONE",
    "identity",
    "open_cursor",
    "next_item",
    "close_cursor",
    "aclose_cursor",
    "resolve",
)
