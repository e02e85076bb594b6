"""
To async
========

Adapt an eager sequence into an asynchronous one.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Iterable


async def _drain[T](iterable: Iterable[T | Awaitable[T]]) -> AsyncIterator[T]:
    for item in iterable:
        if inspect.isawaitable(item):
            yield await item
        else:
            yield item


def to_async[T](iterable: Iterable[T | Awaitable[T]] | AsyncIterable[T]) -> AsyncIterator[T]:
    """
    Turn a sync iterable into an async iterator.

    Elements are produced one at a time, in order. Awaitable elements are
    awaited before being yielded, so `to_async([coro_a(), coro_b()])` yields
    their results sequentially. An async iterable passes through unchanged.

    Example:
        await pipe([1, 2, 3, 4], to_async, reduce_lazy(operator.add, 5))  # 15
    """
    if isinstance(iterable, AsyncIterable):
        return aiter(iterable)
    return _drain(iterable)


__all__ = ("to_async",)
