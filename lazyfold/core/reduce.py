"""
Reduce
======

Left fold over sync and async sequences.

The calling convention follows the input: a sync sequence folded with a
sync reducer returns the value directly, anything asynchronous returns a
coroutine. Either way the reducer is called one element at a time, in
iteration order, and every awaitable accumulator is settled before the
next element is pulled.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import AsyncIterable, Awaitable, Coroutine, Iterator

from .._errors import EmptySequenceError
from .._helpers import DONE, aclose_cursor, close_cursor, next_item, open_cursor
from .._types import MISSING, AnyIterable, Missing, Reducer


# ============================================================================
# Fold loops
# ============================================================================


def _reduce_sync[T, Acc](
    f: Reducer[Acc, T],
    cursor: Iterator[T],
    seed: Acc | Missing,
) -> Acc | Coroutine[typing.Any, typing.Any, Acc]:
    """Fold eagerly, handing over to the async loop at the first awaitable."""
    try:
        acc = seed
        if acc is MISSING:
            acc = next(cursor, DONE)
            if acc is DONE:
                raise EmptySequenceError()

        for item in cursor:
            acc = f(acc, item)
            if inspect.isawaitable(acc):
                return _reduce_async(f, cursor, MISSING, pending=acc)
        return acc
    except BaseException:
        close_cursor(cursor)
        raise


async def _reduce_async[T, Acc](
    f: Reducer[Acc, T],
    iterable: AnyIterable[T],
    seed: Acc | Missing,
    *,
    pending: Awaitable[Acc] | None = None,
) -> Acc:
    """
    Fold with suspension points at every pull and every reducer result.

    The cursor is opened here so that a failing __iter__ or __aiter__ is
    raised through the coroutine. An iterator handed over by the sync loop
    opens to itself.
    """
    cursor = open_cursor(iterable)
    try:
        if pending is not None:
            acc = await pending
        elif seed is MISSING:
            acc = await next_item(cursor)
            if acc is DONE:
                raise EmptySequenceError()
        else:
            acc = seed

        while (item := await next_item(cursor)) is not DONE:
            acc = f(acc, item)
            if inspect.isawaitable(acc):
                acc = await acc
        return acc
    except BaseException:
        await aclose_cursor(cursor)
        raise


# ============================================================================
# Public API
# ============================================================================


@typing.overload
def reduce[T, Acc](
    f: Reducer[Acc, T],
    iterable: AsyncIterable[T],
    seed: Acc | Missing = MISSING,
) -> Coroutine[typing.Any, typing.Any, Acc]: ...


@typing.overload
def reduce[T, Acc](
    f: Reducer[Acc, T],
    iterable: AnyIterable[T],
    seed: Acc | Missing = MISSING,
) -> Acc | Coroutine[typing.Any, typing.Any, Acc]: ...


def reduce[T, Acc](
    f: Reducer[Acc, T],
    iterable: AnyIterable[T],
    seed: Acc | Missing = MISSING,
) -> Acc | Coroutine[typing.Any, typing.Any, Acc]:
    """
    Fold `iterable` into one value with `f(acc, element) -> acc`.

    Without a seed the first element becomes the accumulator and no reducer
    call is made for it; an empty sequence then raises EmptySequenceError.

    Example:
        reduce(lambda a, b: a + b, [1, 2, 3, 4], 5)              # 15
        await reduce(lambda a, b: a + b, to_async([1, 2, 3]))   # 6
        await reduce(add_async, [1, 2, 3, 4], 5)                # 15

    Errors raised by `f` or by the sequence propagate unchanged and stop the
    fold. The cursor taken from `iterable` is closed on any abrupt exit,
    including cancellation of the returned coroutine.

    NOTE: An awaitable returned by `f` is always awaited, so awaitables
          cannot be used as plain accumulator values.
    """
    if isinstance(iterable, AsyncIterable) or inspect.iscoroutinefunction(f):
        return _reduce_async(f, iterable, seed)
    return _reduce_sync(f, iter(iterable), seed)


__all__ = ("reduce",)
