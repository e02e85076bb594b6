"""Pipe

Left-to-right function composition that goes async when the value does."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable, Sequence

async def _pipe_async(
    value: Awaitable[typing.Any],
    fns: Sequence[Callable[[typing.Any], typing.Any]],
) -> typing.Any:
    result = await value
    for fn in fns:
        result = fn(result)
        if inspect.isawaitable(result):
            result = await result
    return result

def pipe(value: typing.Any, *fns: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """
    Thread `value` through `fns`, left to right.

    Stays synchronous while every intermediate value is a plain value. Once
    one is awaitable, the rest of the chain runs after awaiting it and pipe
    returns a coroutine.

    Example:
        pipe([1, 2, 3, 4], reduce_lazy(operator.add, 5))                # 15
        await pipe([1, 2, 3, 4], to_async, reduce_lazy(operator.add, 5))  # 15
    """
    for i, fn in enumerate(fns):
        if inspect.isawaitable(value):
            return _pipe_async(value, fns[i:])
        value = fn(value)
    return value

def pipe_lazy(*fns: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], typing.Any]:
    """Point-free pipe: pipe_lazy(f, g)(x) == pipe(x, f, g)."""

    def run(value: typing.Any) -> typing.Any:
        return pipe(value, *fns)

    return run

__all__ = ("pipe", "pipe_lazy")
