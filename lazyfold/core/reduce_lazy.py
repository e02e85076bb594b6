"""
Reduce lazy
===========

Point-free `reduce`: bind the reducer and seed now, apply to a sequence later.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from .._types import MISSING, AnyIterable, Missing, Reducer
from .reduce import reduce

type FoldInvoker[T, Acc] = Callable[
    [AnyIterable[T]], Acc | Coroutine[typing.Any, typing.Any, Acc]
]


def reduce_lazy[T, Acc](
    f: Reducer[Acc, T],
    seed: Acc | Missing = MISSING,
) -> FoldInvoker[T, Acc]:
    """
    Curried version of `reduce`, behaves identically to it.

    Returns a fold invoker: a one-argument function taking a sync or async
    iterable. A sync iterable folded with a sync reducer gives the value
    directly; otherwise the invoker returns a coroutine.

    Example:
        total = reduce_lazy(lambda a, b: a + b, 5)

        total([1, 2, 3, 4])                  # 15
        await total(to_async([1, 2, 3, 4]))  # 15

    Fits `pipe`:
        pipe([1, 2, 3, 4], reduce_lazy(lambda a, b: a + b, 5))           # 15
        await pipe([1, 2, 3, 4], to_async, reduce_lazy(operator.add, 5))  # 15

    NOTE: Only the MISSING sentinel means "no seed". `None` is a real seed.
          When the accumulator type differs from the element type a seed
          must be given, otherwise the first element is the accumulator.
    """
    if seed is MISSING:

        def invoke_unseeded(iterable: AnyIterable[T]) -> Acc | Coroutine[typing.Any, typing.Any, Acc]:
            return reduce(f, iterable)

        return invoke_unseeded

    def invoke(iterable: AnyIterable[T]) -> Acc | Coroutine[typing.Any, typing.Any, Acc]:
        return reduce(f, iterable, seed)

    return invoke


def with_seed[T, Acc](f: Reducer[Acc, T], seed: Acc) -> FoldInvoker[T, Acc]:
    """Fold invoker starting from `seed`. Any value, None included, is a seed."""

    def invoke(iterable: AnyIterable[T]) -> Acc | Coroutine[typing.Any, typing.Any, Acc]:
        return reduce(f, iterable, seed)

    return invoke


def without_seed[T](f: Reducer[T, T]) -> FoldInvoker[T, T]:
    """Fold invoker seeded by the first element of the sequence."""
    return reduce_lazy(f)


__all__ = ("FoldInvoker", "reduce_lazy", "with_seed", "without_seed")
