"""
Fold combinators
================

Effectful fold over sync or async sequences with extract + wrap pattern.
The handler returns a monadic value; the first failure short-circuits.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import EmptySequenceError
from .._helpers import DONE, aclose_cursor, identity, next_item, open_cursor
from .._types import MISSING, AnyIterable, Missing
from ..writer import LazyCoroResultWriter, Log, WriterResult


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def foldM[M, A, T, E, RawIn, RawOut](
    items: AnyIterable[A],
    handler: Callable[[T, A], Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    *,
    initial: T | Missing = MISSING,
    extract: Callable[[RawIn], Result[T, E]],
    get_value: Callable[[RawIn], T],
    combine_ok: Callable[[T, list[RawIn]], RawOut],
    combine_err: Callable[[E, list[RawIn]], RawOut],
    on_empty: Callable[[], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic fold combinator.

    Without `initial` the first item seeds the accumulator and an empty
    sequence produces on_empty().
    """

    async def run() -> RawOut:
        cursor = open_cursor(items)
        raws: list[RawIn] = []
        try:
            acc = initial
            if acc is MISSING:
                acc = await next_item(cursor)
                if acc is DONE:
                    return on_empty()

            while (item := await next_item(cursor)) is not DONE:
                raw = await handler(acc, item)()
                raws.append(raw)
                match extract(raw):
                    case Ok(_):
                        acc = get_value(raw)
                    case Error(e):
                        await aclose_cursor(cursor)
                        return combine_err(e, raws)

            return combine_ok(acc, raws)
        except BaseException:
            await aclose_cursor(cursor)
            raise

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def fold[A, T, E](
    items: AnyIterable[A],
    handler: Callable[[T, A], LazyCoroResult[T, E]],
    *,
    initial: T | Missing = MISSING,
) -> LazyCoroResult[T, E | EmptySequenceError]:
    """
    Effectful fold: build up state through sequential effects.

    Example:
        def charge(total: int, price: int) -> LazyCoroResult[int, str]:
            return L.call(billing.charge, total, price)

        await fold(prices, charge, initial=0)  # Ok(total) or first Error
    """

    def get_value(r: Result[T, E]) -> T:
        return r.unwrap()

    def combine_ok(acc: T, _: list[Result[T, E]]) -> Result[T, E | EmptySequenceError]:
        return Ok(acc)

    def combine_err(e: E, _: list[Result[T, E]]) -> Result[T, E | EmptySequenceError]:
        return Error(e)

    def on_empty() -> Result[T, E | EmptySequenceError]:
        return Error(EmptySequenceError())

    return foldM(
        items,
        handler,
        initial=initial,
        extract=identity,
        get_value=get_value,
        combine_ok=combine_ok,
        combine_err=combine_err,
        on_empty=on_empty,
        wrap=LazyCoroResult,
    )


def fold_lazy[A, T, E](
    handler: Callable[[T, A], LazyCoroResult[T, E]],
    *,
    initial: T | Missing = MISSING,
) -> Callable[[AnyIterable[A]], LazyCoroResult[T, E | EmptySequenceError]]:
    """Point-free fold, for use with pipe."""

    def invoke(items: AnyIterable[A]) -> LazyCoroResult[T, E | EmptySequenceError]:
        return fold(items, handler, initial=initial)

    return invoke


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def fold_writer[A, T, E, W](
    items: AnyIterable[A],
    handler: Callable[[T, A], LazyCoroResultWriter[T, E, W]],
    *,
    initial: T | Missing = MISSING,
) -> LazyCoroResultWriter[T, E | EmptySequenceError, W]:
    """Effectful fold with log merging. A failed step's log is kept."""

    def merged(wrs: list[WriterResult[T, E, Log[W]]]) -> Log[W]:
        return Log.concat(wr.log for wr in wrs)

    def combine_ok(
        acc: T, wrs: list[WriterResult[T, E, Log[W]]]
    ) -> WriterResult[T, E | EmptySequenceError, Log[W]]:
        return WriterResult(Ok(acc), merged(wrs))

    def combine_err(
        e: E, wrs: list[WriterResult[T, E, Log[W]]]
    ) -> WriterResult[T, E | EmptySequenceError, Log[W]]:
        return WriterResult(Error(e), merged(wrs))

    def on_empty() -> WriterResult[T, E | EmptySequenceError, Log[W]]:
        return WriterResult(Error(EmptySequenceError()), Log[W]())

    return foldM(
        items,
        handler,
        initial=initial,
        extract=lambda wr: wr.result,
        get_value=lambda wr: wr.result.unwrap(),
        combine_ok=combine_ok,
        combine_err=combine_err,
        on_empty=on_empty,
        wrap=LazyCoroResultWriter,
    )


__all__ = ("fold", "fold_lazy", "fold_writer", "foldM")
