"""
Traced reduce
=============

`reduce_lazy` that records every reducer call into a Writer log and reports
failures on the Result channel instead of raising.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok

from .._errors import EmptySequenceError
from .._helpers import DONE, aclose_cursor, next_item, open_cursor
from .._types import MISSING, AnyIterable, Missing, Reducer
from .log import Log
from .monad import LazyCoroResultWriter, WriterResult


@dataclass(frozen=True)
class FoldStep[Acc, T]:
    """One reducer call: f(accumulator, element) == result."""

    index: int
    accumulator: Acc
    element: T
    result: Acc


def reduce_traced[T, Acc](
    f: Reducer[Acc, T],
    seed: Acc | Missing = MISSING,
) -> Callable[[AnyIterable[T]], LazyCoroResultWriter[Acc, Exception, FoldStep[Acc, T]]]:
    """
    Fold invoker whose writer log holds one FoldStep per reducer call.

    `index` is the element's position in the sequence, so without a seed the
    first logged step has index 1. A failing reducer call is not logged: the
    writer settles to Error(exc) with the steps completed before it. An empty
    sequence without a seed settles to Error(EmptySequenceError()).

    Example:
        wr = await reduce_traced(operator.add, 0)([1, 2])
        wr.result  # Ok(3)
        wr.log     # [FoldStep(0, 0, 1, 1), FoldStep(1, 1, 2, 3)]

    NOTE: Always asynchronous, sync sequences included.
          Cancellation is not turned into an Error.
    """

    def invoke(iterable: AnyIterable[T]) -> LazyCoroResultWriter[Acc, Exception, FoldStep[Acc, T]]:
        async def run() -> WriterResult[Acc, Exception, Log[FoldStep[Acc, T]]]:
            log = Log[FoldStep[Acc, T]]()
            cursor = None
            index = 0
            try:
                cursor = open_cursor(iterable)
                acc = seed
                if acc is MISSING:
                    acc = await next_item(cursor)
                    if acc is DONE:
                        return WriterResult(Error(EmptySequenceError()), log)
                    index = 1

                while (item := await next_item(cursor)) is not DONE:
                    result = f(acc, item)
                    if inspect.isawaitable(result):
                        result = await result
                    log = log.tell(FoldStep(index, acc, item, result))
                    acc = result
                    index += 1
                return WriterResult(Ok(acc), log)
            except Exception as exc:
                await aclose_cursor(cursor)
                return WriterResult(Error(exc), log)
            except BaseException:
                await aclose_cursor(cursor)
                raise

        return LazyCoroResultWriter(run)

    return invoke


__all__ = ("FoldStep", "reduce_traced")
