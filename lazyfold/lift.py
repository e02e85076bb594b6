"""
Lift
====

Bridge between the exception-raising folds and kungfu's Result channel.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._helpers import identity, resolve
from ._types import MISSING, AnyIterable, Missing, Reducer
from .core.reduce import reduce


def catching_reduce[T, Acc, E](
    f: Reducer[Acc, T],
    seed: Acc | Missing = MISSING,
    *,
    on_error: Callable[[Exception], E] = identity,
) -> Callable[[AnyIterable[T]], LazyCoroResult[Acc, E]]:
    """
    Fold invoker returning LazyCoroResult instead of raising.

    **When to use:** Feeding a fold into Result-based pipelines, or when a
    failing reducer should become a value the caller matches on.

    Example:
        from lazyfold import lift as L

        parse_total = L.catching_reduce(
            lambda acc, raw: acc + int(raw),
            0,
            on_error=lambda e: ParseError(str(e)),
        )
        await parse_total(["1", "2", "x"])  # Error(ParseError(...))

    NOTE: Catches Exception subclasses only, so cancellation still
          propagates. EmptySequenceError goes through on_error too.
    """

    def invoke(iterable: AnyIterable[T]) -> LazyCoroResult[Acc, E]:
        async def run() -> Result[Acc, E]:
            try:
                if seed is MISSING:
                    return Ok(await resolve(reduce(f, iterable)))
                return Ok(await resolve(reduce(f, iterable, seed)))
            except Exception as exc:
                return Error(on_error(exc))

        return LazyCoroResult(run)

    return invoke


__all__ = ("catching_reduce",)
