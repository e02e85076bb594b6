"""LazyCoroResultWriter

Deferred async computation yielding a kungfu Result together with a Log.
Used by the traced and log-merging folds to report every step they take."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from .log import Log

@dataclass(frozen=True)
class WriterResult[T, E, W]:
    """
    Settled writer: the fold's Result plus the log gathered on the way.

    The log is filled on both channels, so a failed fold still shows the
    steps that ran before the failure.
    """

    result: Result[T, E]
    log: W

type _Run[T, E, W] = Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]]

class LazyCoroResultWriter[T, E, W]:
    """Lazy coroutine producing WriterResult[T, E, Log[W]].

    Nothing runs until the writer is called or awaited; every call runs the
    computation again.
    """

    __slots__ = ("_run",)

    def __init__(self, run: _Run[T, E, W], /) -> None:
        self._run = run

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroResultWriter[U, E, W]:
        """Transform the success value, keep the log."""

        async def run() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map(f), wr.log)

        return LazyCoroResultWriter(run)

    def then[U](
        self,
        f: Callable[[T], LazyCoroResultWriter[U, E, W]],
        /,
    ) -> LazyCoroResultWriter[U, E, W]:
        """
        Chain a dependent step.

        On Ok runs `f` and appends its log; on Error skips `f` and keeps the log.
        """

        async def run() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            match wr.result:
                case Ok(value):
                    nxt = await f(value)
                    return WriterResult(nxt.result, wr.log.combine(nxt.log))
                case Error(err):
                    return WriterResult(Error(err), wr.log)
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyCoroResultWriter(run)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries after the computation's own log."""

        async def run() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(run)

    def unwrap(self) -> Coroutine[typing.Any, typing.Any, T]:
        """Run and return the value, raising on Error. The log is dropped."""

        async def inner() -> T:
            wr = await self()
            return wr.result.unwrap()

        return inner()

    def to_lazy_coro_result(self) -> LazyCoroResult[tuple[T, Log[W]], E]:
        """Convert to LazyCoroResult carrying (value, log) on success."""

        async def run() -> Result[tuple[T, Log[W]], E]:
            wr = await self()
            match wr.result:
                case Ok(value):
                    return Ok((value, wr.log))
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyCoroResult(run)

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        return self._run()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()

def writer_ok[T, W](value: T, *entries: W) -> LazyCoroResultWriter[T, typing.Never, W]:
    """Successful writer with `value` and log `entries`."""

    async def run() -> WriterResult[T, typing.Never, Log[W]]:
        return WriterResult(Ok(value), Log.of(*entries))

    return LazyCoroResultWriter(run)

def writer_error[E, W](error: E, *entries: W) -> LazyCoroResultWriter[typing.Never, E, W]:
    """Failed writer with `error` and log `entries`."""

    async def run() -> WriterResult[typing.Never, E, Log[W]]:
        return WriterResult(Error(error), Log.of(*entries))

    return LazyCoroResultWriter(run)

__all__ = (
    "LazyCoroResultWriter",
    "WriterResult",
    "writer_ok",
    "writer_error",
)
