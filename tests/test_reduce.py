"""Tests for reduce over sync and async sequences."""

import asyncio
import functools
import inspect
import operator

import pytest
from lazyfold import EmptySequenceError, reduce, to_async


async def add_async(a: int, b: int) -> int:
    await asyncio.sleep(0)
    return a + b


class Boom(Exception):
    pass


class TestSyncReduce:
    def test_with_seed(self):
        assert reduce(operator.add, [1, 2, 3, 4], 5) == 15

    def test_without_seed_uses_first_element(self):
        calls = []

        def f(a, b):
            calls.append((a, b))
            return a * 10 + b

        assert reduce(f, [1, 2, 3]) == 123
        assert calls == [(1, 2), (12, 3)]

    def test_matches_functools(self):
        items = [3, -1, 4, 1, -5, 9]
        assert reduce(operator.sub, items, 100) == functools.reduce(operator.sub, items, 100)

    def test_left_association(self):
        assert reduce(lambda a, b: f"({a}{b})", "abc", "z") == "(((za)b)c)"

    def test_empty_with_seed_returns_seed(self):
        assert reduce(operator.add, [], 7) == 7

    def test_single_element_without_seed(self):
        assert reduce(operator.add, [42]) == 42

    def test_empty_without_seed_raises(self):
        with pytest.raises(EmptySequenceError):
            reduce(operator.add, [])

    def test_empty_error_is_type_error(self):
        with pytest.raises(TypeError):
            reduce(operator.add, iter(()))

    def test_none_is_a_seed(self):
        assert reduce(lambda acc, x: [x] if acc is None else acc + [x], [1, 2], None) == [1, 2]

    def test_returns_plain_value(self):
        result = reduce(operator.add, [1, 2], 0)
        assert not inspect.isawaitable(result)

    def test_generator_input(self):
        assert reduce(operator.add, (x * x for x in range(4)), 0) == 14

    def test_reducer_error_propagates_unchanged(self):
        seen = []
        err = Boom("second")

        def f(acc, x):
            seen.append(x)
            if x == 2:
                raise err
            return acc + x

        with pytest.raises(Boom) as exc_info:
            reduce(f, [1, 2, 3, 4], 0)
        assert exc_info.value is err
        assert seen == [1, 2]

    def test_sequence_error_propagates(self):
        def broken():
            yield 1
            raise ValueError("cursor failed")

        with pytest.raises(ValueError, match="cursor failed"):
            reduce(operator.add, broken(), 0)

    def test_reducer_error_closes_generator(self):
        closed = []

        def gen():
            try:
                yield from [1, 2, 3, 4]
            finally:
                closed.append(True)

        def f(acc, x):
            if x == 2:
                raise Boom()
            return acc + x

        with pytest.raises(Boom):
            reduce(f, gen(), 0)
        assert closed == [True]


class TestAsyncReduce:
    @pytest.mark.asyncio
    async def test_async_sequence_returns_coroutine(self):
        result = reduce(operator.add, to_async([1, 2, 3, 4]), 5)
        assert inspect.isawaitable(result)
        assert await result == 15

    @pytest.mark.asyncio
    async def test_async_sequence_without_seed(self):
        assert await reduce(lambda a, b: a * 10 + b, to_async([1, 2, 3])) == 123

    @pytest.mark.asyncio
    async def test_async_empty_without_seed(self):
        with pytest.raises(EmptySequenceError):
            await reduce(operator.add, to_async([]))

    @pytest.mark.asyncio
    async def test_async_reducer_on_sync_sequence(self):
        result = reduce(add_async, [1, 2, 3, 4], 5)
        assert inspect.isawaitable(result)
        assert await result == 15

    @pytest.mark.asyncio
    async def test_async_reducer_single_element_still_deferred(self):
        result = reduce(add_async, [1])
        assert inspect.isawaitable(result)
        assert await result == 1

    @pytest.mark.asyncio
    async def test_reducer_returning_awaitable_switches_mode(self):
        def f(a, b):
            if b == 3:
                return add_async(a, b)
            return a + b

        result = reduce(f, [1, 2, 3, 4], 5)
        assert inspect.isawaitable(result)
        assert await result == 15

    @pytest.mark.asyncio
    async def test_calls_do_not_overlap(self):
        events = []
        active = 0

        async def f(acc, x):
            nonlocal active
            active += 1
            assert active == 1
            events.append(("start", x))
            await asyncio.sleep(0.001)
            events.append(("end", x))
            active -= 1
            return acc + x

        assert await reduce(f, to_async([1, 2, 3, 4]), 5) == 15
        assert events == [
            ("start", 1), ("end", 1),
            ("start", 2), ("end", 2),
            ("start", 3), ("end", 3),
            ("start", 4), ("end", 4),
        ]

    @pytest.mark.asyncio
    async def test_async_reducer_error_stops_fold(self):
        seen = []
        err = Boom("second")

        async def f(acc, x):
            seen.append(x)
            if x == 2:
                raise err
            return acc + x

        with pytest.raises(Boom) as exc_info:
            await reduce(f, to_async([1, 2, 3, 4]), 0)
        assert exc_info.value is err
        assert seen == [1, 2]

    @pytest.mark.asyncio
    async def test_async_sequence_error_propagates(self):
        async def broken():
            yield 1
            raise ValueError("cursor failed")

        with pytest.raises(ValueError, match="cursor failed"):
            await reduce(operator.add, broken(), 0)

    @pytest.mark.asyncio
    async def test_cancellation_closes_async_generator(self):
        closed = asyncio.Event()
        started = asyncio.Event()
        pulled = []

        async def source():
            try:
                for x in range(100):
                    pulled.append(x)
                    yield x
            finally:
                closed.set()

        async def f(acc, x):
            started.set()
            await asyncio.Event().wait()
            return acc + x

        task = asyncio.create_task(reduce(f, source(), 0))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert closed.is_set()
        assert pulled == [0]


class BrokenAsyncSource:
    def __init__(self, error):
        self.error = error

    def __aiter__(self):
        raise self.error


class BrokenSyncSource:
    def __init__(self, error):
        self.error = error

    def __iter__(self):
        raise self.error


class TestDeferredFailures:
    @pytest.mark.asyncio
    async def test_async_source_failing_to_open_fails_through_coroutine(self):
        err = ValueError("no cursor")
        result = reduce(operator.add, BrokenAsyncSource(err), 0)
        assert inspect.isawaitable(result)
        with pytest.raises(ValueError) as exc_info:
            await result
        assert exc_info.value is err

    @pytest.mark.asyncio
    async def test_async_reducer_over_failing_sync_source(self):
        err = ValueError("no cursor")
        result = reduce(add_async, BrokenSyncSource(err), 0)
        assert inspect.isawaitable(result)
        with pytest.raises(ValueError) as exc_info:
            await result
        assert exc_info.value is err

    def test_sync_fold_over_failing_source_raises_immediately(self):
        with pytest.raises(ValueError, match="no cursor"):
            reduce(operator.add, BrokenSyncSource(ValueError("no cursor")), 0)


class TestHandoff:
    @pytest.mark.asyncio
    async def test_failing_awaitable_mid_sync_fold(self):
        closed = []
        seen = []
        err = Boom("pending failed")

        def gen():
            try:
                yield from [1, 2, 3, 4]
            finally:
                closed.append(True)

        async def fail():
            raise err

        def f(acc, x):
            seen.append(x)
            if x == 2:
                return fail()
            return acc + x

        result = reduce(f, gen(), 0)
        assert inspect.isawaitable(result)
        with pytest.raises(Boom) as exc_info:
            await result
        assert exc_info.value is err
        assert seen == [1, 2]
        assert closed == [True]

    @pytest.mark.asyncio
    async def test_cancel_while_awaiting_handed_over_result(self):
        closed = []
        started = asyncio.Event()

        def gen():
            try:
                yield from [1, 2, 3, 4]
            finally:
                closed.append(True)

        async def stall(acc, x):
            started.set()
            await asyncio.Event().wait()
            return acc + x

        def f(acc, x):
            if x == 2:
                return stall(acc, x)
            return acc + x

        task = asyncio.create_task(reduce(f, gen(), 0))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert closed == [True]
