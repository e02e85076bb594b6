from __future__ import annotations

import asyncio
import operator

from kungfu import Error, Ok

from lazyfold import catching_reduce, pipe, reduce_lazy, reduce_traced, to_async


async def add_slowly(acc: int, x: int) -> int:
    await asyncio.sleep(0.01)
    return acc + x


async def main() -> None:
    total = reduce_lazy(operator.add, 5)

    # Sync in, sync out
    print(pipe([1, 2, 3, 4], total))

    # Async sequence or async reducer: same fold, awaited
    print(await pipe([1, 2, 3, 4], to_async, total))
    print(await pipe([1, 2, 3, 4], reduce_lazy(add_slowly, 5)))

    # Every reducer call recorded in the writer log
    wr = await reduce_traced(add_slowly, 5)([1, 2, 3, 4])
    for line in wr.log.render(lambda s: f"  #{s.index}: {s.accumulator} + {s.element} = {s.result}"):
        print(line)

    # Failures as values
    result = await catching_reduce(lambda acc, raw: acc + int(raw), 0)(["1", "2", "x"])
    match result:
        case Ok(value):
            print(value)
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    asyncio.run(main())
