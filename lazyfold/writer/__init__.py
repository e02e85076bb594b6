"""
Writer
======

Log accumulation for folds, built on kungfu's Result:
- Log (append-only monoid)
- WriterResult (Result + Log)
- LazyCoroResultWriter (lazy coroutine producing WriterResult)
- reduce_traced (fold invoker logging each reducer call)
"""

from .log import Log
from .monad import LazyCoroResultWriter, WriterResult, writer_error, writer_ok
from .trace import FoldStep, reduce_traced

__all__ = (
    "FoldStep",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    "reduce_traced",
    "writer_error",
    "writer_ok",
)
