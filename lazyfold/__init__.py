"""
Lazy, composable folds over sync and async sequences.

A fold invoker built by `reduce_lazy` returns a plain value for a sync
sequence and a coroutine for an async one, so the same pipeline works for
both:

    pipe([1, 2, 3, 4], reduce_lazy(operator.add, 5))                # 15
    await pipe([1, 2, 3, 4], to_async, reduce_lazy(operator.add, 5))  # 15

Architecture:
- Plain folds raise (reduce, reduce_lazy)
- Result folds return kungfu LazyCoroResult (fold, catching_reduce)
- Writer folds also return a log (fold_writer, reduce_traced)
"""

# Core types
from ._types import MISSING, AnyIterable, AsyncReducer, Missing, Reducer, SyncReducer

# Core folds and composition
from .core import FoldInvoker, pipe, pipe_lazy, reduce, reduce_lazy, with_seed, without_seed

# Sequence adaptation
from .lazy import to_async

# Lift helpers
from . import lift
from .lift import catching_reduce

# Writer monad
from . import writer
from .writer import FoldStep, LazyCoroResultWriter, Log, WriterResult, reduce_traced

# Collection operations
from .collection import fold, fold_lazy, fold_writer, foldM

# Errors
from ._errors import EmptySequenceError

__all__ = (
    # Types
    "MISSING",
    "Missing",
    "AnyIterable",
    "AsyncReducer",
    "Reducer",
    "SyncReducer",
    "FoldInvoker",
    # Core
    "pipe",
    "pipe_lazy",
    "reduce",
    "reduce_lazy",
    "with_seed",
    "without_seed",
    # Lazy
    "to_async",
    # Lift
    "lift",
    "catching_reduce",
    # Writer
    "writer",
    "FoldStep",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    "reduce_traced",
    # Collection
    "fold",
    "fold_lazy",
    "fold_writer",
    "foldM",
    # Errors
    "EmptySequenceError",
)
