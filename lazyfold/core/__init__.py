from .pipe import pipe, pipe_lazy
from .reduce import reduce
from .reduce_lazy import FoldInvoker, reduce_lazy, with_seed, without_seed

__all__ = (
    "FoldInvoker",
    "pipe",
    "pipe_lazy",
    "reduce",
    "reduce_lazy",
    "with_seed",
    "without_seed",
)
