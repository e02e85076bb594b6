from .fold import fold, fold_lazy, fold_writer, foldM

__all__ = (
    # LazyCoroResult
    "fold",
    "fold_lazy",
    # LazyCoroResultWriter
    "fold_writer",
    # Generic
    "foldM",
)
