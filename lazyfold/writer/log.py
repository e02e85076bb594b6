"""
Log
===

Append-only record kept by the Writer side of a fold, typically FoldStep
entries or handler messages.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable


class Log[A](list[A]):
    """
    Ordered fold log.

    Every operation builds a new Log, so a log captured after step n still
    holds exactly n entries when later steps append theirs.
    """

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        return Log[T](entries)

    @staticmethod
    def concat[T](logs: Iterable[Log[T]]) -> Log[T]:
        """Flatten per-step logs into one, preserving step order."""
        return Log[T](entry for log in logs for entry in log)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Entries of self followed by entries of other. Log() is the identity."""
        return Log[A]([*self, *other])

    def tell(self, entry: A, /) -> Log[A]:
        return Log[A]([*self, entry])

    def render[B](self, f: Callable[[A], B], /) -> Log[B]:
        """
        Turn entries into another form, e.g. FoldStep into text.

        Example:
            wr.log.render(lambda s: f"{s.accumulator} + {s.element} = {s.result}")
        """
        return Log[B](f(entry) for entry in self)


__all__ = ("Log",)
