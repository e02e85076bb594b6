from __future__ import annotations

class EmptySequenceError(TypeError):
    """Fold of an empty sequence without a seed."""

    def __init__(self) -> None:
        super().__init__("reduce of empty sequence with no seed")

__all__ = ("EmptySequenceError",)
