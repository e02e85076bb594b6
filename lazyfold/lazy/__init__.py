from .to_async import to_async

__all__ = ("to_async",)
