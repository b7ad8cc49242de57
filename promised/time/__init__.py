from .timeout import timeout

__all__ = ("timeout",)
