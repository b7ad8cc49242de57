from __future__ import annotations

import typing


class TimeoutError(Exception):
    """Outer result was not observed in time."""

    seconds: float

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"Timed out after {seconds}s")


class ItemResolutionError(Exception):
    """Pending value or callback failed with a non-exception error value."""

    index: int
    error: typing.Any

    def __init__(self, index: int, error: typing.Any) -> None:
        self.index = index
        self.error = error
        super().__init__(f"Item {index} failed: {error!r}")


__all__ = ("ItemResolutionError", "TimeoutError")
