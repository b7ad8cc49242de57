"""Per-drive and per-item state for the drive engine."""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Envelope[T]:
    """What a handler receives for one visited item."""

    item: T
    index: int
    stop: Callable[[], None]


def _empty_results() -> list[typing.Any]:
    return []


@dataclass(slots=True)
class DriveContext:
    """
    State of one drive.

    - index: 0-based, only moves forward
    - results: raw handler results, one per visited item, append only
    - stopped: write-once flag, flipped by an Envelope's stop()
    """

    index: int = 0
    results: list[typing.Any] = field(default_factory=_empty_results)
    stopped: bool = False

    def stop(self) -> None:
        self.stopped = True

    def envelope[T](self, item: T) -> Envelope[T]:
        return Envelope(item=item, index=self.index, stop=self.stop)


__all__ = ("DriveContext", "Envelope")
