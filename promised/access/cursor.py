"""Cursor over pending values

Explicit index cursor with a dynamic bound: the owner's length is read
again on every request, so growth or shrinkage during a pass changes how
many indices are produced."""

from __future__ import annotations

import typing

from kungfu import LazyCoroResult

if typing.TYPE_CHECKING:
    from .backing import PendingAccess


class Cursor[T]:
    """
    One-pass cursor: "is there a next index, and if so produce its awaitable".

    A fresh cursor is created per drive, so passes are restartable.
    """

    __slots__ = ("_owner", "_index")

    def __init__(self, owner: PendingAccess[T], /) -> None:
        self._owner = owner
        self._index = 0

    @property
    def index(self) -> int:
        """Index the next call to `next()` will produce."""
        return self._index

    def has_next(self) -> bool:
        return self._index < len(self._owner)

    def next(self) -> LazyCoroResult[T | None, typing.Any]:
        """Produce the pending value for the current index and advance."""
        if not self.has_next():
            raise StopIteration
        pending = self._owner.at(self._index)
        self._index += 1
        return pending

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> LazyCoroResult[T | None, typing.Any]:
        return self.next()


__all__ = ("Cursor",)
