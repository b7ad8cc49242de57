"""
Pending-value access
====================

Index-based retrieval of single pending values and structural mutation of
the backing list.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable, Iterator

from kungfu import LazyCoroResult, Result

from .._helpers import settle
from .._types import Pending
from .cursor import Cursor

logger = logging.getLogger(__name__)


class PendingAccess[T]:
    """
    Owner of an ordered list of pending values.

    Reading past either end is not an error: `at` resolves to None, the same
    way out-of-bounds access on a sparse array does.

    The list is owned exclusively. Mutating it while a drive is running is
    allowed but unguarded: the drive sees the new length on its next step.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Pending[T]] | None = None, /) -> None:
        self._items: list[Pending[T]] = list(items) if items is not None else []

    @property
    def length(self) -> int:
        """Current number of pending values. Never cached."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def at(self, index: int) -> LazyCoroResult[T | None, typing.Any]:
        """
        Pending value stored at `index` at the time of the call.

        Override this when fetching the n-th value is itself asynchronous
        (remote pages, database cursors); the engine only ever reads values
        through `at`.

        Example:
            class Orders(PromisedList[Order]):
                def at(self, index):
                    return LazyCoroResult(lambda: api.fetch_order(index))
        """
        item = self._items[index] if 0 <= index < len(self._items) else None

        async def run() -> Result[T | None, typing.Any]:
            return await settle(item)

        return LazyCoroResult(run)

    def push(self, *values: Pending[T]) -> int:
        """Append one or more pending values. Returns the new length."""
        self._items.extend(values)
        return len(self._items)

    def pop(self) -> LazyCoroResult[T | None, typing.Any]:
        """Remove the last pending value and return it (through `at`)."""
        result = self.at(len(self._items) - 1)
        if self._items:
            self._items.pop()
        else:
            logger.debug("pop() on empty %s", type(self).__name__)
        return result

    def unshift(self, *values: Pending[T]) -> int:
        """Prepend one or more pending values, keeping their order. Returns the new length."""
        self._items[0:0] = values
        return len(self._items)

    def shift(self) -> LazyCoroResult[T | None, typing.Any]:
        """Remove the first pending value and return it (through `at`)."""
        result = self.at(0)
        if self._items:
            del self._items[0]
        else:
            logger.debug("shift() on empty %s", type(self).__name__)
        return result

    def cursor(self) -> Cursor[T]:
        """Fresh one-pass cursor bounded by the live length."""
        return Cursor(self)

    def __iter__(self) -> Iterator[LazyCoroResult[T | None, typing.Any]]:
        """
        Yield one pending value per index, unresolved.

        Prefer the sequential operations (`each`, `map`, ...) which resolve
        one item at a time instead of handing out everything at once.
        """
        return self.cursor()


__all__ = ("PendingAccess",)
