"""
PromisedList
============

An ordered list of pending values that reads like a collection: every
operation resolves items one at a time, in index order, and settles to a
kungfu Result.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterator, Iterable

from kungfu import Error, LazyCoroResult, Ok

from .._errors import ItemResolutionError
from .._helpers import attempt
from .._types import Combine, Handler, HandlerDecorator, ItemCallback, Pending, Predicate, PromiseDecorator
from ..access import PendingAccess
from ..engine import drive
from .enumerate import each
from .filter import filter_, partition, reject
from .fold import reduce_
from .search import all_, any_, find
from .transform import map_, pluck, to_list


class PromisedList[T](PendingAccess[T]):
    """
    Sequenceable wrapper over pending values.

    Both decorators are fixed at construction:
    - promise_decorator wraps the outer computation of every drive
      (e.g. `timeout(seconds=5)`); it only limits how long the caller
      waits, the drive itself keeps going
    - handler_decorator wraps every per-item handler (e.g. `logged()`)

    Example:
        lines = PromisedList([fetch_line(1), fetch_line(2)])
        skus = await lines.pluck("sku")   # Ok(["A-1", "B-2"])
    """

    __slots__ = ("_promise_decorator", "_handler_decorator")

    def __init__(
        self,
        items: Iterable[Pending[T]] | None = None,
        /,
        *,
        promise_decorator: PromiseDecorator | None = None,
        handler_decorator: HandlerDecorator | None = None,
    ) -> None:
        super().__init__(items)
        self._promise_decorator = promise_decorator
        self._handler_decorator = handler_decorator

    @classmethod
    def of[V](cls, *values: V) -> PromisedList[V]:
        """List of already-resolved values."""
        return cls([LazyCoroResult.pure(value) for value in values])

    @property
    def promise_decorator(self) -> PromiseDecorator | None:
        return self._promise_decorator

    @property
    def handler_decorator(self) -> HandlerDecorator | None:
        return self._handler_decorator

    # Engine

    def drive[R](self, handler: Handler[T, R]) -> LazyCoroResult[list[R], typing.Any]:
        """Raw sequential pass: one settled handler result per visited item."""
        return drive(
            self,
            handler,
            handler_decorator=self._handler_decorator,
            promise_decorator=self._promise_decorator,
        )

    # Operations

    def each(self, callback: ItemCallback[T, typing.Any]) -> LazyCoroResult[None, typing.Any]:
        return each(self, callback)

    def map[R](self, callback: ItemCallback[T, R]) -> LazyCoroResult[list[R], typing.Any]:
        return map_(self, callback)

    def pluck(self, key: str) -> LazyCoroResult[list[typing.Any], typing.Any]:
        return pluck(self, key)

    def to_list(self) -> LazyCoroResult[list[T], typing.Any]:
        return to_list(self)

    def reduce[A](self, combine: Combine[A, T], initial: A) -> LazyCoroResult[A, typing.Any]:
        return reduce_(self, combine, initial)

    def find(self, predicate: Predicate[T]) -> LazyCoroResult[T | None, typing.Any]:
        return find(self, predicate)

    def filter(self, predicate: Predicate[T]) -> LazyCoroResult[list[T], typing.Any]:
        return filter_(self, predicate)

    def reject(self, predicate: Predicate[T]) -> LazyCoroResult[list[T], typing.Any]:
        return reject(self, predicate)

    def partition(
        self,
        predicate: Predicate[T],
    ) -> LazyCoroResult[tuple[list[T], list[T]], typing.Any]:
        return partition(self, predicate)

    def all(self, predicate: Predicate[T]) -> LazyCoroResult[bool, typing.Any]:
        return all_(self, predicate)

    def any(self, predicate: Predicate[T]) -> LazyCoroResult[bool, typing.Any]:
        return any_(self, predicate)

    # Presentation

    def to_display_string(self) -> str:
        return f"{type(self).__name__}{{length={len(self)}}}"

    def to_summary(self) -> dict[str, int]:
        # items are not included: they cannot be shown without resolving them
        return {"length": len(self)}

    def to_count(self) -> int:
        return len(self)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} length={len(self)}>"

    async def __aiter__(self) -> AsyncIterator[T | None]:
        """
        Resolve items one by one, in order, with the same live bound as a drive.

        Raises the captured exception when an item fails.
        """
        cursor = self.cursor()
        while cursor.has_next():
            index = cursor.index
            match await attempt(cursor.next):
                case Ok(item):
                    yield item
                case Error(e) if isinstance(e, Exception):
                    raise e
                case Error(e):
                    raise ItemResolutionError(index, e)


__all__ = ("PromisedList",)
