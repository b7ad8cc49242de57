"""Transform combinators

Per-item mapping: results come back in index order, one per item."""

from __future__ import annotations

import typing

from kungfu import LazyCoroResult

from .._helpers import fit_arity
from .._types import ItemCallback
from ..engine import Envelope

if typing.TYPE_CHECKING:
    from .promised_list import PromisedList


@typing.runtime_checkable
class SupportsRelations(typing.Protocol):
    """
    Item that resolves named relations, e.g. a model with foreign keys.
    `get_rel` may return an awaitable.
    """

    def has_rel(self, key: str, /) -> bool: ...

    def get_rel(self, key: str, /) -> typing.Any: ...


@typing.runtime_checkable
class SupportsGet(typing.Protocol):
    """Item with a plain keyed lookup, e.g. a mapping. The lookup may return an awaitable."""

    def get(self, key: str, /) -> typing.Any: ...


def lookup(item: typing.Any, key: str) -> typing.Any:
    """
    Value named `key` on `item`.

    A relation wins when the item has one for `key`; otherwise the plain
    lookup: `get` when the item has one, attribute access as a last resort.
    """
    if isinstance(item, SupportsRelations) and item.has_rel(key):
        return item.get_rel(key)
    if isinstance(item, SupportsGet):
        return item.get(key)
    return getattr(item, key, None)


def map_[T, R](
    source: PromisedList[T],
    callback: ItemCallback[T, R],
) -> LazyCoroResult[list[R], typing.Any]:
    """
    Monadic map over pending values.

    If `callback` returns an awaitable, its resolved value is collected.
    """

    callback = fit_arity(callback, most=2)

    def apply(envelope: Envelope[T]) -> typing.Any:
        return callback(envelope.item, envelope.index)

    return source.drive(apply)


def pluck[T](
    source: PromisedList[T],
    key: str,
) -> LazyCoroResult[list[typing.Any], typing.Any]:
    """Collect the value named `key` from every item. See `lookup`."""

    def project(envelope: Envelope[T]) -> typing.Any:
        return lookup(envelope.item, key)

    return source.drive(project)


def to_list[T](source: PromisedList[T]) -> LazyCoroResult[list[T], typing.Any]:
    """Resolve every item, in order."""

    def unchanged(envelope: Envelope[T]) -> T:
        return envelope.item

    return source.drive(unchanged)


__all__ = ("SupportsGet", "SupportsRelations", "lookup", "map_", "pluck", "to_list")
