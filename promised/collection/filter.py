"""Filter combinators

Keep, drop or split items by predicate. Order of the input is preserved."""

from __future__ import annotations

import typing

from kungfu import LazyCoroResult, Ok, Result

from .._helpers import attempt, finish, fit_arity
from .._types import Predicate
from ..engine import Envelope

if typing.TYPE_CHECKING:
    from .promised_list import PromisedList


def partition[T](
    source: PromisedList[T],
    predicate: Predicate[T],
) -> LazyCoroResult[tuple[list[T], list[T]], typing.Any]:
    """
    Split items into (answered True, answered False) in one pass.

    Answers other than True or False put the item in neither list.
    """

    predicate = fit_arity(predicate, most=2)

    async def run() -> Result[tuple[list[T], list[T]], typing.Any]:
        kept: list[T] = []
        rejected: list[T] = []

        async def test(envelope: Envelope[T]) -> Result[typing.Any, typing.Any]:
            answer = await attempt(predicate, envelope.item, envelope.index)
            match answer:
                case Ok(True):
                    kept.append(envelope.item)
                case Ok(False):
                    rejected.append(envelope.item)
            return answer

        return await finish(source.drive(test), lambda: (kept, rejected))

    return LazyCoroResult(run)


def filter_[T](
    source: PromisedList[T],
    predicate: Predicate[T],
) -> LazyCoroResult[list[T], typing.Any]:
    """Items whose predicate answers True."""
    return partition(source, predicate).map(lambda split: split[0])


def reject[T](
    source: PromisedList[T],
    predicate: Predicate[T],
) -> LazyCoroResult[list[T], typing.Any]:
    """Items whose predicate answers False. Dual of filter_."""
    return partition(source, predicate).map(lambda split: split[1])


__all__ = ("filter_", "partition", "reject")
