"""Enumerate combinator

Visit every item for its side effects."""

from __future__ import annotations

import typing

from kungfu import LazyCoroResult, Ok, Result

from .._helpers import attempt, finish, fit_arity
from .._types import ItemCallback
from ..engine import Envelope

if typing.TYPE_CHECKING:
    from .promised_list import PromisedList


def each[T](
    source: PromisedList[T],
    callback: ItemCallback[T, typing.Any],
) -> LazyCoroResult[None, typing.Any]:
    """
    Call `callback(item, index)` for every item, one at a time.

    Returning exactly False stops the pass after the current item;
    any other return value (None included) keeps going.
    """

    callback = fit_arity(callback, most=2)

    async def visit(envelope: Envelope[T]) -> Result[typing.Any, typing.Any]:
        answer = await attempt(callback, envelope.item, envelope.index)
        match answer:
            case Ok(False):
                envelope.stop()
        return answer

    async def run() -> Result[None, typing.Any]:
        return await finish(source.drive(visit), lambda: None)

    return LazyCoroResult(run)


__all__ = ("each",)
