"""
Fold combinator
===============

Sequential reduce over pending values.
"""

from __future__ import annotations

import typing

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import attempt, finish, fit_arity
from .._types import Combine
from ..engine import Envelope

if typing.TYPE_CHECKING:
    from .promised_list import PromisedList


def reduce_[A, T](
    source: PromisedList[T],
    combine: Combine[A, T],
    initial: A,
) -> LazyCoroResult[A, typing.Any]:
    """
    Build up an accumulator: `acc = combine(acc, item, index)`.

    Each step is settled before the next item is requested, so `combine`
    always sees the accumulator of the previous step. The first failing
    step fails the whole reduce.
    """

    combine = fit_arity(combine, most=3)

    async def run() -> Result[A, typing.Any]:
        acc = initial

        async def step(envelope: Envelope[T]) -> Result[A, typing.Any]:
            nonlocal acc
            match await attempt(combine, acc, envelope.item, envelope.index):
                case Ok(value):
                    acc = value
                    return Ok(value)
                case Error(e):
                    return Error(e)

        return await finish(source.drive(step), lambda: acc)

    return LazyCoroResult(run)


__all__ = ("reduce_",)
