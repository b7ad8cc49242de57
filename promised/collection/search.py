"""Search combinators

Short-circuiting predicates: stop as soon as the answer is known."""

from __future__ import annotations

import typing

from kungfu import LazyCoroResult, Ok, Result

from .._helpers import attempt, finish, fit_arity
from .._types import Predicate
from ..engine import Envelope

if typing.TYPE_CHECKING:
    from .promised_list import PromisedList


def find[T](
    source: PromisedList[T],
    predicate: Predicate[T],
) -> LazyCoroResult[T | None, typing.Any]:
    """
    First item whose predicate is True, or None. No item after the match is visited.

    None is also what a matched item resolving to None looks like; when items
    can be None, tell the two apart with `any` on the same predicate.
    """

    predicate = fit_arity(predicate, most=2)

    async def run() -> Result[T | None, typing.Any]:
        found: list[T] = []

        async def test(envelope: Envelope[T]) -> Result[typing.Any, typing.Any]:
            answer = await attempt(predicate, envelope.item, envelope.index)
            match answer:
                case Ok(True):
                    found.append(envelope.item)
                    envelope.stop()
            return answer

        return await finish(source.drive(test), lambda: found[0] if found else None)

    return LazyCoroResult(run)


def all_[T](
    source: PromisedList[T],
    predicate: Predicate[T],
) -> LazyCoroResult[bool, typing.Any]:
    """True unless some predicate answers False. Stops at the first False."""

    predicate = fit_arity(predicate, most=2)

    async def run() -> Result[bool, typing.Any]:
        verdict = True

        async def test(envelope: Envelope[T]) -> Result[typing.Any, typing.Any]:
            nonlocal verdict
            answer = await attempt(predicate, envelope.item, envelope.index)
            match answer:
                case Ok(False):
                    verdict = False
                    envelope.stop()
            return answer

        return await finish(source.drive(test), lambda: verdict)

    return LazyCoroResult(run)


def any_[T](
    source: PromisedList[T],
    predicate: Predicate[T],
) -> LazyCoroResult[bool, typing.Any]:
    """False unless some predicate answers True. Stops at the first True."""

    predicate = fit_arity(predicate, most=2)

    async def run() -> Result[bool, typing.Any]:
        verdict = False

        async def test(envelope: Envelope[T]) -> Result[typing.Any, typing.Any]:
            nonlocal verdict
            answer = await attempt(predicate, envelope.item, envelope.index)
            match answer:
                case Ok(True):
                    verdict = True
                    envelope.stop()
            return answer

        return await finish(source.drive(test), lambda: verdict)

    return LazyCoroResult(run)


__all__ = ("all_", "any_", "find")
