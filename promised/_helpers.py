"""Internal helpers for promised.

Settling of pending values and callback outcomes into kungfu Results.
Not part of the public API, but useful when overriding `at`."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


async def settle(value: typing.Any) -> Result[typing.Any, typing.Any]:
    """
    Drive a value to a Result.

    Awaitables are awaited until a plain value is reached. An exception raised
    on the way becomes Error(exc). A kungfu Ok/Error that comes out is
    returned as is, anything else is wrapped in Ok.
    """
    try:
        while inspect.isawaitable(value):
            value = await value
    except Exception as exc:
        return Error(exc)

    match value:
        case Ok() | Error():
            return value
        case _:
            return Ok(value)


async def attempt(
    fn: Callable[..., typing.Any],
    *args: typing.Any,
) -> Result[typing.Any, typing.Any]:
    """Call fn and settle its outcome. Synchronous raises become Error too."""
    try:
        value = fn(*args)
    except Exception as exc:
        return Error(exc)
    return await settle(value)


def relift[T, E](awaitable: Awaitable[typing.Any]) -> LazyCoroResult[T, E]:
    """
    Lift whatever a promise-decorator returned back into LazyCoroResult.

    Identity for LazyCoroResult so decorators that stay in kungfu keep
    their laziness.
    """
    if isinstance(awaitable, LazyCoroResult):
        return awaitable

    async def run() -> Result[T, E]:
        return await settle(awaitable)

    return LazyCoroResult(run)


def positional_arity(fn: Callable[..., typing.Any]) -> int | None:
    """Number of positional parameters `fn` takes, None if unbounded or unknown."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    count = 0
    for parameter in signature.parameters.values():
        match parameter.kind:
            case inspect.Parameter.VAR_POSITIONAL:
                return None
            case inspect.Parameter.POSITIONAL_ONLY | inspect.Parameter.POSITIONAL_OR_KEYWORD:
                count += 1
    return count


def fit_arity[R](fn: Callable[..., R], *, most: int) -> Callable[..., R]:
    """
    Adapt a callback to be called with `most` positional arguments.

    Callbacks taking fewer get only the leading ones, so `lambda item: ...`
    works where `(item, index)` is passed. Checked once, not per call.
    """
    arity = positional_arity(fn)
    if arity is None or arity >= most:
        return fn

    def fitted(*args: typing.Any) -> R:
        return fn(*args[:arity])

    return fitted


async def finish[T](
    drive_result: Awaitable[Result[typing.Any, typing.Any]],
    value: Callable[[], T],
) -> Result[T, typing.Any]:
    """
    Await a drive and swap its per-item results for `value()`.

    `value` is read only after the drive settled, so it sees the final
    state of whatever the handlers accumulated.
    """
    match await drive_result:
        case Ok(_):
            return Ok(value())
        case Error(e):
            return Error(e)


__all__ = ("attempt", "finish", "fit_arity", "identity", "positional_arity", "relift", "settle")
