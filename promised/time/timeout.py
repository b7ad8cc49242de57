"""Timeout decorator

Promise-decorator limiting how long the caller waits for a drive."""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Result

from .._errors import TimeoutError
from .._helpers import settle

logger = logging.getLogger(__name__)

# drives still running after their caller gave up; held until they finish
background: set[asyncio.Task[typing.Any]] = set()


def timeout[T, E](
    *,
    seconds: float,
) -> Callable[[LazyCoroResult[T, E]], LazyCoroResult[T, E | TimeoutError]]:
    """
    Fail the outer result with TimeoutError if it takes too long.

    The drive is shielded: it is not cancelled and keeps visiting items in
    the background, only the caller stops waiting for it. Such drives are
    kept in `background` until they finish.

    Example:
        orders = PromisedList(pending, promise_decorator=timeout(seconds=2.0))
    """

    def decorate(interp: LazyCoroResult[T, E]) -> LazyCoroResult[T, E | TimeoutError]:
        async def run() -> Result[T, E | TimeoutError]:
            task = asyncio.ensure_future(settle(interp))
            background.add(task)
            task.add_done_callback(background.discard)
            try:
                return await asyncio.wait_for(asyncio.shield(task), timeout=seconds)
            except asyncio.TimeoutError:
                logger.debug("outer result not observed within %ss", seconds)
                return Error(TimeoutError(seconds))

        return LazyCoroResult(run)

    return decorate


__all__ = ("timeout",)
