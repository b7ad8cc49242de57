"""
Drive engine
============

Sequential drive over pending values: resolve one, hand it to a handler,
settle the handler, only then move on.
"""

from __future__ import annotations

import logging
import typing

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import attempt, identity, relift
from .._types import Handler, HandlerDecorator, PromiseDecorator
from .envelope import DriveContext

if typing.TYPE_CHECKING:
    from ..access import PendingAccess

logger = logging.getLogger(__name__)


def drive[T, R](
    source: PendingAccess[T],
    handler: Handler[T, R],
    *,
    handler_decorator: HandlerDecorator | None = None,
    promise_decorator: PromiseDecorator | None = None,
) -> LazyCoroResult[list[R], typing.Any]:
    """
    Visit every pending value of `source` in index order.

    Per item: await `source.at(i)`, call the (decorated) handler with an
    Envelope, settle its outcome, record it. Item i+1 is never requested
    before item i's handler has settled.

    Stops when the cursor runs past the live length, or right after the
    handler that called `envelope.stop()` settles; that handler's result is
    kept. The first Error from a pending value or a handler fails the whole
    drive, results collected so far are dropped.

    Lazy: nothing runs until the result is awaited, and each await is a new
    drive with a new DriveContext.
    """
    decorate_handler = handler_decorator or identity
    decorate_promise = promise_decorator or identity

    async def run() -> Result[list[R], typing.Any]:
        call = decorate_handler(handler)
        ctx = DriveContext()
        cursor = source.cursor()
        logger.debug("drive start: %s length=%d", type(source).__name__, len(source))

        while cursor.has_next():
            match await attempt(cursor.next):
                case Ok(item):
                    pass
                case Error(e):
                    logger.debug("drive failed resolving index %d: %r", ctx.index, e)
                    return Error(e)

            match await attempt(call, ctx.envelope(item)):
                case Ok(raw):
                    ctx.results.append(raw)
                case Error(e):
                    logger.debug("drive failed in handler at index %d: %r", ctx.index, e)
                    return Error(e)

            if ctx.stopped:
                logger.debug("drive stopped at index %d", ctx.index)
                break
            ctx.index += 1
        else:
            logger.debug("drive exhausted after %d item(s)", len(ctx.results))

        # outcomes are already flattened by attempt(), nothing left to await
        return Ok(ctx.results)

    return relift(decorate_promise(LazyCoroResult(run)))


__all__ = ("drive",)
