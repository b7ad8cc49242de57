"""Logging handler-decorator."""

from __future__ import annotations

import logging
import typing
from functools import wraps

from kungfu import Error, Ok, Result

from .._helpers import attempt
from .._types import Handler, HandlerDecorator
from ..engine import Envelope

_default_logger = logging.getLogger("promised.visits")


def logged(
    logger: logging.Logger | None = None,
    *,
    level: int = logging.DEBUG,
) -> HandlerDecorator:
    """Log every visit and how it settled. Failures are logged at WARNING."""
    log = logger or _default_logger

    def decorate(handler: Handler[typing.Any, typing.Any]) -> Handler[typing.Any, typing.Any]:
        @wraps(handler)
        async def logging_handler(envelope: Envelope[typing.Any]) -> Result[typing.Any, typing.Any]:
            log.log(level, "visit index=%d item=%r", envelope.index, envelope.item)
            outcome = await attempt(handler, envelope)
            match outcome:
                case Ok(value):
                    log.log(level, "settled index=%d result=%r", envelope.index, value)
                case Error(e):
                    log.warning("failed index=%d error=%r", envelope.index, e)
            return outcome

        return logging_handler

    return decorate


def compose(*decorators: HandlerDecorator) -> HandlerDecorator:
    """
    Chain handler-decorators into one. The first one is the outermost.

    Example:
        PromisedList(items, handler_decorator=compose(logged(), traced(trace)))
    """

    def decorate(handler: Handler[typing.Any, typing.Any]) -> Handler[typing.Any, typing.Any]:
        for decorator in reversed(decorators):
            handler = decorator(handler)
        return handler

    return decorate


__all__ = ("compose", "logged")
