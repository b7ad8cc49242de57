"""
Trace - monoidal record of visited items
========================================
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from kungfu import Result

from .._helpers import attempt
from .._types import Handler, HandlerDecorator
from ..engine import Envelope


@dataclass(frozen=True, slots=True)
class Visit:
    """One handler invocation: where, on what, and how it settled."""

    index: int
    item: typing.Any
    outcome: Result[typing.Any, typing.Any]


class Trace[A](list[A]):
    """
    Append-only log of visits.

    Monoid: Trace() is the empty trace, combine is concatenation.
    """

    @staticmethod
    def of[V](*entries: V) -> Trace[V]:
        return Trace[V](entries)

    def combine(self, other: Trace[A], /) -> Trace[A]:
        """
        Concatenate two traces into a new one.

        Example:
            Trace.of(a, b).combine(Trace.of(c))  # Trace([a, b, c])
        """
        result: Trace[A] = Trace(self)
        result.extend(other)
        return result

    def indices(self) -> list[int]:
        return [entry.index for entry in self]


def traced(trace: Trace[Visit]) -> HandlerDecorator:
    """
    Handler-decorator recording a Visit per item into `trace`.

    The handler outcome is settled here and handed on as a Result, so the
    engine still fails on Error and collects the value on Ok.
    """

    def decorate(handler: Handler[typing.Any, typing.Any]) -> Handler[typing.Any, typing.Any]:
        async def recorded(envelope: Envelope[typing.Any]) -> Result[typing.Any, typing.Any]:
            outcome = await attempt(handler, envelope)
            trace.append(Visit(index=envelope.index, item=envelope.item, outcome=outcome))
            return outcome

        return recorded

    return decorate


__all__ = ("Trace", "Visit", "traced")
