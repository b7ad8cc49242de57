"""
Core type definitions for promised.

Aliases shared by the access layer, the drive engine and the operations.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult

if typing.TYPE_CHECKING:
    from .engine.envelope import Envelope

# ============================================================================
# Type aliases
# ============================================================================

# Pending = value not yet available (awaitable) or already a plain value
type Pending[T] = Awaitable[T] | T

# Outcome = what a callback may hand back: value, awaitable or Result
type Outcome[R] = R | Awaitable[R] | typing.Any

# Handler = per-item callback the engine invokes with an Envelope
type Handler[T, R] = Callable[[Envelope[T]], Outcome[R]]

# HandlerDecorator = wraps every handler before a drive starts
type HandlerDecorator = Callable[[Handler[typing.Any, typing.Any]], Handler[typing.Any, typing.Any]]

# PromiseDecorator = wraps the outer computation returned by a drive
type PromiseDecorator = Callable[
    [LazyCoroResult[typing.Any, typing.Any]],
    Awaitable[typing.Any],
]

# Callbacks used by the public operations
type ItemCallback[T, R] = Callable[[T, int], Outcome[R]]
type Predicate[T] = Callable[[T, int], Outcome[bool]]
type Combine[A, T] = Callable[[A, T, int], Outcome[A]]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Pending",
    "Outcome",
    "Handler",
    "HandlerDecorator",
    "PromiseDecorator",
    "ItemCallback",
    "Predicate",
    "Combine",
    "LCR",
)
