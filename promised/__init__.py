"""
Sequential collection operations over pending values.

Wrap an ordered list of awaitables and use it like a collection:
each, map, pluck, reduce, find, filter, reject, partition, all, any.
Items are resolved one at a time, in index order, and every operation
settles to a kungfu Result.

Architecture:
- access: pending-value access (at/push/pop/shift/unshift) and the cursor
- engine: the sequential drive every operation is built on
- collection: operations as free functions and as PromisedList methods
- hooks / time: handler-decorators and promise-decorators
"""

# Core types
from ._types import Combine, Handler, HandlerDecorator, ItemCallback, LCR, Predicate, PromiseDecorator

# Access layer
from .access import Cursor, PendingAccess

# Engine
from .engine import DriveContext, Envelope, drive

# Collection operations
from .collection import (
    PromisedList,
    SupportsGet,
    SupportsRelations,
    all_,
    any_,
    each,
    filter_,
    find,
    lookup,
    map_,
    partition,
    pluck,
    reduce_,
    reject,
    to_list,
)

# Decorators
from .hooks import Trace, Visit, compose, logged, traced
from .time import timeout

# Errors
from ._errors import ItemResolutionError, TimeoutError

__all__ = (
    # Types
    "Combine",
    "Handler",
    "HandlerDecorator",
    "ItemCallback",
    "LCR",
    "Predicate",
    "PromiseDecorator",
    # Access
    "Cursor",
    "PendingAccess",
    # Engine
    "DriveContext",
    "Envelope",
    "drive",
    # Collection
    "PromisedList",
    "SupportsGet",
    "SupportsRelations",
    "all_",
    "any_",
    "each",
    "filter_",
    "find",
    "lookup",
    "map_",
    "partition",
    "pluck",
    "reduce_",
    "reject",
    "to_list",
    # Handler-decorators
    "Trace",
    "Visit",
    "compose",
    "logged",
    "traced",
    # Promise-decorators
    "timeout",
    # Errors
    "ItemResolutionError",
    "TimeoutError",
)
