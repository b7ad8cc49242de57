from .enumerate import each
from .filter import filter_, partition, reject
from .fold import reduce_
from .promised_list import PromisedList
from .search import all_, any_, find
from .transform import SupportsGet, SupportsRelations, lookup, map_, pluck, to_list

__all__ = (
    "PromisedList",
    # Operations
    "all_",
    "any_",
    "each",
    "filter_",
    "find",
    "map_",
    "partition",
    "pluck",
    "reduce_",
    "reject",
    "to_list",
    # Lookup
    "SupportsGet",
    "SupportsRelations",
    "lookup",
)
