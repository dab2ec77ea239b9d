"""Combinators - aggregate several deferreds into one."""

from promiselab.combinators.ops import all_of, all_settled, race

__all__ = [
    "all_of",
    "race",
    "all_settled",
]
