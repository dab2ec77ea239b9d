"""Counter factory - private state held by closures."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CounterOps:
    """The three operations sharing one counter. The count itself is not exposed."""

    increment: Callable[[], int]
    decrement: Callable[[], int]
    reset: Callable[[], int]


def create_counter(start: int = 0) -> CounterOps:
    """Create an independent counter.

    Each call captures a fresh ``count``; two counters never share it.
    increment and decrement return the new count, reset returns 0.
    """
    count = start

    def increment() -> int:
        nonlocal count
        count += 1
        logger.info("Current count: %d", count)
        return count

    def decrement() -> int:
        nonlocal count
        count -= 1
        logger.info("Current count: %d", count)
        return count

    def reset() -> int:
        nonlocal count
        count = 0
        logger.info("Counter reset.")
        return count

    return CounterOps(increment, decrement, reset)
