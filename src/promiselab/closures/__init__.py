"""Closures - functions that keep their defining scope alive."""

from promiselab.closures.button import setup_button
from promiselab.closures.counter import CounterOps, create_counter

__all__ = ["CounterOps", "create_counter", "setup_button"]
