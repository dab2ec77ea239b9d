"""Demonstrations of deferred chaining and closures."""

from promiselab.demos.closures import button_demo, counter_demo, run_closure_demos
from promiselab.demos.promises import (
    always_reject,
    always_resolve,
    basic_usage,
    fetch_all_with_errors,
    fetch_with_all_settled,
    get_all_data,
    get_data,
    get_fastest_data,
    resolve_and_reject,
    run_promise_demos,
)

__all__ = [
    # Promises
    "basic_usage",
    "get_data",
    "get_all_data",
    "get_fastest_data",
    "always_resolve",
    "always_reject",
    "resolve_and_reject",
    "fetch_all_with_errors",
    "fetch_with_all_settled",
    "run_promise_demos",
    # Closures
    "counter_demo",
    "button_demo",
    "run_closure_demos",
]
