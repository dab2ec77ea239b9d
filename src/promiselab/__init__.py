from .closures import CounterOps, create_counter, setup_button
from .combinators import all_of, all_settled, race
from .kernel import (
    Deferred,
    Env,
    Outcome,
    RejectedError,
    Settings,
    default_env,
)
from .kernel.trace import Trace
from .runtime import fetch_data

__all__ = [
    # Core
    "Deferred",
    "Outcome",
    "RejectedError",
    "fetch_data",
    # Combinators
    "all_of",
    "race",
    "all_settled",
    # Closures
    "CounterOps",
    "create_counter",
    "setup_button",
    # Env
    "Env",
    "Settings",
    "default_env",
    # Tracing
    "Trace",
]
