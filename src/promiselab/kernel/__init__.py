"""Kernel layer - deferred operations and their outcomes."""

from promiselab.kernel.deferred import Deferred
from promiselab.kernel.env import Env, Settings, default_env
from promiselab.kernel.result import Outcome, RejectedError
from promiselab.kernel.trace import Evidence, Trace

__all__ = [
    "Deferred",
    "Outcome",
    "RejectedError",
    # Env & settings
    "Env",
    "Settings",
    "default_env",
    # Tracing
    "Evidence",
    "Trace",
]
