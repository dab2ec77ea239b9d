"""Runtime layer - simulated deferred operations."""

from promiselab.runtime.fetch import FetchRequest, fetch_data

__all__ = ["FetchRequest", "fetch_data"]
