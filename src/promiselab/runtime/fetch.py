"""Simulated API calls that settle after a timer."""

from __future__ import annotations

import asyncio
import logging

from pydantic import BaseModel, Field

from promiselab.kernel import Deferred, Env, default_env

logger = logging.getLogger(__name__)


class FetchRequest(BaseModel):
    api_name: str
    delay: float = Field(default=1000, ge=0)
    should_fail: bool = False

    @property
    def data(self) -> str:
        return f"{self.api_name} data"

    @property
    def error(self) -> str:
        return f"Error fetching data from {self.api_name}"


def fetch_data(
    api_name: str,
    delay: float = 1000,
    should_fail: bool = False,
    *,
    env: Env | None = None,
) -> Deferred[str]:
    """Simulate an API call.

    Settles ``delay`` time units after the call: fulfilled with
    "<api_name> data", or rejected with "Error fetching data from <api_name>"
    when ``should_fail`` is set. Settlement goes through the event loop's
    timer queue even for a zero delay.

    Raises:
        pydantic.ValidationError: If delay is negative
    """
    request = FetchRequest(api_name=api_name, delay=delay, should_fail=should_fail)
    env = env if env is not None else default_env()
    deferred: Deferred[str] = Deferred(request.api_name, env)

    def _settle() -> None:
        if request.should_fail:
            deferred.reject(request.error)
        else:
            deferred.fulfill(request.data)

    logger.debug("Fetching %s (delay=%s, should_fail=%s)", api_name, delay, should_fail)
    asyncio.get_running_loop().call_later(env.seconds(request.delay), _settle)
    return deferred
