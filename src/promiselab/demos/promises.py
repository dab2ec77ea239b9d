"""Deferred operation demos.

Each demo is independent and handles its own failures: either through a
``catch`` handler on the chain or a try/except around ``await``. Nothing
raised inside one demo reaches another.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from promiselab.combinators import all_of, all_settled, race
from promiselab.kernel import Deferred, Env, Outcome, RejectedError, default_env
from promiselab.runtime import fetch_data

logger = logging.getLogger(__name__)


# 1. Chaining with then / catch
def basic_usage(env: Env | None = None) -> Deferred[str | None]:
    def on_data(data: str) -> str:
        logger.info("Data received: %s", data)
        return data

    def on_error(error: str) -> None:
        logger.error("Failed to fetch data: %s", error)

    return fetch_data("API 1", 500, env=env).then(on_data).catch(on_error)


# 2. await with try/except
async def get_data(env: Env | None = None) -> str | None:
    try:
        data = await fetch_data("API 2", 1000, env=env)
    except RejectedError as exc:
        logger.error("Async/Await Error: %s", exc.reason)
        return None
    logger.info("Async/Await data: %s", data)
    return data


# 3. Several operations in flight at once
async def get_all_data(env: Env | None = None) -> list[str] | None:
    try:
        data1, data2, data3 = await all_of(
            [
                fetch_data("API 3", 1000, env=env),
                fetch_data("API 4", 1500, env=env),
                fetch_data("API 5", 2000, env=env),
            ]
        )
    except RejectedError as exc:
        logger.error("Error in all_of: %s", exc.reason)
        return None
    logger.info("All data fetched: %s %s %s", data1, data2, data3)
    return [data1, data2, data3]


# 4. First to settle wins
async def get_fastest_data(env: Env | None = None) -> str | None:
    try:
        fastest = await race(
            [
                fetch_data("Fast API", 500, env=env),
                fetch_data("Slower API", 1000, env=env),
                fetch_data("Slowest API", 1500, env=env),
            ]
        )
    except RejectedError as exc:
        logger.error("Error in race: %s", exc.reason)
        return None
    logger.info("Fastest data received: %s", fastest)
    return fastest


# 5. Already settled deferreds
def always_resolve(env: Env | None = None) -> Deferred[str]:
    return Deferred.resolved("This is resolved data", env=env)


def always_reject(env: Env | None = None) -> Deferred[Any]:
    return Deferred.rejected("This promise is always rejected", env=env)


async def resolve_and_reject(env: Env | None = None) -> tuple[str, str]:
    def on_resolved(data: str) -> str:
        logger.info("Resolved: %s", data)
        return data

    def on_rejected(error: str) -> str:
        logger.error("Rejected: %s", error)
        return error

    resolved = always_resolve(env).then(on_resolved)
    rejected = always_reject(env).catch(on_rejected)
    return await resolved, await rejected


# 6. One failure rejects the whole group
async def fetch_all_with_errors(env: Env | None = None) -> list[str] | None:
    pending = [
        fetch_data("API 6", 800, env=env),
        fetch_data("API 7", 1200, True, env=env),
        fetch_data("API 8", 1000, env=env),
    ]
    try:
        results = await all_of(pending)
    except RejectedError as exc:
        logger.error("Error in one of the APIs: %s", exc.reason)
        return None
    logger.info("Fetched all successfully: %s", results)
    return results


# 7. Inspect every outcome
async def fetch_with_all_settled(env: Env | None = None) -> list[Outcome[str]]:
    pending = [
        fetch_data("API 9", 1000, env=env),
        fetch_data("API 10", 500, True, env=env),
        fetch_data("API 11", 1500, env=env),
    ]
    results = await all_settled(pending)
    for index, result in enumerate(results):
        if result.fulfilled:
            logger.info("API %d succeeded with data: %s", index + 9, result.value)
        else:
            logger.warning("API %d failed with reason: %s", index + 9, result.reason)
    return results


async def _wait(deferred: Deferred[Any]) -> Any:
    return await deferred


async def run_promise_demos(env: Env | None = None) -> dict[str, Any]:
    """Start every demo at once and wait for all of them.

    Returns:
        Each demo's return value keyed by demo name
    """
    env = env if env is not None else default_env()
    demos = {
        "basic_usage": _wait(basic_usage(env)),
        "get_data": get_data(env),
        "get_all_data": get_all_data(env),
        "get_fastest_data": get_fastest_data(env),
        "resolve_and_reject": resolve_and_reject(env),
        "fetch_all_with_errors": fetch_all_with_errors(env),
        "fetch_with_all_settled": fetch_with_all_settled(env),
    }
    results = await asyncio.gather(*demos.values())
    return dict(zip(demos, results))
