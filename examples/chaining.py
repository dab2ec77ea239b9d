"""
Chaining example: the two error handling styles side by side.

This example shows:
1. A then/catch chain that recovers from a failed fetch
2. The same recovery written with await and try/except
3. The settlement trace of both
"""

import asyncio

from promiselab import Deferred, Env, RejectedError, Settings, fetch_data
from promiselab.cli import print_trace
from promiselab.log import configure_logging


def chain_style(env: Env) -> Deferred[str]:
    return (
        fetch_data("Primary API", 300, True, env=env)
        .catch(lambda _reason: fetch_data("Backup API", 200, env=env))
        .then(lambda data: data.upper())
    )


async def await_style(env: Env) -> str:
    try:
        data = await fetch_data("Primary API", 300, True, env=env)
    except RejectedError:
        data = await fetch_data("Backup API", 200, env=env)
    return data.upper()


async def main() -> None:
    env = Env.from_settings(Settings(trace=True))
    print("chain:", await chain_style(env))
    print("await:", await await_style(env))
    assert env.trace is not None
    print_trace(env.trace)


if __name__ == "__main__":
    configure_logging("DEBUG")
    asyncio.run(main())
