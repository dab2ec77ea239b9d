"""Combinator primitives: all_of, race, all_settled."""

# Combinators satisfy the following laws:
#
# 1. Order: all_of and all_settled report results in input order,
#    never in settlement order
#
# 2. Fail-fast: all_of rejects with the first rejection to settle;
#    the remaining inputs still settle but cannot change the aggregate
#
# 3. First wins: race adopts the first outcome to settle, fulfilled or rejected
#
# 4. Totality: all_settled never rejects


from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from promiselab.kernel import Deferred, Env, Outcome


def _shared_env(deferreds: Sequence[Deferred[Any]], env: Env | None) -> Env | None:
    if env is not None:
        return env
    for deferred in deferreds:
        if deferred.env is not None:
            return deferred.env
    return None


def _trace_aggregate(name: str, aggregate: Deferred[Any], inputs: Sequence[Deferred[Any]]) -> None:
    """Record <name>_begin now and <name>_end once the aggregate settles."""
    trace = aggregate.env.trace if aggregate.env is not None else None
    if trace is None:
        return
    begin_id = trace.record(f"{name}_begin", info={"inputs": [d.label for d in inputs]})
    aggregate.add_observer(
        lambda outcome: trace.record(
            f"{name}_end",
            info={"status": outcome.status},
            parent_id=begin_id,
        )
    )


def all_of(deferreds: Sequence[Deferred[Any]], env: Env | None = None) -> Deferred[list[Any]]:
    """Wait for every input to fulfill.

    Semantics:
        - Fulfill with the list of input values, in input order
        - Reject with the reason of the first input to reject
        - Empty input fulfills with []

    Args:
        deferreds: Deferreds to wait for.
        env: Environment for the aggregate, defaults to the first input's.

    Returns:
        Deferred[list[Any]]: The aggregate deferred.
    """
    inputs = list(deferreds)
    aggregate: Deferred[list[Any]] = Deferred("all", _shared_env(inputs, env))
    _trace_aggregate("all", aggregate, inputs)

    if not inputs:
        aggregate.fulfill([])
        return aggregate

    values: list[Any] = [None] * len(inputs)
    remaining = len(inputs)

    def observe(index: int):
        def _on_settled(outcome: Outcome[Any]) -> None:
            nonlocal remaining
            if outcome.rejected:
                aggregate.settle(outcome)
                return
            values[index] = outcome.value
            remaining -= 1
            if remaining == 0:
                aggregate.fulfill(list(values))

        return _on_settled

    for index, deferred in enumerate(inputs):
        deferred.add_observer(observe(index))
    return aggregate


def race(deferreds: Sequence[Deferred[Any]], env: Env | None = None) -> Deferred[Any]:
    """Adopt the outcome of whichever input settles first.

    Semantics:
        - The first settlement wins, fulfilled or rejected
        - Later settlements are ignored
        - Empty input stays pending forever

    Args:
        deferreds: Deferreds to race.
        env: Environment for the aggregate, defaults to the first input's.

    Returns:
        Deferred[Any]: The aggregate deferred.
    """
    inputs = list(deferreds)
    aggregate: Deferred[Any] = Deferred("race", _shared_env(inputs, env))
    _trace_aggregate("race", aggregate, inputs)

    for deferred in inputs:
        deferred.add_observer(aggregate.settle)
    return aggregate


def all_settled(
    deferreds: Sequence[Deferred[Any]], env: Env | None = None
) -> Deferred[list[Outcome[Any]]]:
    """Wait for every input to settle, whatever the outcome.

    Semantics:
        - Always fulfills, never rejects
        - Value is one Outcome per input, in input order
        - Empty input fulfills with []

    Args:
        deferreds: Deferreds to wait for.
        env: Environment for the aggregate, defaults to the first input's.

    Returns:
        Deferred[list[Outcome[Any]]]: The aggregate deferred.
    """
    inputs = list(deferreds)

    async def _collect() -> list[Outcome[Any]]:
        return list(await asyncio.gather(*(d.settled() for d in inputs)))

    aggregate = Deferred.from_awaitable(_collect(), "all_settled", _shared_env(inputs, env))
    _trace_aggregate("all_settled", aggregate, inputs)
    return aggregate
