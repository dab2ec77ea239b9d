import asyncio

import pytest

from promiselab import Deferred, Outcome, RejectedError, fetch_data
from promiselab.combinators import all_of, all_settled, race
from fakes import make_fast_env, settled_labels


def test_all_of_preserves_input_order() -> None:
    async def run_flow():
        env = make_fast_env()
        return await all_of(
            [
                fetch_data("API 3", 300, env=env),
                fetch_data("API 4", 100, env=env),
                fetch_data("API 5", 200, env=env),
            ]
        )

    assert asyncio.run(run_flow()) == ["API 3 data", "API 4 data", "API 5 data"]


def test_all_of_rejects_with_failing_input_reason() -> None:
    async def run_flow():
        env = make_fast_env()
        inputs = [
            fetch_data("API 6", 80, env=env),
            fetch_data("API 7", 120, True, env=env),
            fetch_data("API 8", 100, env=env),
        ]
        with pytest.raises(RejectedError) as exc_info:
            await all_of(inputs)
        return exc_info.value.reason

    assert asyncio.run(run_flow()) == "Error fetching data from API 7"


def test_all_of_rejects_before_slower_inputs_settle() -> None:
    async def run_flow():
        env = make_fast_env()
        slow = fetch_data("slow", 2000, env=env)
        failing = fetch_data("failing", 10, True, env=env)
        aggregate = all_of([slow, failing])
        outcome = await aggregate.settled()
        still_pending = slow.state
        # remaining inputs still settle on their own
        await slow
        return outcome, still_pending, slow.state

    outcome, still_pending, final = asyncio.run(run_flow())
    assert outcome == Outcome.Rejected("Error fetching data from failing")
    assert still_pending == "pending"
    assert final == "fulfilled"


def test_all_of_first_rejection_wins() -> None:
    async def run_flow():
        env = make_fast_env()
        return await all_of(
            [
                fetch_data("late failure", 300, True, env=env),
                fetch_data("early failure", 100, True, env=env),
            ]
        ).settled()

    outcome = asyncio.run(run_flow())
    assert outcome.reason == "Error fetching data from early failure"


def test_race_adopts_fastest_success() -> None:
    async def run_flow():
        env = make_fast_env()
        return await race(
            [
                fetch_data("Slowest API", 1500, env=env),
                fetch_data("Fast API", 500, env=env),
                fetch_data("Slower API", 1000, env=env),
            ]
        )

    assert asyncio.run(run_flow()) == "Fast API data"


def test_race_adopts_fastest_failure() -> None:
    async def run_flow():
        env = make_fast_env()
        return await race(
            [
                fetch_data("ok", 300, env=env),
                fetch_data("broken", 100, True, env=env),
            ]
        ).settled()

    assert asyncio.run(run_flow()) == Outcome.Rejected("Error fetching data from broken")


def test_all_settled_tags_each_outcome_in_order() -> None:
    async def run_flow():
        env = make_fast_env()
        return await all_settled(
            [
                fetch_data("API 9", 1000, env=env),
                fetch_data("API 10", 500, True, env=env),
                fetch_data("API 11", 1500, env=env),
            ]
        )

    results = asyncio.run(run_flow())
    assert results == [
        Outcome.Fulfilled("API 9 data"),
        Outcome.Rejected("Error fetching data from API 10"),
        Outcome.Fulfilled("API 11 data"),
    ]
    assert [r.status for r in results] == ["fulfilled", "rejected", "fulfilled"]


def test_all_settled_never_rejects() -> None:
    async def run_flow():
        env = make_fast_env()
        aggregate = all_settled(
            [fetch_data("a", 10, True, env=env), fetch_data("b", 20, True, env=env)]
        )
        await aggregate.settled()
        return aggregate.state

    assert asyncio.run(run_flow()) == "fulfilled"


def test_empty_inputs() -> None:
    async def run_flow():
        everything = await all_of([])
        settled = await all_settled([])
        racing = race([])
        await asyncio.sleep(0.01)
        return everything, settled, racing.state

    assert asyncio.run(run_flow()) == ([], [], "pending")


def test_combinators_accept_already_settled_inputs() -> None:
    async def run_flow():
        return await all_of([Deferred.resolved(1), Deferred.resolved(2)])

    assert asyncio.run(run_flow()) == [1, 2]


def test_combinators_record_trace_events() -> None:
    async def run_flow():
        env = make_fast_env(trace=True)
        await all_of([fetch_data("x", 20, env=env), fetch_data("y", 10, env=env)])
        await race([fetch_data("z", 10, True, env=env)]).settled()
        await asyncio.sleep(0)
        return env

    env = asyncio.run(run_flow())
    assert env.trace is not None
    begin = env.trace.find("all_begin")[0]
    end = env.trace.find("all_end")[0]
    assert begin.info["inputs"] == ["x", "y"]
    assert end.parent_id == begin.id
    assert end.info["status"] == "fulfilled"
    assert env.trace.find("race_end")[0].info["status"] == "rejected"
    assert settled_labels(env)[:2] == ["y", "x"]
