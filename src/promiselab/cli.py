"""Command line entry point: run the demos."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from pydantic import ValidationError

from promiselab.demos import run_closure_demos, run_promise_demos
from promiselab.kernel import Env, Settings
from promiselab.kernel.trace import Trace
from promiselab.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promiselab",
        description="Run the deferred operation and closure demos",
    )
    parser.add_argument(
        "demos", nargs="?", choices=("promises", "closures", "all"), default="all",
        help="Which demos to run (default: all)",
    )
    parser.add_argument(
        "--time-unit", type=float, default=0.001,
        help="Seconds per delay unit (default: 0.001, delays read as milliseconds)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument("--trace", action="store_true", help="Print settlement events afterwards")
    return parser


def print_trace(trace: Trace) -> None:
    start = next((ev.loop_time for ev in trace.get_events() if ev.loop_time is not None), 0.0)
    for ev in trace.get_events():
        offset = (ev.loop_time - start) * 1000 if ev.loop_time is not None else 0.0
        label = ev.info.get("label", "")
        print(f"{offset:9.1f}ms  #{ev.id:<3} {ev.action:<16} {label}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings(time_unit=args.time_unit, log_level=args.log_level, trace=args.trace)
    except ValidationError as exc:
        parser.error("; ".join(err["msg"] for err in exc.errors()))
    configure_logging(settings.log_level)

    if args.demos in ("closures", "all"):
        run_closure_demos()

    if args.demos in ("promises", "all"):
        env = Env.from_settings(settings)
        asyncio.run(run_promise_demos(env))
        if env.trace is not None:
            print_trace(env.trace)

    return 0
