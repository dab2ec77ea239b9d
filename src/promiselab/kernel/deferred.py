"""Deferred - the core promise-like primitive."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, Literal, TypeVar

from promiselab.kernel.env import Env
from promiselab.kernel.result import Outcome, RejectedError

V = TypeVar("V")
R = TypeVar("R")

logger = logging.getLogger(__name__)

Observer = Callable[[Outcome[Any]], None]


class Deferred(Generic[V]):
    """A computation whose result becomes available later.

    A deferred moves from pending to exactly one of fulfilled or rejected.
    The underlying future always carries an Outcome, never an exception;
    rejection only becomes an exception when the deferred is awaited.

    Observers are run by the event loop after settlement, never from inside
    the call that settled the deferred, so an observer attached right after
    creation still sees the outcome.

    Must be created while an event loop is running.
    """

    def __init__(self, label: str = "", env: Env | None = None) -> None:
        loop = asyncio.get_running_loop()
        self.label = label
        self.env = env
        self._future: asyncio.Future[Outcome[V]] = loop.create_future()
        self._task: asyncio.Future[Any] | None = None
        self._trace_id = self._record("created")

    def __repr__(self) -> str:
        return f"<Deferred {self.label!r} {self.state}>"

    def _record(self, action: str, info: dict[str, Any] | None = None) -> int | None:
        trace = self.env.trace if self.env is not None else None
        if trace is None:
            return None
        return trace.record(
            action,
            info={"label": self.label, **(info or {})},
            parent_id=getattr(self, "_trace_id", None),
        )

    @property
    def state(self) -> Literal["pending", "fulfilled", "rejected"]:
        if not self._future.done():
            return "pending"
        return self._future.result().status

    @property
    def outcome(self) -> Outcome[V] | None:
        """The settled outcome, or None while pending."""
        if not self._future.done():
            return None
        return self._future.result()

    def done(self) -> bool:
        return self._future.done()

    def settle(self, outcome: Outcome[V]) -> bool:
        """Settle with a prepared outcome.

        Returns:
            True if this call settled the deferred, False if it was already settled
        """
        if self._future.done():
            logger.debug("Ignoring %s for already settled %r", outcome.status, self.label)
            return False
        self._future.set_result(outcome)
        if outcome.fulfilled:
            self._record("fulfilled")
        else:
            self._record("rejected", info={"reason": outcome.reason})
        logger.debug("Deferred %r %s", self.label, outcome.status)
        return True

    def fulfill(self, value: V) -> bool:
        return self.settle(Outcome.Fulfilled(value))

    def reject(self, reason: Any) -> bool:
        return self.settle(Outcome.Rejected(reason))

    async def settled(self) -> Outcome[V]:
        """Wait for settlement and return the Outcome without raising."""
        return await asyncio.shield(self._future)

    def add_observer(self, callback: Observer) -> None:
        """Run callback with the Outcome once this deferred settles."""
        self._future.add_done_callback(lambda fut: callback(fut.result()))

    def then(
        self,
        on_fulfilled: Callable[[V], Any] | None = None,
        on_rejected: Callable[[str], Any] | None = None,
    ) -> Deferred[Any]:
        """Chain handlers onto this deferred.

        Args:
            on_fulfilled: Called with the value when this deferred fulfills
            on_rejected: Called with the reason when this deferred rejects

        Returns:
            New deferred settled from whichever handler ran. A handler's
            return value fulfills it; a returned Deferred or awaitable is
            adopted; a raised exception rejects it. Without a matching
            handler the outcome passes through unchanged. Its label is
            this deferred's label with a ".then" suffix.
        """
        return self._chain(on_fulfilled, on_rejected, "then")

    def _adopt(self, result: Any, label: str) -> Deferred[Any] | None:
        """Wrap a handler result that settles later, or return None."""
        if isinstance(result, Deferred):
            return result
        if inspect.isawaitable(result):
            return Deferred.from_awaitable(result, label, self.env)
        return None

    def _chain(
        self,
        on_fulfilled: Callable[[V], Any] | None,
        on_rejected: Callable[[str], Any] | None,
        link: str,
    ) -> Deferred[Any]:
        derived: Deferred[Any] = Deferred(f"{self.label}.{link}", self.env)

        def _observe(outcome: Outcome[V]) -> None:
            handler = on_fulfilled if outcome.fulfilled else on_rejected
            if handler is None:
                derived.settle(outcome)
                return
            try:
                result = handler(outcome.value if outcome.fulfilled else outcome.reason)  # type: ignore[arg-type]
            except RejectedError as exc:
                derived.reject(exc.reason)
                return
            except Exception as exc:
                derived.reject(str(exc))
                return
            pending = self._adopt(result, derived.label)
            if pending is not None:
                pending.add_observer(derived.settle)
            else:
                derived.fulfill(result)

        self.add_observer(_observe)
        return derived

    def catch(self, on_rejected: Callable[[str], Any]) -> Deferred[Any]:
        """Attach a failure handler; fulfilled outcomes pass through."""
        return self._chain(None, on_rejected, "catch")

    def finally_(self, callback: Callable[[], Any]) -> Deferred[V]:
        """Run callback on either outcome and pass the original outcome on.

        An async callback, or one returning a Deferred, is waited for
        first. If the callback fails, its failure replaces the outcome.
        """
        derived: Deferred[V] = Deferred(f"{self.label}.finally", self.env)

        def _observe(outcome: Outcome[V]) -> None:
            try:
                result = callback()
            except Exception as exc:
                derived.reject(str(exc))
                return
            pending = self._adopt(result, derived.label)
            if pending is None:
                derived.settle(outcome)
                return

            def _after_cleanup(cleanup: Outcome[Any]) -> None:
                derived.settle(cleanup if cleanup.rejected else outcome)

            pending.add_observer(_after_cleanup)

        self.add_observer(_observe)
        return derived

    def __await__(self) -> Generator[Any, None, V]:
        outcome = yield from self._future.__await__()
        return outcome.unwrap(self.label)

    @staticmethod
    def resolved(value: R, label: str = "", env: Env | None = None) -> Deferred[R]:
        """Create a deferred that is already fulfilled with value."""
        deferred: Deferred[R] = Deferred(label, env)
        deferred.fulfill(value)
        return deferred

    @staticmethod
    def rejected(reason: Any, label: str = "", env: Env | None = None) -> Deferred[Any]:
        """Create a deferred that is already rejected with reason."""
        deferred: Deferred[Any] = Deferred(label, env)
        deferred.reject(reason)
        return deferred

    @staticmethod
    def from_awaitable(aw: Awaitable[R], label: str = "", env: Env | None = None) -> Deferred[R]:
        """Run an awaitable as a task and settle with its result.

        A RejectedError settles with its reason; any other exception
        settles with its string form.
        """
        deferred: Deferred[R] = Deferred(label, env)

        async def _drive() -> None:
            try:
                value = await aw
            except RejectedError as exc:
                deferred.reject(exc.reason)
            except Exception as exc:
                deferred.reject(str(exc))
            else:
                deferred.fulfill(value)

        deferred._task = asyncio.ensure_future(_drive())
        return deferred
