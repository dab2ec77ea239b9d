"""Runtime trace infrastructure - separate from the deferreds it observes.

Trace captures settlement events for debugging and for checking the order
in which deferred operations settled. Tree relationships between combinator
events and their inputs are reconstructed only on demand via as_tree().
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single event captured at runtime.

    ``loop_time`` is the event loop clock when the event was recorded,
    or None when recorded outside a running loop.
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    loop_time: float | None = None
    info: dict[str, Any] = field(default_factory=dict)


def _loop_time() -> float | None:
    try:
        return asyncio.get_running_loop().time()
    except RuntimeError:
        return None


class Trace:
    """Runtime trace for capturing settlement events.

    Single-threaded: events are appended from the event loop only.

    Performance guarantees:
    - Trace disabled -> single flag check overhead
    - Evidence append is O(1)
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened (e.g., "created", "fulfilled", "all_begin")
            info: Additional context
            parent_id: Explicit parent event ID for tree relationships

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        event_id = self._next_id
        self._next_id += 1

        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                timestamp=datetime.now(UTC),
                loop_time=_loop_time(),
                info=info or {},
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        """Get all recorded events in recording order."""
        return list(self._events)

    def find(self, action: str | None = None, **info: Any) -> list[Evidence]:
        """Find events by action and/or info values."""
        return [
            ev
            for ev in self._events
            if (action is None or ev.action == action)
            and all(ev.info.get(k) == v for k, v in info.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Reconstruct parent-child relationships.

        Returns:
            Dict mapping parent_id to list of child_ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
